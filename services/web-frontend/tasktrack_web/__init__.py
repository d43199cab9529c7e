"""
TASKTRACK Web Frontend

Renders task views by calling the core API as a plain REST client.
"""
