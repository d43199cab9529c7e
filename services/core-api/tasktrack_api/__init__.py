"""
TASKTRACK Core API

Backend service and system of record for TASKTRACK tasks.
"""
