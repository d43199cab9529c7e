"""
TASKTRACK Core API - Tasks Module

Task entity, validation, queries and CRUD endpoints.
"""

from tasktrack_api.tasks.router import router as tasks_router

__all__ = ["tasks_router"]
