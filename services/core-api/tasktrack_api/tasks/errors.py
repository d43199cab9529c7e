"""
TASKTRACK Core API - Task Errors
"""


class TaskValidationError(ValueError):
    """Task input breaks a domain rule. The message is safe to show to clients."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class InvalidTaskStatusError(TaskValidationError):
    """A status string does not name any TaskStatus."""


class TaskNotFoundError(LookupError):
    """No task exists with the requested id."""

    def __init__(self, task_id: str):
        super().__init__(f"Task not found with id: {task_id}")
        self.task_id = task_id
