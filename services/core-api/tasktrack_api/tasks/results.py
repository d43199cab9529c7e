"""
TASKTRACK Core API - Service Results

Outcomes of task service mutations. Callers branch on the variant
instead of catching exceptions, so validation failures and missing
tasks stay distinguishable all the way to the HTTP boundary.
"""

from dataclasses import dataclass
from typing import Any, Union

from tasktrack_api.tasks.errors import TaskNotFoundError, TaskValidationError


@dataclass(frozen=True)
class Success:
    """The operation completed. value is the resulting task, or None for deletes."""

    value: Any = None

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Invalid:
    """The input broke a domain rule."""

    reason: str

    def unwrap(self) -> Any:
        raise TaskValidationError(self.reason)


@dataclass(frozen=True)
class NotFound:
    """No task exists with the given id."""

    task_id: str

    @property
    def reason(self) -> str:
        return f"Task not found with id: {self.task_id}"

    def unwrap(self) -> Any:
        raise TaskNotFoundError(self.task_id)


TaskResult = Union[Success, Invalid, NotFound]
