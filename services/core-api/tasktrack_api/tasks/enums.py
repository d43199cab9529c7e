"""
TASKTRACK Core API - Task Enums

Task lifecycle states and their display labels.
"""

from enum import Enum
from typing import Optional

from tasktrack_api.tasks.errors import InvalidTaskStatusError


class TaskStatus(str, Enum):
    """Task status values. The wire value is the machine name."""
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


STATUS_DISPLAY_LABELS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
}

# Fixed order used by statistics and form option lists
STATUS_ORDER: tuple[TaskStatus, ...] = (
    TaskStatus.TODO,
    TaskStatus.IN_PROGRESS,
    TaskStatus.COMPLETED,
)


def display_label(status: TaskStatus) -> str:
    """Human-readable label for a status."""
    return STATUS_DISPLAY_LABELS[status]


def parse_task_status(value: Optional[str]) -> TaskStatus:
    """
    Convert a free-form string to a TaskStatus.

    Matching is case-insensitive and spaces count as underscores,
    so "in progress", "In Progress" and "IN_PROGRESS" are equivalent.

    Raises:
        InvalidTaskStatusError: if the value is blank or names no status
    """
    if value is None or not value.strip():
        raise InvalidTaskStatusError("Status value cannot be null or empty")

    key = value.strip().upper().replace(" ", "_")
    try:
        return TaskStatus[key]
    except KeyError:
        valid = ", ".join(status.name for status in STATUS_ORDER)
        raise InvalidTaskStatusError(
            f"Invalid task status: {value}. Valid values are: {valid}"
        ) from None
