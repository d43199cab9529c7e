"""
TASKTRACK Core API - Task Validation

Domain rules checked before a task is persisted. The same rules run on
the create and update paths.
"""

from datetime import datetime, timedelta
from typing import Optional

from tasktrack_api.tasks.errors import TaskValidationError
from tasktrack_api.tasks.models import TaskDraft, as_utc

# A due date may lag the validation instant by at most this much
DUE_DATE_GRACE = timedelta(days=1)


def validate_task(draft: Optional[TaskDraft], now: datetime) -> None:
    """
    Check a draft against the task invariants.

    Args:
        draft: Candidate task data
        now: Validation instant (timezone-aware)

    Raises:
        TaskValidationError: naming the first rule that is violated
    """
    if draft is None:
        raise TaskValidationError("Task cannot be null")

    if draft.title is None or not draft.title.strip():
        raise TaskValidationError("Task title is required")

    if draft.due_date_time is None:
        raise TaskValidationError("Due date is required")

    if as_utc(draft.due_date_time) < as_utc(now) - DUE_DATE_GRACE:
        raise TaskValidationError("Due date cannot be more than 1 day in the past")
