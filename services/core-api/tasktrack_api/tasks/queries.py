"""
TASKTRACK Core API - Task Queries

Pure predicates and orderings over tasks. The in-memory repository
evaluates these directly; the MongoDB repository expresses the same
semantics as query documents.
"""

from datetime import datetime
from typing import Iterable, List, NamedTuple, Tuple

from tasktrack_api.tasks.enums import TaskStatus
from tasktrack_api.tasks.models import Task, as_utc


class TaskStatistics(NamedTuple):
    """Task counts per status, in fixed TODO, IN_PROGRESS, COMPLETED order."""

    todo: int
    in_progress: int
    completed: int


def urgency_rank(task: Task) -> int:
    """Completed tasks rank after everything else."""
    return 1 if task.status == TaskStatus.COMPLETED else 0


def urgency_sort_key(task: Task) -> Tuple[int, datetime]:
    """
    Sort key for the urgency ordering.

    Incomplete tasks come first, earliest due date first; completed tasks
    follow, also by due date.
    """
    return urgency_rank(task), as_utc(task.due_date_time)


def order_by_urgency(tasks: Iterable[Task]) -> List[Task]:
    return sorted(tasks, key=urgency_sort_key)


def is_overdue(task: Task, now: datetime) -> bool:
    """Overdue = due date strictly before now, regardless of status."""
    return as_utc(task.due_date_time) < as_utc(now)


def is_due_between(task: Task, start: datetime, end: datetime) -> bool:
    """Inclusive on both ends."""
    return as_utc(start) <= as_utc(task.due_date_time) <= as_utc(end)


def title_matches(task: Task, term: str) -> bool:
    """Case-insensitive substring match on the title."""
    return term.casefold() in task.title.casefold()

