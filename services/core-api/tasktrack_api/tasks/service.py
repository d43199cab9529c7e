"""
TASKTRACK Core API - Task Service

Business logic for task operations: validation, default status,
persistence, and the read queries used by the HTTP layer.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, List, Callable

from tasktrack_api.tasks.enums import TaskStatus, STATUS_ORDER
from tasktrack_api.tasks.errors import TaskValidationError
from tasktrack_api.tasks.models import Task, TaskDraft, as_utc
from tasktrack_api.tasks.queries import TaskStatistics
from tasktrack_api.tasks.repository import TaskRepositoryInterface
from tasktrack_api.tasks.results import Success, Invalid, NotFound, TaskResult
from tasktrack_api.tasks.validation import validate_task

logger = logging.getLogger(__name__)


class TaskService:
    """Service layer for task business logic."""

    def __init__(
        self,
        repository: TaskRepositoryInterface,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the task service.

        Args:
            repository: Task repository implementation
            clock: Optional clock function for testing (returns current datetime)
        """
        self.repository = repository
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def _now(self) -> datetime:
        """Get current time using the configured clock."""
        return self._clock()

    def _validate(self, draft: Optional[TaskDraft]) -> Optional[Invalid]:
        try:
            validate_task(draft, self._now())
        except TaskValidationError as e:
            logger.warning("Rejected task input: %s", e.reason)
            return Invalid(e.reason)
        return None

    async def create_task(self, draft: Optional[TaskDraft]) -> TaskResult:
        """
        Validate and persist a new task.

        A draft without a status is created as TODO.
        Returns Success(task) carrying the assigned id, or Invalid.
        """
        invalid = self._validate(draft)
        if invalid is not None:
            return invalid

        status = draft.status if draft.status is not None else TaskStatus.TODO
        task = await self.repository.create(Task.from_draft(draft, status))
        logger.info("Created task id=%s status=%s", task.id, task.status.value)
        return Success(task)

    async def get_all_tasks(self) -> List[Task]:
        """All tasks in urgency order."""
        return await self.repository.list_by_urgency()

    async def get_task_by_id(self, task_id: str) -> Optional[Task]:
        return await self.repository.get_by_id(task_id)

    async def update_task(self, task_id: str, draft: Optional[TaskDraft]) -> TaskResult:
        """
        Overwrite title, description, status and due date of an existing task.

        Existence is checked before validation, so an unknown id is
        NotFound even when the draft is also invalid.
        """
        existing = await self.repository.get_by_id(task_id)
        if existing is None:
            return NotFound(task_id)

        invalid = self._validate(draft)
        if invalid is not None:
            return invalid

        existing.apply(draft)
        task = await self.repository.update(existing)
        if task is None:
            # Deleted by another caller between read and write
            return NotFound(task_id)
        logger.info("Updated task id=%s status=%s", task.id, task.status.value)
        return Success(task)

    async def delete_task(self, task_id: str) -> TaskResult:
        if not await self.repository.exists(task_id):
            return NotFound(task_id)
        if not await self.repository.delete(task_id):
            return NotFound(task_id)
        logger.info("Deleted task id=%s", task_id)
        return Success()

    async def get_tasks_by_status(self, status: TaskStatus) -> List[Task]:
        return await self.repository.list_by_status(status)

    async def get_overdue_tasks(self) -> List[Task]:
        """Tasks due strictly before the current instant, any status."""
        return await self.repository.list_due_before(self._now())

    async def get_tasks_due_between(self, start: datetime, end: datetime) -> TaskResult:
        """Tasks due within [start, end]. Returns Success(list) or Invalid."""
        start, end = as_utc(start), as_utc(end)
        if start > end:
            return Invalid("Range start must not be after range end")
        return Success(await self.repository.list_due_between(start, end))

    async def search_tasks(self, term: Optional[str]) -> List[Task]:
        """
        Title search, ignoring case.

        A blank term is not a filter: the full urgency-ordered list is returned.
        """
        if term is None or not term.strip():
            return await self.get_all_tasks()
        return await self.repository.search_by_title(term.strip())

    async def get_task_statistics(self) -> TaskStatistics:
        """Counts per status in TODO, IN_PROGRESS, COMPLETED order."""
        counts = [await self.repository.count_by_status(status) for status in STATUS_ORDER]
        return TaskStatistics(*counts)
