"""
TASKTRACK Core API - Task Repository

Repository pattern for task data access.
Includes MongoDB implementation for runtime and in-memory implementation for testing.
"""

import re
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional, List

from motor.motor_asyncio import AsyncIOMotorDatabase

from tasktrack_api.tasks.models import Task, as_utc
from tasktrack_api.tasks.enums import TaskStatus
from tasktrack_api.tasks import queries


def _new_task_id() -> str:
    return str(uuid.uuid4())


class TaskRepositoryInterface(ABC):
    """
    Abstract interface for task repository.

    Enables swapping implementations (MongoDB for runtime, in-memory for tests).
    Every read reflects the last completed write.
    """

    @abstractmethod
    async def create(self, task: Task) -> Task:
        """Persist a new task and assign its id."""
        pass

    @abstractmethod
    async def get_by_id(self, task_id: str) -> Optional[Task]:
        pass

    @abstractmethod
    async def exists(self, task_id: str) -> bool:
        pass

    @abstractmethod
    async def update(self, task: Task) -> Optional[Task]:
        """Overwrite a stored task. Returns None if it no longer exists."""
        pass

    @abstractmethod
    async def delete(self, task_id: str) -> bool:
        pass

    @abstractmethod
    async def list_by_urgency(self) -> List[Task]:
        """All tasks, incomplete first, then by ascending due date."""
        pass

    @abstractmethod
    async def list_by_status(self, status: TaskStatus) -> List[Task]:
        pass

    @abstractmethod
    async def list_due_before(self, moment: datetime) -> List[Task]:
        """Tasks due strictly before moment."""
        pass

    @abstractmethod
    async def list_due_between(self, start: datetime, end: datetime) -> List[Task]:
        """Tasks due within [start, end]."""
        pass

    @abstractmethod
    async def search_by_title(self, term: str) -> List[Task]:
        """Tasks whose title contains term, ignoring case."""
        pass

    @abstractmethod
    async def count_by_status(self, status: TaskStatus) -> int:
        pass


def urgency_pipeline(match: Optional[dict] = None) -> List[dict]:
    """Aggregation pipeline implementing the urgency ordering."""
    pipeline: List[dict] = []
    if match:
        pipeline.append({"$match": match})
    pipeline.extend([
        {
            "$addFields": {
                "_urgency_rank": {
                    "$cond": [{"$eq": ["$status", TaskStatus.COMPLETED.value]}, 1, 0]
                }
            }
        },
        {"$sort": {"_urgency_rank": 1, "due_date_time": 1}},
        {"$project": {"_urgency_rank": 0}},
    ])
    return pipeline


def title_search_filter(term: str) -> dict:
    """Case-insensitive substring filter; the term is matched literally."""
    return {"title": {"$regex": re.escape(term), "$options": "i"}}


class TaskRepository(TaskRepositoryInterface):
    """MongoDB implementation of the task repository."""

    COLLECTION_NAME = "tasks"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def ensure_indexes(self) -> None:
        await self.collection.create_index("status")
        await self.collection.create_index("due_date_time")

    async def _find(self, query: dict) -> List[Task]:
        cursor = self.collection.find(query).sort("due_date_time", 1)
        tasks: List[Task] = []
        async for doc in cursor:
            tasks.append(Task.from_dict(doc))
        return tasks

    async def create(self, task: Task) -> Task:
        task.id = _new_task_id()
        await self.collection.insert_one(task.to_dict())
        return task

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        doc = await self.collection.find_one({"_id": task_id})
        if doc is None:
            return None
        return Task.from_dict(doc)

    async def exists(self, task_id: str) -> bool:
        return await self.collection.count_documents({"_id": task_id}, limit=1) > 0

    async def update(self, task: Task) -> Optional[Task]:
        task.updated_at = datetime.now(timezone.utc)
        updates = task.to_dict()
        del updates["_id"]
        del updates["created_at"]

        result = await self.collection.find_one_and_update(
            {"_id": task.id},
            {"$set": updates},
            return_document=True,
        )
        if result is None:
            return None
        return Task.from_dict(result)

    async def delete(self, task_id: str) -> bool:
        result = await self.collection.delete_one({"_id": task_id})
        return result.deleted_count > 0

    async def list_by_urgency(self) -> List[Task]:
        cursor = self.collection.aggregate(urgency_pipeline())
        tasks: List[Task] = []
        async for doc in cursor:
            tasks.append(Task.from_dict(doc))
        return tasks

    async def list_by_status(self, status: TaskStatus) -> List[Task]:
        return await self._find({"status": status.value})

    async def list_due_before(self, moment: datetime) -> List[Task]:
        return await self._find({"due_date_time": {"$lt": as_utc(moment)}})

    async def list_due_between(self, start: datetime, end: datetime) -> List[Task]:
        return await self._find(
            {"due_date_time": {"$gte": as_utc(start), "$lte": as_utc(end)}}
        )

    async def search_by_title(self, term: str) -> List[Task]:
        return await self._find(title_search_filter(term))

    async def count_by_status(self, status: TaskStatus) -> int:
        return await self.collection.count_documents({"status": status.value})


class InMemoryTaskRepository(TaskRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._tasks: dict[str, Task] = {}

    def clear(self) -> None:
        self._tasks.clear()

    def _matching(self, predicate) -> List[Task]:
        results = [task for task in self._tasks.values() if predicate(task)]
        results.sort(key=lambda t: as_utc(t.due_date_time))
        return results

    async def create(self, task: Task) -> Task:
        task.id = _new_task_id()
        self._tasks[task.id] = task
        return task

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        return self._tasks.get(task_id)

    async def exists(self, task_id: str) -> bool:
        return task_id in self._tasks

    async def update(self, task: Task) -> Optional[Task]:
        if task.id not in self._tasks:
            return None
        task.updated_at = datetime.now(timezone.utc)
        self._tasks[task.id] = task
        return task

    async def delete(self, task_id: str) -> bool:
        if task_id not in self._tasks:
            return False
        del self._tasks[task_id]
        return True

    async def list_by_urgency(self) -> List[Task]:
        return queries.order_by_urgency(self._tasks.values())

    async def list_by_status(self, status: TaskStatus) -> List[Task]:
        return self._matching(lambda t: t.status == status)

    async def list_due_before(self, moment: datetime) -> List[Task]:
        return self._matching(lambda t: queries.is_overdue(t, moment))

    async def list_due_between(self, start: datetime, end: datetime) -> List[Task]:
        return self._matching(lambda t: queries.is_due_between(t, start, end))

    async def search_by_title(self, term: str) -> List[Task]:
        return self._matching(lambda t: queries.title_matches(t, term))

    async def count_by_status(self, status: TaskStatus) -> int:
        return sum(1 for t in self._tasks.values() if t.status == status)
