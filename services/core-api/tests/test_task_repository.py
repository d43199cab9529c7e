"""
TASKTRACK Core API - Task Repository Tests

MongoDB query construction, checked against a mocked motor collection.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import AsyncMock, MagicMock

from tasktrack_api.tasks.enums import TaskStatus
from tasktrack_api.tasks.models import Task
from tasktrack_api.tasks.repository import (
    TaskRepository,
    title_search_filter,
    urgency_pipeline,
)


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def repository(collection):
    db = MagicMock()
    db.__getitem__.return_value = collection
    return TaskRepository(db)


def make_doc(task_id: str, due: datetime) -> dict:
    return {
        "_id": task_id,
        "title": "Stored",
        "description": None,
        "status": "TODO",
        "due_date_time": due,
        "created_at": due,
        "updated_at": due,
    }


class TestQueryBuilders:

    def test_urgency_pipeline_sorts_completed_last(self):
        pipeline = urgency_pipeline()
        rank = pipeline[0]["$addFields"]["_urgency_rank"]
        assert rank == {"$cond": [{"$eq": ["$status", "COMPLETED"]}, 1, 0]}
        assert pipeline[1] == {"$sort": {"_urgency_rank": 1, "due_date_time": 1}}
        assert pipeline[2] == {"$project": {"_urgency_rank": 0}}

    def test_urgency_pipeline_with_match(self):
        pipeline = urgency_pipeline({"status": "TODO"})
        assert pipeline[0] == {"$match": {"status": "TODO"}}
        assert len(pipeline) == 4

    def test_title_search_escapes_regex(self):
        assert title_search_filter("a.b (c)") == {
            "title": {"$regex": r"a\.b\ \(c\)", "$options": "i"}
        }


class TestMongoRepository:

    async def test_create_assigns_id(self, repository, collection, frozen_now):
        collection.insert_one = AsyncMock()
        task = Task(title="New", status=TaskStatus.TODO, due_date_time=frozen_now)

        created = await repository.create(task)

        assert created.id
        stored = collection.insert_one.call_args.args[0]
        assert stored["_id"] == created.id
        assert stored["status"] == "TODO"
        assert stored["due_date_time"] == frozen_now

    async def test_get_by_id_missing(self, repository, collection):
        collection.find_one = AsyncMock(return_value=None)
        assert await repository.get_by_id("missing") is None
        collection.find_one.assert_awaited_once_with({"_id": "missing"})

    async def test_get_by_id_normalizes_naive_datetimes(self, repository, collection):
        naive = datetime(2025, 1, 20, 9, 30)
        collection.find_one = AsyncMock(return_value=make_doc("t-1", naive))

        task = await repository.get_by_id("t-1")

        assert task.id == "t-1"
        assert task.due_date_time == naive.replace(tzinfo=timezone.utc)

    async def test_exists(self, repository, collection):
        collection.count_documents = AsyncMock(return_value=1)
        assert await repository.exists("t-1")
        collection.count_documents.assert_awaited_once_with({"_id": "t-1"}, limit=1)

    async def test_update_sets_fields_except_id(self, repository, collection, frozen_now):
        collection.find_one_and_update = AsyncMock(return_value=make_doc("t-1", frozen_now))
        task = Task(id="t-1", title="Stored", status=TaskStatus.TODO, due_date_time=frozen_now)

        updated = await repository.update(task)

        assert updated.id == "t-1"
        query, update = collection.find_one_and_update.call_args.args
        assert query == {"_id": "t-1"}
        assert "_id" not in update["$set"]
        assert "created_at" not in update["$set"]
        assert update["$set"]["title"] == "Stored"

    async def test_update_missing_returns_none(self, repository, collection, frozen_now):
        collection.find_one_and_update = AsyncMock(return_value=None)
        task = Task(id="gone", title="x", status=TaskStatus.TODO, due_date_time=frozen_now)
        assert await repository.update(task) is None

    async def test_delete(self, repository, collection):
        collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=0))
        assert await repository.delete("missing") is False

    async def test_count_by_status(self, repository, collection):
        collection.count_documents = AsyncMock(return_value=3)
        assert await repository.count_by_status(TaskStatus.COMPLETED) == 3
        collection.count_documents.assert_awaited_once_with({"status": "COMPLETED"})

    async def test_list_due_before_uses_strict_bound(self, repository, collection, frozen_now):
        cursor = MagicMock()
        cursor.__aiter__.return_value = [make_doc("t-1", frozen_now - timedelta(hours=1))]
        collection.find.return_value.sort.return_value = cursor

        tasks = await repository.list_due_before(frozen_now)

        assert [t.id for t in tasks] == ["t-1"]
        collection.find.assert_called_once_with({"due_date_time": {"$lt": frozen_now}})

    async def test_list_by_urgency_uses_pipeline(self, repository, collection, frozen_now):
        cursor = MagicMock()
        cursor.__aiter__.return_value = [make_doc("t-1", frozen_now)]
        collection.aggregate.return_value = cursor

        tasks = await repository.list_by_urgency()

        assert [t.id for t in tasks] == ["t-1"]
        collection.aggregate.assert_called_once_with(urgency_pipeline())
