"""
TASKTRACK Core API - Test Configuration

Shared fixtures for CI-safe testing without MongoDB.
"""

import pytest
from datetime import datetime, timezone, timedelta
from fastapi.testclient import TestClient

from tasktrack_api.main import app
from tasktrack_api.tasks.repository import InMemoryTaskRepository
from tasktrack_api.tasks.router import get_task_service
from tasktrack_api.tasks.service import TaskService


# Global in-memory repository for tests
_test_repository = InMemoryTaskRepository()


# Time control fixtures for deterministic validation and overdue testing
class FrozenClock:
    """A clock that returns a fixed time for deterministic testing."""

    def __init__(self, frozen_time: datetime):
        self._frozen_time = frozen_time

    def __call__(self) -> datetime:
        return self._frozen_time

    def set(self, new_time: datetime) -> None:
        self._frozen_time = new_time

    def advance(self, delta: timedelta) -> None:
        self._frozen_time += delta


@pytest.fixture
def frozen_now() -> datetime:
    """A fixed 'now' time for testing."""
    return datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock(frozen_now) -> FrozenClock:
    """A controllable clock shared by the service under test."""
    return FrozenClock(frozen_now)


@pytest.fixture
def task_repository():
    """Provide a fresh in-memory task repository for each test."""
    _test_repository.clear()
    return _test_repository


@pytest.fixture
def task_service(task_repository, frozen_clock) -> TaskService:
    """Task service over the in-memory repository and frozen clock."""
    return TaskService(task_repository, clock=frozen_clock)


@pytest.fixture
def client(task_service):
    """Create test client with the in-memory service."""

    async def override_get_task_service():
        return task_service

    app.dependency_overrides[get_task_service] = override_get_task_service
    yield TestClient(app)
    # Clean up override after test
    app.dependency_overrides.clear()
