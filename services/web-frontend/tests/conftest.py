"""
TASKTRACK Web Frontend - Test Configuration

The core API is replaced by an httpx.MockTransport, so the real client
code runs without a network.
"""

import json
from typing import Callable, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from tasktrack_web.client import CoreApiClient
from tasktrack_web.main import app
from tasktrack_web.router import get_core_api_client


SAMPLE_TASK = {
    "id": "task-1",
    "title": "Review case file",
    "description": "Check exhibits",
    "status": "IN_PROGRESS",
    "statusDisplayName": "In Progress",
    "dueDateTime": "2025-01-16T09:30:00Z",
    "createdAt": "2025-01-15T12:00:00Z",
    "updatedAt": "2025-01-15T12:00:00Z",
}

SAMPLE_STATS = {"todoCount": 2, "inProgressCount": 1, "completedCount": 0}


class FakeCoreApi:
    """Records requests and answers them like the core API would."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.failure: Optional[Callable[[httpx.Request], httpx.Response]] = None

    def json_body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.failure is not None:
            return self.failure(request)

        path = request.url.path
        if request.method == "GET" and path == "/tasks":
            return httpx.Response(200, json=[SAMPLE_TASK])
        if request.method == "GET" and path == "/tasks/stats":
            return httpx.Response(200, json=SAMPLE_STATS)
        if request.method == "GET" and path == "/tasks/task-1":
            return httpx.Response(200, json=SAMPLE_TASK)
        if request.method == "POST" and path == "/tasks":
            return httpx.Response(201, json={**SAMPLE_TASK, **json.loads(request.content)})
        if request.method == "PUT" and path == "/tasks/task-1":
            return httpx.Response(200, json=SAMPLE_TASK)
        if request.method == "DELETE" and path == "/tasks/task-1":
            return httpx.Response(200, json={"message": "Task deleted successfully", "id": "task-1"})
        task_id = path.rsplit("/", 1)[-1]
        return httpx.Response(404, json={"detail": f"Task not found with id: {task_id}"})


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


@pytest.fixture
def sample_task() -> dict:
    return dict(SAMPLE_TASK)


@pytest.fixture
def sample_stats() -> dict:
    return dict(SAMPLE_STATS)


@pytest.fixture
def unreachable():
    """Transport handler that fails like a refused connection."""
    return _unreachable


@pytest.fixture
def core_api() -> FakeCoreApi:
    return FakeCoreApi()


@pytest.fixture
def api_client(core_api) -> CoreApiClient:
    return CoreApiClient(base_url="http://core-api.test", transport=httpx.MockTransport(core_api))


@pytest.fixture
def client(api_client):
    """Frontend test client wired to the fake core API."""
    app.dependency_overrides[get_core_api_client] = lambda: api_client
    yield TestClient(app)
    app.dependency_overrides.clear()
