"""
TASKTRACK Core API - Task Router

CRUD and query endpoints for task management.
"""

from datetime import datetime
from typing import Annotated, List, NoReturn, Optional

from fastapi import APIRouter, HTTPException, status, Depends, Query
from motor.motor_asyncio import AsyncIOMotorDatabase

from tasktrack_api.database import get_database
from tasktrack_api.tasks.enums import parse_task_status
from tasktrack_api.tasks.errors import InvalidTaskStatusError
from tasktrack_api.tasks.models import TaskDraft
from tasktrack_api.tasks.repository import TaskRepository, TaskRepositoryInterface
from tasktrack_api.tasks.results import Invalid, NotFound, TaskResult
from tasktrack_api.tasks.service import TaskService
from tasktrack_api.tasks.schemas import (
    TaskRequest,
    TaskResponse,
    TaskDeleteResponse,
    TaskStatsResponse,
)


router = APIRouter(prefix="/tasks", tags=["Tasks"])


async def get_task_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> TaskRepositoryInterface:
    """Dependency to get task repository instance."""
    return TaskRepository(db)


async def get_task_service(
    repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)]
) -> TaskService:
    """Dependency to get task service instance."""
    return TaskService(repository)


TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]


def _bad_request(detail: str) -> NoReturn:
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _to_draft(request: TaskRequest) -> TaskDraft:
    """Convert the request body, parsing the status spelling leniently."""
    task_status = None
    if request.status is not None:
        try:
            task_status = parse_task_status(request.status)
        except InvalidTaskStatusError as e:
            _bad_request(e.reason)
    return TaskDraft(
        title=request.title,
        description=request.description,
        status=task_status,
        due_date_time=request.due_date_time,
    )


def _unwrap(result: TaskResult):
    """Map service outcomes onto HTTP errors; return the success value."""
    if isinstance(result, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.reason)
    if isinstance(result, Invalid):
        _bad_request(result.reason)
    return result.value


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(request: TaskRequest, service: TaskServiceDep) -> TaskResponse:
    """
    Create a new task.

    Status defaults to TODO when omitted.
    Returns 400 if the task breaks a validation rule.
    """
    task = _unwrap(await service.create_task(_to_draft(request)))
    return TaskResponse.from_task(task)


@router.get(
    "",
    response_model=List[TaskResponse],
    summary="List tasks by urgency",
)
async def list_tasks(service: TaskServiceDep) -> List[TaskResponse]:
    """All tasks: incomplete first by due date, then completed by due date."""
    return [TaskResponse.from_task(t) for t in await service.get_all_tasks()]


@router.get(
    "/stats",
    response_model=TaskStatsResponse,
    summary="Task counts per status",
)
async def get_task_statistics(service: TaskServiceDep) -> TaskStatsResponse:
    return TaskStatsResponse.from_statistics(await service.get_task_statistics())


@router.get(
    "/overdue",
    response_model=List[TaskResponse],
    summary="List overdue tasks",
)
async def list_overdue_tasks(service: TaskServiceDep) -> List[TaskResponse]:
    """Tasks whose due date is before the current time."""
    return [TaskResponse.from_task(t) for t in await service.get_overdue_tasks()]


@router.get(
    "/due",
    response_model=List[TaskResponse],
    summary="List tasks due within a time range",
)
async def list_tasks_due_between(
    service: TaskServiceDep,
    start: datetime = Query(description="Range start (inclusive)"),
    end: datetime = Query(description="Range end (inclusive)"),
) -> List[TaskResponse]:
    tasks = _unwrap(await service.get_tasks_due_between(start, end))
    return [TaskResponse.from_task(t) for t in tasks]


@router.get(
    "/search",
    response_model=List[TaskResponse],
    summary="Search tasks by title",
)
async def search_tasks(
    service: TaskServiceDep,
    q: Optional[str] = Query(default=None, description="Case-insensitive title fragment"),
) -> List[TaskResponse]:
    """A blank query returns the full urgency-ordered list."""
    return [TaskResponse.from_task(t) for t in await service.search_tasks(q)]


@router.get(
    "/status/{status_value}",
    response_model=List[TaskResponse],
    summary="List tasks with a given status",
)
async def list_tasks_by_status(status_value: str, service: TaskServiceDep) -> List[TaskResponse]:
    """
    Filter by status. The status is parsed leniently ("in progress" works).

    Returns 400 for an unknown status.
    """
    try:
        task_status = parse_task_status(status_value)
    except InvalidTaskStatusError as e:
        _bad_request(e.reason)
    return [TaskResponse.from_task(t) for t in await service.get_tasks_by_status(task_status)]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get a task by ID",
)
async def get_task(task_id: str, service: TaskServiceDep) -> TaskResponse:
    """
    Get a specific task by ID.

    Returns 404 if the task doesn't exist.
    """
    task = await service.get_task_by_id(task_id)
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=NotFound(task_id).reason,
        )
    return TaskResponse.from_task(task)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Replace a task",
)
async def update_task(
    task_id: str,
    request: TaskRequest,
    service: TaskServiceDep,
) -> TaskResponse:
    """
    Overwrite title, description, status and due date of a task.

    Returns 404 if the task doesn't exist, 400 if the new data is invalid.
    """
    task = _unwrap(await service.update_task(task_id, _to_draft(request)))
    return TaskResponse.from_task(task)


@router.delete(
    "/{task_id}",
    response_model=TaskDeleteResponse,
    summary="Delete a task",
)
async def delete_task(task_id: str, service: TaskServiceDep) -> TaskDeleteResponse:
    """
    Delete a task by ID.

    Returns 404 if the task doesn't exist.
    """
    _unwrap(await service.delete_task(task_id))
    return TaskDeleteResponse(message="Task deleted successfully", id=task_id)
