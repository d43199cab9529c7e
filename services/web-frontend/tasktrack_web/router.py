"""
TASKTRACK Web Frontend - Task Views

List, create, edit and delete flows backed by the core API.
When the core API fails, views degrade to an error notice instead of
failing the request.
"""

import logging
from typing import Annotated, Optional, Union

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from tasktrack_web.client import CoreApiClient, CoreApiError
from tasktrack_web.schemas import (
    TaskFormData,
    TaskFormView,
    TaskItem,
    TaskListView,
    TaskStats,
)

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/tasks", tags=["Task Views"])

# datetime-local input format
FORM_DATETIME_FORMAT = "%Y-%m-%dT%H:%M"


def get_core_api_client() -> CoreApiClient:
    """Dependency to get the core API client."""
    return CoreApiClient()


CoreApiClientDep = Annotated[CoreApiClient, Depends(get_core_api_client)]


def _redirect_to_list() -> RedirectResponse:
    return RedirectResponse(url="/tasks", status_code=status.HTTP_303_SEE_OTHER)


def _payload(
    title: str,
    description: str,
    task_status: Optional[str],
    due_date_time: str,
) -> dict:
    """Core API request body; blank optional inputs are sent as null."""
    return {
        "title": title,
        "description": description or None,
        "status": task_status or None,
        "dueDateTime": due_date_time or None,
    }


def _form_data_from_task(task: TaskItem) -> TaskFormData:
    return TaskFormData(
        id=task.id,
        title=task.title,
        description=task.description or "",
        status=task.status,
        due_date_time=task.due_date_time.strftime(FORM_DATETIME_FORMAT),
    )


@router.get("", response_model=TaskListView)
async def task_list(client: CoreApiClientDep) -> TaskListView:
    """Task list with dashboard statistics."""
    try:
        tasks = [TaskItem.model_validate(t) for t in await client.list_tasks()]
        stats = TaskStats.model_validate(await client.get_stats())
    except (CoreApiError, ValidationError, TypeError) as e:
        logger.error("Error fetching tasks: %s", e)
        return TaskListView(error="Could not load tasks")

    return TaskListView(tasks=tasks, stats=stats)


@router.get("/create", response_model=TaskFormView)
async def create_task_form() -> TaskFormView:
    return TaskFormView()


@router.post("/create", response_model=None)
async def create_task(
    client: CoreApiClientDep,
    title: Annotated[str, Form()] = "",
    description: Annotated[str, Form()] = "",
    task_status: Annotated[str, Form(alias="status")] = "",
    due_date_time: Annotated[str, Form(alias="dueDateTime")] = "",
) -> Union[RedirectResponse, TaskFormView]:
    """Submit the create form. New tasks default to TODO."""
    try:
        await client.create_task(
            _payload(title, description, task_status or "TODO", due_date_time)
        )
    except CoreApiError as e:
        logger.error("Error creating task: %s", e.message)
        return TaskFormView(
            task=TaskFormData(
                title=title,
                description=description,
                status=task_status or "TODO",
                due_date_time=due_date_time,
            ),
            error="Failed to create task. Please try again.",
            detail=e.message,
        )
    return _redirect_to_list()


@router.get("/{task_id}/edit", response_model=None)
async def edit_task_form(
    task_id: str,
    client: CoreApiClientDep,
) -> Union[RedirectResponse, TaskFormView]:
    """Edit form for an existing task; back to the list if it cannot be loaded."""
    try:
        task = TaskItem.model_validate(await client.get_task(task_id))
    except (CoreApiError, ValidationError) as e:
        logger.error("Error fetching task %s: %s", task_id, e)
        return _redirect_to_list()
    return TaskFormView(task=_form_data_from_task(task))


@router.api_route("/{task_id}/edit", methods=["POST", "PUT"], response_model=None)
async def update_task(
    task_id: str,
    client: CoreApiClientDep,
    title: Annotated[str, Form()] = "",
    description: Annotated[str, Form()] = "",
    task_status: Annotated[str, Form(alias="status")] = "",
    due_date_time: Annotated[str, Form(alias="dueDateTime")] = "",
) -> Union[RedirectResponse, TaskFormView]:
    """Submit the edit form. HTML forms can only POST, so PUT is optional."""
    try:
        await client.update_task(
            task_id,
            _payload(title, description, task_status, due_date_time),
        )
    except CoreApiError as e:
        logger.error("Error updating task %s: %s", task_id, e.message)
        return TaskFormView(
            task=TaskFormData(
                id=task_id,
                title=title,
                description=description,
                status=task_status,
                due_date_time=due_date_time,
            ),
            error="Failed to update task. Please try again.",
            detail=e.message,
        )
    return _redirect_to_list()


@router.post("/{task_id}/delete")
async def delete_task(task_id: str, client: CoreApiClientDep) -> RedirectResponse:
    """Delete and return to the list, whether or not the delete succeeded."""
    try:
        await client.delete_task(task_id)
    except CoreApiError as e:
        logger.error("Error deleting task %s: %s", task_id, e.message)
    return _redirect_to_list()
