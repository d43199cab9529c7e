"""
TASKTRACK Core API - Task Schemas

Pydantic models for task API requests and responses.
Wire field names are camelCase.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from tasktrack_api.tasks.enums import TaskStatus, display_label
from tasktrack_api.tasks.models import Task
from tasktrack_api.tasks.queries import TaskStatistics


class TaskRequest(BaseModel):
    """
    Request model for creating or replacing a task.

    Fields are deliberately loose: domain rules (title required, due date
    recency, status spelling) are enforced by the service so that they
    surface as 400 responses with a readable reason.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(default=None, description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    status: Optional[str] = Field(
        default=None,
        description="Task status, e.g. TODO, IN_PROGRESS, 'in progress'",
    )
    due_date_time: Optional[datetime] = Field(
        default=None,
        alias="dueDateTime",
        description="Due date and time; naive values are taken as UTC",
    )


class TaskResponse(BaseModel):
    """Response model for a single task."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Task ID")
    title: str = Field(description="Task title")
    description: Optional[str] = Field(default=None, description="Task description")
    status: TaskStatus = Field(description="Task status")
    status_display_name: str = Field(alias="statusDisplayName", description="Human-readable status")
    due_date_time: datetime = Field(alias="dueDateTime", description="Due date and time")
    created_at: datetime = Field(alias="createdAt", description="Creation timestamp")
    updated_at: datetime = Field(alias="updatedAt", description="Last update timestamp")

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            status_display_name=display_label(task.status),
            due_date_time=task.due_date_time,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskDeleteResponse(BaseModel):
    """Response model for task deletion."""

    message: str = Field(description="Success message")
    id: str = Field(description="Deleted task ID")


class TaskStatsResponse(BaseModel):
    """Task counts per status for dashboards."""

    model_config = ConfigDict(populate_by_name=True)

    todo_count: int = Field(alias="todoCount")
    in_progress_count: int = Field(alias="inProgressCount")
    completed_count: int = Field(alias="completedCount")

    @classmethod
    def from_statistics(cls, stats: TaskStatistics) -> "TaskStatsResponse":
        return cls(
            todo_count=stats.todo,
            in_progress_count=stats.in_progress,
            completed_count=stats.completed,
        )
