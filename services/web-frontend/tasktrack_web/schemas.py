"""
TASKTRACK Web Frontend - View Schemas

View models handed to the template layer. Task fields keep the core
API's camelCase names.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StatusOption(BaseModel):
    value: str
    label: str


STATUS_OPTIONS: List[StatusOption] = [
    StatusOption(value="TODO", label="To Do"),
    StatusOption(value="IN_PROGRESS", label="In Progress"),
    StatusOption(value="COMPLETED", label="Completed"),
]


class TaskItem(BaseModel):
    """A task as returned by the core API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: Optional[str] = None
    status: str
    status_display_name: Optional[str] = Field(default=None, alias="statusDisplayName")
    due_date_time: datetime = Field(alias="dueDateTime")


class TaskStats(BaseModel):
    """Dashboard counts; all zero when the core API is unavailable."""

    model_config = ConfigDict(populate_by_name=True)

    todo_count: int = Field(default=0, alias="todoCount")
    in_progress_count: int = Field(default=0, alias="inProgressCount")
    completed_count: int = Field(default=0, alias="completedCount")


class TaskListView(BaseModel):
    tasks: List[TaskItem] = Field(default_factory=list)
    stats: TaskStats = Field(default_factory=TaskStats)
    error: Optional[str] = Field(default=None, description="User-visible error notice")


class TaskFormData(BaseModel):
    """Values shown in the create/edit form, as submitted or as loaded."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    title: str = ""
    description: str = ""
    status: str = "TODO"
    due_date_time: str = Field(default="", alias="dueDateTime")


class TaskFormView(BaseModel):
    task: TaskFormData = Field(default_factory=TaskFormData)
    status_options: List[StatusOption] = Field(default_factory=lambda: list(STATUS_OPTIONS))
    error: Optional[str] = Field(default=None, description="User-visible error notice")
    detail: Optional[str] = Field(default=None, description="Reason reported by the core API")
