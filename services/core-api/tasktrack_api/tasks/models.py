"""
TASKTRACK Core API - Task Models

Internal task model for database operations, plus the unvalidated
draft shape used on the create and update paths.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from tasktrack_api.tasks.enums import TaskStatus


def _utcnow() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class TaskDraft:
    """
    Task data as supplied by a caller, before validation.

    Every field is optional here; validate_task decides what is acceptable.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date_time: Optional[datetime] = None


@dataclass
class Task:
    """Task entity for database storage."""

    title: str
    status: TaskStatus
    due_date_time: datetime
    description: Optional[str] = None
    id: Optional[str] = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def from_draft(cls, draft: TaskDraft, status: TaskStatus) -> "Task":
        """Build an unsaved task from a validated draft. The store assigns the id."""
        now = _utcnow()
        return cls(
            title=draft.title,
            description=draft.description,
            status=status,
            due_date_time=as_utc(draft.due_date_time),
            created_at=now,
            updated_at=now,
        )

    def apply(self, draft: TaskDraft) -> None:
        """Overwrite the mutable fields from a validated draft. The id is untouched."""
        self.title = draft.title
        self.description = draft.description
        if draft.status is not None:
            self.status = draft.status
        self.due_date_time = as_utc(draft.due_date_time)

    def to_dict(self) -> dict:
        """Convert task to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "due_date_time": self.due_date_time,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create task from MongoDB document."""
        return cls(
            id=data["_id"],
            title=data["title"],
            description=data.get("description"),
            status=TaskStatus(data["status"]),
            due_date_time=as_utc(data["due_date_time"]),
            created_at=as_utc(data["created_at"]),
            updated_at=as_utc(data["updated_at"]),
        )
