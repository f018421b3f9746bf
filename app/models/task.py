"""Task domain model"""
from datetime import date, datetime
from enum import Enum
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer


class Priority(str, Enum):
    """Task priority enum"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskBase(BaseModel):
    """Base task fields shared by creation and stored tasks"""
    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    tags: List[str] = Field(default_factory=list)
    due_date: Optional[date] = None


class TaskCreate(TaskBase):
    """Task creation model, fully defaulted before it reaches the store"""
    completed: bool = False


class TaskUpdate(BaseModel):
    """Task update model - only explicitly set fields are written.

    Use ``model_dump(exclude_unset=True)`` so that an explicit ``due_date=None``
    clears the due date while omitted fields stay untouched.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[Priority] = None
    completed: Optional[bool] = None
    tags: Optional[List[str]] = None
    due_date: Optional[date] = None


class TaskFilter(BaseModel):
    """Equality constraints applied when listing tasks"""
    completed: Optional[bool] = None
    priority: Optional[Priority] = None

    def as_filters(self) -> dict:
        return self.model_dump(exclude_none=True, mode="json")


class Task(TaskBase):
    """Complete task model from database"""
    id: UUID
    completed: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

    @field_serializer("id")
    def serialize_id(self, id: UUID) -> str:
        return str(id)


def parse_task_id(raw: str) -> Optional[UUID]:
    """Parse a task identifier, returning None when it is not a valid UUID."""
    if isinstance(raw, UUID):
        return raw
    if not isinstance(raw, str):
        return None
    try:
        return UUID(raw)
    except ValueError:
        return None
