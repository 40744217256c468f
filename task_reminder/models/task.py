"""Task domain model"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case in Python and in the store, camelCase on the wire"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskStep(CamelModel):
    """A checklist item of a task"""
    title: str = ""
    completed: bool = False

    @field_validator("title", mode="before")
    @classmethod
    def _none_as_blank(cls, value):
        return "" if value is None else value

    @field_validator("completed", mode="before")
    @classmethod
    def _none_as_false(cls, value):
        return False if value is None else value


class TaskBase(CamelModel):
    """Base task fields for creation"""
    title: str = ""
    description: str = ""
    due_date: Optional[datetime] = None
    steps: List[TaskStep] = Field(default_factory=list)
    recipients: List[str] = Field(default_factory=list)
    # Whole days before due_date on which a reminder is sent
    reminder_schedule: List[int] = Field(default_factory=list)

    @field_validator("steps", "recipients", "reminder_schedule", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("title", "description", mode="before")
    @classmethod
    def _none_as_blank(cls, value):
        return "" if value is None else value


class TaskCreate(TaskBase):
    """Task creation model"""

    @field_validator("reminder_schedule")
    @classmethod
    def _non_negative(cls, value: List[int]) -> List[int]:
        if any(day < 0 for day in value):
            raise ValueError("reminderSchedule entries must be non-negative")
        return value


class TaskUpdate(CamelModel):
    """Task update model - all fields optional, completed is not editable"""
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    steps: Optional[List[TaskStep]] = None
    recipients: Optional[List[str]] = None
    reminder_schedule: Optional[List[int]] = None

    # Explicit nulls become empty values so the non-nullable columns never hold NULL
    @field_validator("title", "description", mode="before")
    @classmethod
    def _none_as_blank(cls, value):
        return "" if value is None else value

    @field_validator("steps", "recipients", "reminder_schedule", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("reminder_schedule")
    @classmethod
    def _non_negative(cls, value: Optional[List[int]]) -> Optional[List[int]]:
        if value and any(day < 0 for day in value):
            raise ValueError("reminderSchedule entries must be non-negative")
        return value


class Task(TaskBase):
    """Complete task model from database"""
    id: str
    completed: bool = False
    created_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value):
        return str(value)

    @field_validator("completed", mode="before")
    @classmethod
    def _none_as_false(cls, value):
        return False if value is None else value


class TaskStatusFilter(str, Enum):
    """Status values accepted by the task listing filter"""
    PENDING = "pending"
    OVERDUE = "overdue"
    COMPLETED = "completed"

