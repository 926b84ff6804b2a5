from pydantic import Field, field_validator
from typing import Literal, Optional
from datetime import datetime

from app.api.schemas import CamelModel, DataResponse, ListResponse, reject_null, normalize_datetime

Priority = Literal["low", "medium", "high"]


class ToDoBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    completed: bool = False
    due_date: datetime
    priority: Priority = "medium"
    estimated_time: float = Field(0, ge=0)

    @field_validator("due_date")
    @classmethod
    def _utc_due_date(cls, value):
        return normalize_datetime(value)


class ToDoCreate(ToDoBase):
    task: int


class ToDoUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    completed: Optional[bool] = None
    due_date: Optional[datetime] = None
    priority: Optional[Priority] = None
    estimated_time: Optional[float] = Field(None, ge=0)

    @field_validator("title", "completed", "due_date", "priority", "estimated_time")
    @classmethod
    def _required(cls, value):
        return reject_null(value)

    @field_validator("due_date")
    @classmethod
    def _utc_due_date(cls, value):
        return normalize_datetime(value)


class TaskSummary(CamelModel):
    id: int
    name: Optional[str] = None
    module_name: Optional[str] = None


class ToDoOut(ToDoBase):
    id: int
    task: TaskSummary
    owner: int
    created_at: datetime
    updated_at: datetime


ToDoResponse = DataResponse[ToDoOut]
ToDoListResponse = ListResponse[ToDoOut]
