from pydantic import Field, field_validator
from typing import Literal, Optional
from datetime import datetime

from app.api.schemas import CamelModel, DataResponse, ListResponse, reject_null, normalize_datetime

Priority = Literal["low", "medium", "high"]


class TaskBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    module_name: str = Field(..., min_length=1, max_length=50)
    due_date: datetime
    completed: bool = False
    priority: Priority = "medium"

    @field_validator("due_date")
    @classmethod
    def _utc_due_date(cls, value):
        return normalize_datetime(value)


class TaskCreate(TaskBase):
    project: int


class TaskUpdate(CamelModel):
    # The parent project is fixed at creation and cannot be changed here
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    module_name: Optional[str] = Field(None, min_length=1, max_length=50)
    due_date: Optional[datetime] = None
    completed: Optional[bool] = None
    priority: Optional[Priority] = None

    @field_validator("name", "module_name", "due_date", "completed", "priority")
    @classmethod
    def _required(cls, value):
        return reject_null(value)

    @field_validator("due_date")
    @classmethod
    def _utc_due_date(cls, value):
        return normalize_datetime(value)


class ProjectSummary(CamelModel):
    id: int
    name: Optional[str] = None


class TaskOut(TaskBase):
    id: int
    project: ProjectSummary
    owner: int
    created_at: datetime
    updated_at: datetime

    # Computed on read from the task's todos
    total_todos: int = 0
    completed_todos: int = 0
    total_estimated_time: float = 0


TaskResponse = DataResponse[TaskOut]
TaskListResponse = ListResponse[TaskOut]
