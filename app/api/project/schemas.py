from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from app.api.schemas import CamelModel, DataResponse, ListResponse, reject_null, normalize_datetime

ProjectStatus = Literal["active", "completed", "on-hold"]


class ProjectBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    eta: datetime
    status: ProjectStatus = "active"

    @field_validator("eta")
    @classmethod
    def _utc_eta(cls, value):
        return normalize_datetime(value)


class ProjectCreate(ProjectBase):
    pass


class ProjectUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    eta: Optional[datetime] = None
    status: Optional[ProjectStatus] = None

    @field_validator("name", "eta", "status")
    @classmethod
    def _required(cls, value):
        return reject_null(value)

    @field_validator("eta")
    @classmethod
    def _utc_eta(cls, value):
        return normalize_datetime(value)


class ProjectOut(ProjectBase):
    id: int
    owner: int
    created_at: datetime
    updated_at: datetime

    # Computed on read from the project's tasks
    total_tasks: int = 0
    completed_tasks: int = 0
    completion_percentage: int = 0


ProjectResponse = DataResponse[ProjectOut]
ProjectListResponse = ListResponse[ProjectOut]
