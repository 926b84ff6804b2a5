from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.core.clock import to_naive_utc

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        allow_inf_nan=False,
    )


class DataResponse(CamelModel, Generic[T]):
    success: bool = True
    data: T


class ListResponse(CamelModel, Generic[T]):
    success: bool = True
    count: int
    data: List[T]


class DeletedResponse(CamelModel):
    success: bool = True
    data: dict = {}


def reject_null(value):
    # Partial updates may omit a required field but never clear it
    if value is None:
        raise ValueError("field cannot be null")
    return value


def normalize_datetime(value: Optional[datetime]) -> Optional[datetime]:
    return to_naive_utc(value) if value is not None else None
