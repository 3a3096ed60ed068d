"""Response envelope shared by every route."""

from pydantic import BaseModel, Field
from datetime import datetime, timezone
from typing import Generic, Literal, TypeVar

T = TypeVar("T")


def _now() -> datetime:
    return datetime.now(tz=timezone.utc)


class SuccessResponse(BaseModel, Generic[T]):
    status: Literal["success"] = "success"
    data: T
    timestamp: datetime = Field(default_factory=_now)


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    message: str
    timestamp: datetime = Field(default_factory=_now)
