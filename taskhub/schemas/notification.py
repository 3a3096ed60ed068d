from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional
from uuid import UUID

from taskhub.models.enums import NotificationType, ReadStatus


class NotificationCreate(BaseModel):
    """Incoming notification. Any read status sent by the caller is ignored."""

    user_id: UUID
    content: str = Field(min_length=1, validation_alias=AliasChoices("content", "message"))
    type: NotificationType = NotificationType.REMINDER
    task_id: Optional[UUID] = None
    session_id: Optional[UUID] = None


class NotificationResponse(BaseModel):
    id: UUID
    user_id: Optional[UUID]
    task_id: Optional[UUID]
    session_id: Optional[UUID]
    content: str
    type: NotificationType
    read_status: ReadStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotificationSummary(BaseModel):
    id: UUID
    content: str
    created_at: datetime
    read_status: ReadStatus

    model_config = ConfigDict(from_attributes=True)
