from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional, List
from uuid import UUID

from taskhub.schemas.user import UserSummary
from taskhub.schemas.workspace import WorkspaceSummary
from taskhub.schemas.notification import NotificationSummary

# Schemas sessions

class SessionCreate(BaseModel):
    user_id: Optional[UUID] = None
    workspace_id: Optional[UUID] = None
    login_time: Optional[datetime] = None
    logout_time: Optional[datetime] = None
    activities: Optional[str] = None

class SessionUpdate(BaseModel):
    user_id: Optional[UUID] = None
    workspace_id: Optional[UUID] = None
    login_time: Optional[datetime] = None
    logout_time: Optional[datetime] = None
    activities: Optional[str] = None

class SessionResponse(BaseModel):
    id: UUID
    user_id: Optional[UUID]
    workspace_id: Optional[UUID]
    login_time: Optional[datetime]
    logout_time: Optional[datetime]
    activities: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class SessionDetail(SessionResponse):
    """Session with its user, workspace and notifications."""

    user: Optional[UserSummary] = None
    workspace: Optional[WorkspaceSummary] = None
    notifications: List[NotificationSummary] = []
