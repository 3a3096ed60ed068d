from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional
from uuid import UUID

from taskhub.schemas.workspace import WorkspaceSummary

# Schemas tags

class TagCreate(BaseModel):
    name: str
    workspace_id: UUID

class TagUpdate(BaseModel):
    name: Optional[str] = None
    workspace_id: Optional[UUID] = None

class TagResponse(BaseModel):
    id: UUID
    workspace_id: Optional[UUID]
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class TagWithWorkspace(TagResponse):
    workspace: Optional[WorkspaceSummary] = None
