from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional
from uuid import UUID

# Schemas workspaces

class WorkspaceCreate(BaseModel):
    name: str
    description: Optional[str] = None
    is_active: bool = False

class WorkspaceUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None

class WorkspaceSummary(BaseModel):
    id: UUID
    name: str
    description: Optional[str]

    model_config = ConfigDict(from_attributes=True)

class WorkspaceResponse(WorkspaceSummary):
    is_active: bool
    created_at: datetime
    updated_at: datetime
