from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional
from uuid import UUID

from taskhub.schemas.workspace import WorkspaceSummary

# Schemas catégories

class CategoryCreate(BaseModel):
    name: str
    description: Optional[str] = None
    workspace_id: UUID

class CategoryUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    workspace_id: Optional[UUID] = None

class CategoryResponse(BaseModel):
    id: UUID
    workspace_id: Optional[UUID]
    name: str
    description: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class CategoryWithWorkspace(CategoryResponse):
    workspace: Optional[WorkspaceSummary] = None
