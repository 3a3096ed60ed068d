from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from taskhub.core.database import get_db
from taskhub.schemas.common import SuccessResponse
from taskhub.schemas.user import UserView
from taskhub.schemas.workspace import WorkspaceCreate, WorkspaceResponse, WorkspaceUpdate
from taskhub.services import workspace_service

router = APIRouter(prefix="/workspaces", tags=["workspaces"])


@router.get("", response_model=SuccessResponse[List[WorkspaceResponse]])
def list_workspaces(active: bool = Query(False), db: Session = Depends(get_db)):
    return SuccessResponse(data=workspace_service.list_workspaces(db, active_only=active))


@router.get("/{workspace_id}", response_model=SuccessResponse[WorkspaceResponse])
def get_workspace(workspace_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=workspace_service.get_workspace(db, workspace_id))


@router.post("", response_model=SuccessResponse[WorkspaceResponse], status_code=status.HTTP_201_CREATED)
def create_workspace(workspace_data: WorkspaceCreate, db: Session = Depends(get_db)):
    return SuccessResponse(data=workspace_service.create_workspace(db, workspace_data))


@router.put("/{workspace_id}", response_model=SuccessResponse[WorkspaceResponse])
def update_workspace(workspace_id: UUID, workspace_data: WorkspaceUpdate, db: Session = Depends(get_db)):
    return SuccessResponse(data=workspace_service.update_workspace(db, workspace_id, workspace_data))


@router.delete("/{workspace_id}", response_model=SuccessResponse[WorkspaceResponse])
def delete_workspace(workspace_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=workspace_service.delete_workspace(db, workspace_id))


# Membres

@router.get("/{workspace_id}/users", response_model=SuccessResponse[List[UserView]])
def list_members(workspace_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=workspace_service.list_members(db, workspace_id))


@router.post("/{workspace_id}/users/{user_id}", response_model=SuccessResponse[List[UserView]])
def add_member(workspace_id: UUID, user_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=workspace_service.add_member(db, workspace_id, user_id))


@router.delete("/{workspace_id}/users/{user_id}", response_model=SuccessResponse[List[UserView]])
def remove_member(workspace_id: UUID, user_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=workspace_service.remove_member(db, workspace_id, user_id))
