from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID

from taskhub.core.database import get_db
from taskhub.core.errors import NotFoundError, ValidationError
from taskhub.schemas.common import SuccessResponse
from taskhub.schemas.user import UserCreate, UserEditView, UserUpdate, UserView
from taskhub.schemas.workspace import WorkspaceResponse
from taskhub.services import user_service, workspace_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/search", response_model=SuccessResponse[List[UserView]])
def search_users(
    first_name: Optional[str] = Query(None, alias="firstName"),
    last_name: Optional[str] = Query(None, alias="lastName"),
    db: Session = Depends(get_db),
):
    try:
        users = user_service.search_users(db, first_name, last_name)
    except (NotFoundError, ValidationError) as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    return SuccessResponse(data=users)


@router.get("/{user_id}", response_model=SuccessResponse[UserView])
def get_user(user_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=user_service.get_user(db, user_id))


@router.get("/{user_id}/workspaces", response_model=SuccessResponse[List[WorkspaceResponse]])
def user_workspaces(user_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=workspace_service.list_user_workspaces(db, user_id))


@router.post("", response_model=SuccessResponse[UserView], status_code=status.HTTP_201_CREATED)
def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    return SuccessResponse(data=user_service.create_user(db, user_data))


@router.put("/{user_id}", response_model=SuccessResponse[UserEditView])
def update_user(user_id: UUID, user_data: UserUpdate, db: Session = Depends(get_db)):
    return SuccessResponse(data=user_service.update_user(db, user_id, user_data))


@router.delete("/{user_id}", response_model=SuccessResponse[UserView])
def delete_user(user_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=user_service.delete_user(db, user_id))
