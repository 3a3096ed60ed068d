from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from taskhub.core.database import get_db
from taskhub.schemas.common import SuccessResponse
from taskhub.schemas.tag import TagCreate, TagResponse, TagUpdate, TagWithWorkspace
from taskhub.services import tag_service

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=SuccessResponse[List[TagWithWorkspace]])
def list_tags(workspace_id: UUID = Query(..., alias="workspaceID"), db: Session = Depends(get_db)):
    return SuccessResponse(data=tag_service.find_all_tags(db, workspace_id))


@router.get("/name", response_model=SuccessResponse[List[TagResponse]])
def tags_by_name(
    name: str = Query(..., alias="tagName"),
    workspace_id: UUID = Query(..., alias="workspaceID"),
    db: Session = Depends(get_db),
):
    return SuccessResponse(data=tag_service.find_tags_by_name(db, name, workspace_id))


@router.get("/{tag_id}", response_model=SuccessResponse[TagResponse])
def get_tag(tag_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=tag_service.get_tag(db, tag_id))


@router.post("", response_model=SuccessResponse[TagResponse], status_code=status.HTTP_201_CREATED)
def create_tag(tag_data: TagCreate, db: Session = Depends(get_db)):
    return SuccessResponse(data=tag_service.create_tag(db, tag_data))


@router.put("/{tag_id}", response_model=SuccessResponse[TagResponse])
def update_tag(tag_id: UUID, tag_data: TagUpdate, db: Session = Depends(get_db)):
    return SuccessResponse(data=tag_service.update_tag(db, tag_id, tag_data))


@router.delete("/{tag_id}", response_model=SuccessResponse[TagResponse])
def delete_tag(tag_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=tag_service.delete_tag(db, tag_id))
