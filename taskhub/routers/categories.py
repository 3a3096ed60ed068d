from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from taskhub.core.database import get_db
from taskhub.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate, CategoryWithWorkspace
from taskhub.schemas.common import SuccessResponse
from taskhub.services import category_service

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=SuccessResponse[List[CategoryWithWorkspace]])
def list_categories(workspace_id: UUID = Query(..., alias="workspaceID"), db: Session = Depends(get_db)):
    return SuccessResponse(data=category_service.find_all_categories(db, workspace_id))


@router.get("/name", response_model=SuccessResponse[List[CategoryResponse]])
def categories_by_name(
    name: str = Query(..., alias="categoryName"),
    workspace_id: UUID = Query(..., alias="workspaceID"),
    db: Session = Depends(get_db),
):
    return SuccessResponse(data=category_service.find_categories_by_name(db, name, workspace_id))


@router.get("/{category_id}", response_model=SuccessResponse[CategoryResponse])
def get_category(category_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=category_service.get_category(db, category_id))


@router.post("", response_model=SuccessResponse[CategoryResponse], status_code=status.HTTP_201_CREATED)
def create_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    return SuccessResponse(data=category_service.create_category(db, category_data))


@router.put("/{category_id}", response_model=SuccessResponse[CategoryResponse])
def update_category(category_id: UUID, category_data: CategoryUpdate, db: Session = Depends(get_db)):
    return SuccessResponse(data=category_service.update_category(db, category_id, category_data))


@router.delete("/{category_id}", response_model=SuccessResponse[CategoryResponse])
def delete_category(category_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=category_service.delete_category(db, category_id))
