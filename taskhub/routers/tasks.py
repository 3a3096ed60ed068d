from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from taskhub.core.database import get_db
from taskhub.schemas.common import SuccessResponse
from taskhub.schemas.task import TaskDetail, TaskUpdateRequest, TaskWriteRequest
from taskhub.services import task_service

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=SuccessResponse[List[TaskDetail]])
def list_tasks(
    workspace_id: UUID = Query(..., alias="workspaceID"),
    db: Session = Depends(get_db),
):
    return SuccessResponse(data=task_service.find_all_tasks(db, workspace_id))


# recherches : déclarées avant /{task_id}
@router.get("/title", response_model=SuccessResponse[List[TaskDetail]])
def tasks_by_title(
    title: str = Query(..., alias="taskTitle"),
    workspace_id: UUID = Query(..., alias="workspaceID"),
    db: Session = Depends(get_db),
):
    return SuccessResponse(data=task_service.find_tasks_by_title(db, title, workspace_id))


@router.get("/tag", response_model=SuccessResponse[List[TaskDetail]])
def tasks_by_tag(
    tag_name: str = Query(..., alias="tagName"),
    workspace_id: UUID = Query(..., alias="workspaceID"),
    db: Session = Depends(get_db),
):
    return SuccessResponse(data=task_service.find_tasks_by_tag(db, tag_name, workspace_id))


@router.get("/category", response_model=SuccessResponse[List[TaskDetail]])
def tasks_by_category(
    category_name: str = Query(..., alias="categoryName"),
    workspace_id: UUID = Query(..., alias="workspaceID"),
    db: Session = Depends(get_db),
):
    return SuccessResponse(data=task_service.find_tasks_by_category(db, category_name, workspace_id))


@router.get("/{task_id}", response_model=SuccessResponse[TaskDetail])
def get_task(task_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=task_service.get_task_detail(db, task_id))


@router.post("", response_model=SuccessResponse[TaskDetail], status_code=status.HTTP_201_CREATED)
def create_task(payload: TaskWriteRequest, db: Session = Depends(get_db)):
    task = task_service.create_task_with_subtasks(db, payload.task_data, payload.subtasks_data)
    return SuccessResponse(data=task)


@router.put("/{task_id}", response_model=SuccessResponse[TaskDetail])
def update_task(task_id: UUID, payload: TaskUpdateRequest, db: Session = Depends(get_db)):
    task = task_service.update_task_with_subtasks(db, task_id, payload.task_data, payload.subtasks_data)
    return SuccessResponse(data=task)


@router.delete("/{task_id}", response_model=SuccessResponse[TaskDetail])
def delete_task(task_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=task_service.delete_task_cascade(db, task_id))
