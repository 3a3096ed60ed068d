"""Pydantic schemas for task and subtask request/response validation."""

from pydantic import BaseModel, ConfigDict, model_validator
from datetime import datetime
from typing import Optional, List
from uuid import UUID

from taskhub.models.enums import TaskStatus, SubTaskStatus, Priority
from taskhub.schemas.notification import NotificationSummary


# Schemas sous-tâches

class SubTaskCreate(BaseModel):
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    status: SubTaskStatus = SubTaskStatus.PENDING
    priority: Priority = Priority.MEDIUM


class SubTaskUpsert(BaseModel):
    """A subtask entry in a task update: updated in place when ``subtask_id`` is set, created otherwise."""

    subtask_id: Optional[UUID] = None
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    status: Optional[SubTaskStatus] = None
    priority: Optional[Priority] = None

    @model_validator(mode="after")
    def _title_required_on_create(self):
        if self.subtask_id is None and not self.title:
            raise ValueError("title is required for a new subtask")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude={"subtask_id"})


class SubTaskResponse(BaseModel):
    id: UUID
    task_id: UUID
    title: str
    description: Optional[str]
    due_date: Optional[datetime]
    status: SubTaskStatus
    priority: Priority
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SubTaskSummary(BaseModel):
    id: UUID
    title: str
    status: SubTaskStatus
    due_date: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)


# Schemas tâches

class TaskCreate(BaseModel):
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    status: TaskStatus = TaskStatus.NOT_STARTED
    priority: Priority = Priority.MEDIUM
    workspace_id: UUID
    category_id: Optional[UUID] = None
    user_id: Optional[UUID] = None
    tag_ids: List[UUID] = []


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    status: Optional[TaskStatus] = None
    priority: Optional[Priority] = None
    category_id: Optional[UUID] = None
    user_id: Optional[UUID] = None
    tag_ids: Optional[List[UUID]] = None


class TaskWriteRequest(BaseModel):
    task_data: TaskCreate
    subtasks_data: List[SubTaskCreate] = []


class TaskUpdateRequest(BaseModel):
    task_data: TaskUpdate = TaskUpdate()
    subtasks_data: List[SubTaskUpsert] = []


class TagSummary(BaseModel):
    id: UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class CategorySummary(BaseModel):
    id: UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class TaskDetail(BaseModel):
    """A task with its subtasks, notifications, tags and category."""

    id: UUID
    workspace_id: Optional[UUID]
    category_id: Optional[UUID]
    user_id: Optional[UUID]
    title: str
    description: Optional[str]
    due_date: Optional[datetime]
    status: TaskStatus
    priority: Priority
    created_at: datetime
    updated_at: datetime

    subtasks: List[SubTaskSummary] = []
    notifications: List[NotificationSummary] = []
    tags: List[TagSummary] = []
    category: Optional[CategorySummary] = None

    model_config = ConfigDict(from_attributes=True)
