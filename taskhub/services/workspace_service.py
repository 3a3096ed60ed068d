from typing import List
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from taskhub.repositories.user import UserRepository
from taskhub.repositories.workspace import WorkspaceRepository
from taskhub.schemas.user import UserView
from taskhub.schemas.workspace import WorkspaceCreate, WorkspaceResponse, WorkspaceUpdate

logger = logging.getLogger(__name__)


def get_workspace(db: Session, workspace_id: UUID) -> WorkspaceResponse:
    return WorkspaceResponse.model_validate(WorkspaceRepository(db).find_by_id(workspace_id))


def list_workspaces(db: Session, active_only: bool = False) -> List[WorkspaceResponse]:
    return [WorkspaceResponse.model_validate(w) for w in WorkspaceRepository(db).find_all(active_only)]


def list_user_workspaces(db: Session, user_id: UUID) -> List[WorkspaceResponse]:
    UserRepository(db).find_by_id(user_id)
    return [WorkspaceResponse.model_validate(w) for w in WorkspaceRepository(db).find_for_user(user_id)]


def create_workspace(db: Session, workspace_data: WorkspaceCreate) -> WorkspaceResponse:
    workspace = WorkspaceRepository(db).create(**workspace_data.model_dump())
    logger.info(f"Workspace {workspace.id} created")
    return WorkspaceResponse.model_validate(workspace)


def update_workspace(db: Session, workspace_id: UUID, workspace_data: WorkspaceUpdate) -> WorkspaceResponse:
    changes = {k: v for k, v in workspace_data.model_dump(exclude_unset=True).items() if v is not None or k == "description"}
    workspace = WorkspaceRepository(db).update(workspace_id, **changes)
    return WorkspaceResponse.model_validate(workspace)


def delete_workspace(db: Session, workspace_id: UUID) -> WorkspaceResponse:
    workspace = WorkspaceRepository(db).delete(workspace_id)
    logger.info(f"Workspace {workspace_id} deleted")
    return WorkspaceResponse.model_validate(workspace)


def list_members(db: Session, workspace_id: UUID) -> List[UserView]:
    workspace = WorkspaceRepository(db).find_by_id(workspace_id)
    return [UserView.from_user(user) for user in workspace.members]


def add_member(db: Session, workspace_id: UUID, user_id: UUID) -> List[UserView]:
    repo = WorkspaceRepository(db)
    workspace = repo.find_by_id(workspace_id)
    user = UserRepository(db).find_by_id(user_id)
    repo.add_member(workspace, user)
    logger.info(f"User {user_id} joined workspace {workspace_id}")
    return [UserView.from_user(member) for member in workspace.members]


def remove_member(db: Session, workspace_id: UUID, user_id: UUID) -> List[UserView]:
    repo = WorkspaceRepository(db)
    workspace = repo.find_by_id(workspace_id)
    user = UserRepository(db).find_by_id(user_id)
    repo.remove_member(workspace, user)
    logger.info(f"User {user_id} left workspace {workspace_id}")
    return [UserView.from_user(member) for member in workspace.members]
