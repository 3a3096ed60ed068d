from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from taskhub.models.user import User
from taskhub.models.workspace import Workspace
from taskhub.repositories.base import BaseRepository


class WorkspaceRepository(BaseRepository[Workspace]):
    model = Workspace
    not_found_message = "Workspace not found"

    def load_options(self):
        return (selectinload(Workspace.members),)

    def find_all(self, active_only: bool = False) -> List[Workspace]:
        stmt = select(Workspace).order_by(Workspace.name)
        if active_only:
            stmt = stmt.where(Workspace.is_active.is_(True))
        return self.scalars(stmt)

    def find_for_user(self, user_id: UUID) -> List[Workspace]:
        stmt = (
            select(Workspace)
            .join(Workspace.members)
            .where(User.id == user_id)
            .order_by(Workspace.name)
        )
        return self.scalars(stmt)

    def add_member(self, workspace: Workspace, user: User) -> Workspace:
        if user not in workspace.members:
            workspace.members.append(user)
            self.persist()
        return workspace

    def remove_member(self, workspace: Workspace, user: User) -> Workspace:
        if user in workspace.members:
            workspace.members.remove(user)
            self.persist()
        return workspace
