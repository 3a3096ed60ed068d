from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import joinedload, selectinload

from taskhub.models.session import UserSession
from taskhub.repositories.base import BaseRepository


class SessionRepository(BaseRepository[UserSession]):
    model = UserSession
    not_found_message = "Session not found"

    def load_options(self):
        return (
            joinedload(UserSession.user),
            joinedload(UserSession.workspace),
            selectinload(UserSession.notifications),
        )

    def find_all(self, user_id: Optional[UUID] = None, workspace_id: Optional[UUID] = None) -> List[UserSession]:
        stmt = select(UserSession).options(*self.load_options()).order_by(UserSession.created_at)
        if user_id is not None:
            stmt = stmt.where(UserSession.user_id == user_id)
        if workspace_id is not None:
            stmt = stmt.where(UserSession.workspace_id == workspace_id)
        return self.scalars(stmt)
