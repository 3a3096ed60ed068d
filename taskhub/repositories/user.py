from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from taskhub.core.errors import ValidationError
from taskhub.models.user import User
from taskhub.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User
    not_found_message = "User not found"

    def load_options(self):
        return (selectinload(User.notifications),)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.scalar_one_or_none(select(User).where(User.email == email))

    def search_by_name(self, first_name: Optional[str] = None, last_name: Optional[str] = None) -> List[User]:
        if not first_name and not last_name:
            raise ValidationError("No search parameters provided")
        stmt = select(User).options(selectinload(User.notifications))
        if first_name:
            stmt = stmt.where(User.first_name == first_name)
        if last_name:
            stmt = stmt.where(User.last_name == last_name)
        return self.scalars(stmt.order_by(User.last_name, User.first_name))

    def create(self, *, password: str, **values) -> User:
        user = User(**values)
        user.set_password(password)
        self.db.add(user)
        self.persist()
        return user

    def update(self, user_id: UUID, **values) -> User:
        user = self.find_by_id(user_id)
        password = values.pop("password", None)
        if password is not None:
            user.set_password(password)
        return self.apply(user, **values)
