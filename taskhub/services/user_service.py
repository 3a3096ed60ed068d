"""User service: CRUD shaped into the view / edit projections."""

from typing import List, Optional
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from taskhub.core.errors import NotFoundError
from taskhub.repositories.user import UserRepository
from taskhub.schemas.user import UserCreate, UserEditView, UserUpdate, UserView

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: UUID) -> UserView:
    return UserView.from_user(UserRepository(db).find_by_id(user_id))


def search_users(db: Session, first_name: Optional[str] = None, last_name: Optional[str] = None) -> List[UserView]:
    users = UserRepository(db).search_by_name(first_name, last_name)
    if not users:
        raise NotFoundError("No users found matching the criteria")
    return [UserView.from_user(user) for user in users]


def create_user(db: Session, user_data: UserCreate) -> UserView:
    user = UserRepository(db).create(**user_data.model_dump())
    logger.info(f"User {user.id} created")
    return UserView.from_user(user)


def update_user(db: Session, user_id: UUID, user_data: UserUpdate) -> UserEditView:
    changes = {k: v for k, v in user_data.model_dump(exclude_unset=True).items() if v is not None}
    user = UserRepository(db).update(user_id, **changes)
    logger.info(f"User {user_id} updated ({', '.join(sorted(changes)) or 'no changes'})")
    return UserEditView.from_user(user)


def delete_user(db: Session, user_id: UUID) -> UserView:
    user = UserRepository(db).delete(user_id)
    logger.info(f"User {user_id} deleted")
    return UserView.from_user(user)
