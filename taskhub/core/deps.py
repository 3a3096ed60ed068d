from typing import Optional, Tuple
from uuid import UUID

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from taskhub.core.config import Settings
from taskhub.core.database import get_db
from taskhub.core.errors import AuthError
from taskhub.models.user import User
from taskhub.services.auth_service import resolve_token


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_identity(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    authorization: Optional[str] = Header(None),
) -> Tuple[User, Optional[UUID]]:
    # Check token
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthError("Not authenticated")
    return resolve_token(db, settings, authorization.replace("Bearer ", "", 1))


def get_current_user(identity: Tuple[User, Optional[UUID]] = Depends(get_current_identity)) -> User:
    return identity[0]
