"""
Credential check and the user <-> session bridge.

A logged-in user is stored as its id (``serialize_user``) inside a signed
token, next to the id of the server-side session row created at login.
Each request turns that id back into a full ``User`` (``deserialize_user``);
an id that no longer resolves is an error, never an anonymous user.
"""

from datetime import datetime
from typing import Optional, Tuple
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from taskhub.core.config import Settings
from taskhub.core.errors import AuthError
from taskhub.core.security import create_access_token, decode_token
from taskhub.models.user import User
from taskhub.repositories.session import SessionRepository
from taskhub.repositories.user import UserRepository
from taskhub.repositories.workspace import WorkspaceRepository
from taskhub.schemas.session import SessionResponse
from taskhub.schemas.user import LoginRequest, TokenResponse, UserView

logger = logging.getLogger(__name__)


def authenticate(db: Session, email: str, password: str) -> User:
    user = UserRepository(db).find_by_email(email)
    if user is None:
        raise AuthError("Incorrect email")
    if not user.verify_password(password):
        raise AuthError("Incorrect password")
    return user


def serialize_user(user: User) -> str:
    return str(user.id)


def deserialize_user(db: Session, user_id: Optional[str]) -> User:
    try:
        key = UUID(str(user_id))
    except ValueError:
        raise AuthError("Invalid session")
    user = UserRepository(db).get(key)
    if user is None:
        raise AuthError("User not found")
    return user


def login(db: Session, settings: Settings, credentials: LoginRequest) -> TokenResponse:
    user = authenticate(db, credentials.email, credentials.password)

    if credentials.workspace_id is not None:
        workspace = WorkspaceRepository(db).get(credentials.workspace_id)
        if workspace is None or user not in workspace.members:
            raise AuthError("Not a member of this workspace")

    session = SessionRepository(db).create(
        user_id=user.id,
        workspace_id=credentials.workspace_id,
        login_time=datetime.utcnow(),
        activities="login",
    )
    logger.info(f"User {user.id} logged in (session {session.id})")
    return TokenResponse(
        access_token=create_access_token(settings, serialize_user(user), str(session.id)),
        session_id=session.id,
        user=UserView.from_user(user),
    )


def resolve_token(db: Session, settings: Settings, token: str) -> Tuple[User, Optional[UUID]]:
    payload = decode_token(settings, token)
    if payload is None:
        raise AuthError("Invalid token")
    user = deserialize_user(db, payload.get("sub"))
    sid = payload.get("sid")
    if not sid:
        return user, None
    try:
        return user, UUID(str(sid))
    except ValueError:
        raise AuthError("Invalid session")


def logout(db: Session, session_id: UUID) -> SessionResponse:
    repo = SessionRepository(db)
    session = repo.find_by_id(session_id)
    if session.logout_time is None:
        session = repo.apply(session, logout_time=datetime.utcnow())
        logger.info(f"Session {session_id} closed")
    return SessionResponse.model_validate(session)
