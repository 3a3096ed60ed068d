from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional, Tuple
from uuid import UUID

from taskhub.core.config import Settings
from taskhub.core.database import get_db
from taskhub.core.deps import get_current_identity, get_current_user, get_settings
from taskhub.core.errors import AuthError
from taskhub.models.user import User
from taskhub.schemas.common import SuccessResponse
from taskhub.schemas.session import SessionResponse
from taskhub.schemas.user import LoginRequest, TokenResponse, UserView
from taskhub.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=SuccessResponse[TokenResponse])
def login(credentials: LoginRequest, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    """Se connecter : ouvre une session côté serveur et renvoie le token"""
    return SuccessResponse(data=auth_service.login(db, settings, credentials))


@router.post("/logout", response_model=SuccessResponse[SessionResponse])
def logout(
    identity: Tuple[User, Optional[UUID]] = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    _, session_id = identity
    if session_id is None:
        raise AuthError("No session attached to this token")
    return SuccessResponse(data=auth_service.logout(db, session_id))


@router.get("/me", response_model=SuccessResponse[UserView])
def me(current_user: User = Depends(get_current_user)):
    return SuccessResponse(data=UserView.from_user(current_user))
