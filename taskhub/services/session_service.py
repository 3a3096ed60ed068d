from typing import List, Optional
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from taskhub.repositories.session import SessionRepository
from taskhub.schemas.session import SessionCreate, SessionDetail, SessionResponse, SessionUpdate

logger = logging.getLogger(__name__)


def get_session_detail(db: Session, session_id: UUID) -> SessionDetail:
    """Session with its user, workspace and notifications."""
    return SessionDetail.model_validate(SessionRepository(db).find_by_id(session_id))


def list_sessions(db: Session, user_id: Optional[UUID] = None, workspace_id: Optional[UUID] = None) -> List[SessionDetail]:
    return [SessionDetail.model_validate(s) for s in SessionRepository(db).find_all(user_id, workspace_id)]


def create_session(db: Session, session_data: SessionCreate) -> SessionResponse:
    session = SessionRepository(db).create(**session_data.model_dump())
    logger.info(f"Session {session.id} created")
    return SessionResponse.model_validate(session)


def update_session(db: Session, session_id: UUID, session_data: SessionUpdate) -> SessionResponse:
    session = SessionRepository(db).update(session_id, **session_data.model_dump(exclude_unset=True))
    return SessionResponse.model_validate(session)


def delete_session(db: Session, session_id: UUID) -> SessionResponse:
    session = SessionRepository(db).delete(session_id)
    logger.info(f"Session {session_id} deleted")
    return SessionResponse.model_validate(session)
