from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID

from taskhub.core.database import get_db
from taskhub.core.errors import NotFoundError
from taskhub.schemas.common import SuccessResponse
from taskhub.schemas.session import SessionCreate, SessionDetail, SessionResponse, SessionUpdate
from taskhub.services import session_service

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=SuccessResponse[List[SessionDetail]])
def list_sessions(
    user_id: Optional[UUID] = Query(None, alias="userID"),
    workspace_id: Optional[UUID] = Query(None, alias="workspaceID"),
    db: Session = Depends(get_db),
):
    return SuccessResponse(data=session_service.list_sessions(db, user_id, workspace_id))


@router.get("/{session_id}", response_model=SuccessResponse[SessionDetail])
def get_session(session_id: UUID, db: Session = Depends(get_db)):
    try:
        detail = session_service.get_session_detail(db, session_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    return SuccessResponse(data=detail)


@router.post("", response_model=SuccessResponse[SessionResponse], status_code=status.HTTP_201_CREATED)
def create_session(session_data: SessionCreate, db: Session = Depends(get_db)):
    return SuccessResponse(data=session_service.create_session(db, session_data))


@router.put("/{session_id}", response_model=SuccessResponse[SessionResponse])
def update_session(session_id: UUID, session_data: SessionUpdate, db: Session = Depends(get_db)):
    return SuccessResponse(data=session_service.update_session(db, session_id, session_data))


@router.delete("/{session_id}", response_model=SuccessResponse[SessionResponse])
def delete_session(session_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=session_service.delete_session(db, session_id))
