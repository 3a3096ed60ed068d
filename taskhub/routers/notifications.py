from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from taskhub.core.database import get_db
from taskhub.schemas.common import SuccessResponse
from taskhub.schemas.notification import NotificationCreate, NotificationResponse
from taskhub.services import notification_service

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post("", response_model=SuccessResponse[NotificationResponse], status_code=status.HTTP_201_CREATED)
def create_notification(notification_data: NotificationCreate, db: Session = Depends(get_db)):
    return SuccessResponse(data=notification_service.create_notification(db, notification_data))


@router.get("/user/{user_id}", response_model=SuccessResponse[List[NotificationResponse]])
def notifications_for_user(user_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=notification_service.get_notifications_for_user(db, user_id))


@router.put("/{notification_id}/read", response_model=SuccessResponse[NotificationResponse])
def mark_as_read(notification_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=notification_service.mark_as_read(db, notification_id))


@router.delete("/{notification_id}", response_model=SuccessResponse[str])
def delete_notification(notification_id: UUID, db: Session = Depends(get_db)):
    return SuccessResponse(data=notification_service.delete_notification(db, notification_id))
