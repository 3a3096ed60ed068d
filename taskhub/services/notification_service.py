from typing import List
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from taskhub.repositories.notification import NotificationRepository
from taskhub.schemas.notification import NotificationCreate, NotificationResponse

logger = logging.getLogger(__name__)


def create_notification(db: Session, notification_data: NotificationCreate) -> NotificationResponse:
    notification = NotificationRepository(db).create(**notification_data.model_dump())
    logger.info(f"Notification {notification.id} sent to user {notification.user_id}")
    return NotificationResponse.model_validate(notification)


def get_notifications_for_user(db: Session, user_id: UUID) -> List[NotificationResponse]:
    return [NotificationResponse.model_validate(n) for n in NotificationRepository(db).find_for_user(user_id)]


def mark_as_read(db: Session, notification_id: UUID) -> NotificationResponse:
    return NotificationResponse.model_validate(NotificationRepository(db).mark_as_read(notification_id))


def delete_notification(db: Session, notification_id: UUID) -> str:
    NotificationRepository(db).delete(notification_id)
    logger.info(f"Notification {notification_id} deleted")
    return "Notification deleted successfully"
