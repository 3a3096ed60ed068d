from typing import List
from uuid import UUID

from sqlalchemy import select

from taskhub.models.enums import ReadStatus
from taskhub.models.notification import Notification
from taskhub.repositories.base import BaseRepository


class NotificationRepository(BaseRepository[Notification]):
    """Notifications only move Unread -> Read."""

    model = Notification
    not_found_message = "Notification not found"

    def find_for_user(self, user_id: UUID) -> List[Notification]:
        stmt = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc())
        )
        return self.scalars(stmt)

    def create(self, **values) -> Notification:
        values["read_status"] = ReadStatus.UNREAD
        return super().create(**values)

    def update(self, notification_id: UUID, **values) -> Notification:
        # read status is only changed through mark_as_read
        values.pop("read_status", None)
        return super().update(notification_id, **values)

    def mark_as_read(self, notification_id: UUID) -> Notification:
        notification = self.find_by_id(notification_id)
        if notification.read_status == ReadStatus.READ:
            return notification
        return self.apply(notification, read_status=ReadStatus.READ)
