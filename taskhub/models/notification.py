from sqlalchemy import Column, Text, DateTime, Enum, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid

from taskhub.core.database import Base
from taskhub.models.enums import NotificationType, ReadStatus, enum_values


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    task_id = Column(Uuid, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=True, index=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    session_id = Column(Uuid, ForeignKey("sessions.id", ondelete="SET NULL"), nullable=True, index=True)

    content = Column(Text, nullable=False)
    type = Column(
        Enum(NotificationType, name="notification_type", values_callable=enum_values, create_constraint=True, validate_strings=True),
        nullable=False,
        default=NotificationType.REMINDER,
    )
    read_status = Column(
        Enum(ReadStatus, name="notification_read_status", values_callable=enum_values, create_constraint=True, validate_strings=True),
        nullable=False,
        default=ReadStatus.UNREAD,
    )

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    task = relationship("Task", back_populates="notifications")
    user = relationship("User", back_populates="notifications")
    session = relationship("UserSession", back_populates="notifications")
