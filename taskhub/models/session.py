"""Login session model (named UserSession to stay clear of sqlalchemy.orm.Session)"""

from sqlalchemy import Column, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid

from taskhub.core.database import Base


class UserSession(Base):
    __tablename__ = "sessions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    workspace_id = Column(Uuid, ForeignKey("workspaces.id", ondelete="SET NULL"), nullable=True, index=True)

    login_time = Column(DateTime, nullable=True)
    logout_time = Column(DateTime, nullable=True)
    activities = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="sessions")
    workspace = relationship("Workspace", back_populates="sessions")
    notifications = relationship("Notification", back_populates="session")
