"""Workspace model and the user <-> workspace join table"""

from sqlalchemy import Column, String, Text, DateTime, Boolean, ForeignKey, Table, Uuid
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid

from taskhub.core.database import Base


user_workspaces = Table(
    "user_workspaces",
    Base.metadata,
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("workspace_id", Uuid, ForeignKey("workspaces.id", ondelete="CASCADE"), primary_key=True),
)


class Workspace(Base):
    __tablename__ = "workspaces"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    members = relationship("User", secondary=user_workspaces, back_populates="workspaces")
    tasks = relationship("Task", back_populates="workspace")
    sessions = relationship("UserSession", back_populates="workspace")
    categories = relationship("Category", back_populates="workspace")
    tags = relationship("Tag", back_populates="workspace")
