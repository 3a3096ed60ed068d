"""Task model"""

from sqlalchemy import Column, String, Text, DateTime, Enum, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid

from taskhub.core.database import Base
from taskhub.models.enums import TaskStatus, Priority, enum_values


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    workspace_id = Column(Uuid, ForeignKey("workspaces.id", ondelete="SET NULL"), nullable=True, index=True)
    category_id = Column(Uuid, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)

    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime, nullable=True)
    status = Column(
        Enum(TaskStatus, name="task_status", values_callable=enum_values, create_constraint=True, validate_strings=True),
        nullable=False,
        default=TaskStatus.NOT_STARTED,
    )
    priority = Column(
        Enum(Priority, name="task_priority", values_callable=enum_values, create_constraint=True, validate_strings=True),
        nullable=False,
        default=Priority.MEDIUM,
    )

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    workspace = relationship("Workspace", back_populates="tasks")
    category = relationship("Category", back_populates="tasks")
    user = relationship("User", back_populates="tasks")
    subtasks = relationship(
        "SubTask", back_populates="task", cascade="all, delete-orphan", order_by="SubTask.created_at"
    )
    notifications = relationship("Notification", back_populates="task", cascade="all, delete-orphan")
    tags = relationship("Tag", secondary="task_tags", back_populates="tasks")
