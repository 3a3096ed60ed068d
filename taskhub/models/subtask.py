from sqlalchemy import Column, String, Text, DateTime, Enum, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid

from taskhub.core.database import Base
from taskhub.models.enums import SubTaskStatus, Priority, enum_values


class SubTask(Base):
    __tablename__ = "subtasks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    task_id = Column(Uuid, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime, nullable=True)
    status = Column(
        Enum(SubTaskStatus, name="subtask_status", values_callable=enum_values, create_constraint=True, validate_strings=True),
        nullable=False,
        default=SubTaskStatus.PENDING,
    )
    priority = Column(
        Enum(Priority, name="subtask_priority", values_callable=enum_values, create_constraint=True, validate_strings=True),
        nullable=False,
        default=Priority.MEDIUM,
    )

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    task = relationship("Task", back_populates="subtasks")
