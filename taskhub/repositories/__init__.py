"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries for each entity and take the
``Session`` they work on as a constructor argument.
"""

from taskhub.repositories.user import UserRepository
from taskhub.repositories.workspace import WorkspaceRepository
from taskhub.repositories.category import CategoryRepository
from taskhub.repositories.tag import TagRepository
from taskhub.repositories.task import TaskRepository
from taskhub.repositories.subtask import SubTaskRepository
from taskhub.repositories.session import SessionRepository
from taskhub.repositories.notification import NotificationRepository

__all__ = [
    "UserRepository",
    "WorkspaceRepository",
    "CategoryRepository",
    "TagRepository",
    "TaskRepository",
    "SubTaskRepository",
    "SessionRepository",
    "NotificationRepository",
]
