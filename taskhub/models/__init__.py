"""Import every model so relationships resolve and metadata is complete."""

from taskhub.models.user import User
from taskhub.models.workspace import Workspace, user_workspaces
from taskhub.models.category import Category
from taskhub.models.tag import Tag, task_tags
from taskhub.models.task import Task
from taskhub.models.subtask import SubTask
from taskhub.models.session import UserSession
from taskhub.models.notification import Notification

__all__ = [
    "User",
    "Workspace",
    "user_workspaces",
    "Category",
    "Tag",
    "task_tags",
    "Task",
    "SubTask",
    "UserSession",
    "Notification",
]
