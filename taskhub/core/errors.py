"""Domain errors raised by repositories and services.

Routers never see SQLAlchemy exceptions: repositories convert them into one
of these, and ``taskhub.core.responses`` renders them as the error envelope.
"""

from typing import Optional
from uuid import UUID


class AppError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    pass


class ValidationError(AppError):
    pass


class AuthError(AppError):
    pass


class StoreError(AppError):
    status_code = 500

    def __init__(self, message: str = "Database error"):
        super().__init__(message)


class PartialWriteError(AppError):
    """Best-effort task write where some subtasks could not be stored."""

    def __init__(self, task_id: Optional[UUID], created: int, failed: int):
        super().__init__(
            f"Task {task_id} saved but {failed} of {created + failed} subtask(s) failed"
        )
        self.task_id = task_id
        self.created = created
        self.failed = failed
