from typing import List
from uuid import UUID

from sqlalchemy import select

from taskhub.models.subtask import SubTask
from taskhub.repositories.base import BaseRepository


class SubTaskRepository(BaseRepository[SubTask]):
    model = SubTask
    not_found_message = "Subtask not found"

    def find_for_task(self, task_id: UUID) -> List[SubTask]:
        stmt = select(SubTask).where(SubTask.task_id == task_id).order_by(SubTask.created_at)
        return self.scalars(stmt)
