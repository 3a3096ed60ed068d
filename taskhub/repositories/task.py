from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import contains_eager, joinedload, selectinload

from taskhub.core.errors import ValidationError
from taskhub.models.category import Category
from taskhub.models.tag import Tag
from taskhub.models.task import Task
from taskhub.repositories.base import BaseRepository
from taskhub.repositories.tag import TagRepository


def _collections():
    return (
        selectinload(Task.subtasks),
        selectinload(Task.notifications),
        selectinload(Task.tags),
    )


class TaskRepository(BaseRepository[Task]):
    """Task queries. Every listing is scoped to one workspace."""

    model = Task
    not_found_message = "Task not found"

    def load_options(self):
        return (*_collections(), joinedload(Task.category))

    def _listing(self, workspace_id: UUID):
        return (
            select(Task)
            .where(Task.workspace_id == workspace_id)
            .order_by(Task.created_at)
            .execution_options(populate_existing=True)
        )

    def find_all(self, workspace_id: UUID) -> List[Task]:
        return self.scalars(self._listing(workspace_id).options(*self.load_options()))

    def find_by_title(self, title: str, workspace_id: UUID) -> List[Task]:
        stmt = self._listing(workspace_id).where(Task.title == title).options(*self.load_options())
        return self.scalars(stmt)

    def find_by_tag(self, tag_name: str, workspace_id: UUID) -> List[Task]:
        stmt = (
            self._listing(workspace_id)
            .join(Task.tags)
            .where(Tag.name == tag_name, Tag.workspace_id == workspace_id)
            .options(*self.load_options())
            .distinct()
        )
        return self.scalars(stmt)

    def find_by_category(self, category_name: str, workspace_id: UUID) -> List[Task]:
        stmt = (
            self._listing(workspace_id)
            .join(Task.category)
            .where(Category.name == category_name, Category.workspace_id == workspace_id)
            .options(*_collections(), contains_eager(Task.category))
        )
        return self.scalars(stmt)

    def set_tags(self, task: Task, tag_ids: List[UUID]) -> Task:
        unique_ids = list(dict.fromkeys(tag_ids))
        tags = TagRepository(self.db, auto_commit=self.auto_commit).find_many(unique_ids, task.workspace_id)
        if len(tags) != len(unique_ids):
            raise ValidationError("Tag not found in this workspace")
        task.tags = tags
        self.persist()
        return task
