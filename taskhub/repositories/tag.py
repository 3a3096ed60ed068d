from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from taskhub.models.tag import Tag, task_tags
from taskhub.repositories.base import BaseRepository


class TagRepository(BaseRepository[Tag]):
    model = Tag
    not_found_message = "Tag not found"

    def find_by_name(self, name: str, workspace_id: UUID) -> List[Tag]:
        stmt = select(Tag).where(Tag.name == name, Tag.workspace_id == workspace_id)
        return self.scalars(stmt)

    def find_all(self, workspace_id: UUID) -> List[Tag]:
        stmt = (
            select(Tag)
            .where(Tag.workspace_id == workspace_id)
            .options(joinedload(Tag.workspace))
            .order_by(Tag.name)
        )
        return self.scalars(stmt)

    def find_many(self, tag_ids: List[UUID], workspace_id: UUID) -> List[Tag]:
        if not tag_ids:
            return []
        stmt = select(Tag).where(Tag.id.in_(tag_ids), Tag.workspace_id == workspace_id)
        return self.scalars(stmt)

    def has_tasks(self, tag_id: UUID) -> bool:
        stmt = select(task_tags.c.task_id).where(task_tags.c.tag_id == tag_id).limit(1)
        return self.read(lambda: self.db.execute(stmt).first() is not None)
