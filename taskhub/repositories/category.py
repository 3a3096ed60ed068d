from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from taskhub.models.category import Category
from taskhub.models.task import Task
from taskhub.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    model = Category
    not_found_message = "Category not found"

    def find_by_name(self, name: str, workspace_id: UUID) -> List[Category]:
        stmt = select(Category).where(
            Category.name == name,
            Category.workspace_id == workspace_id,
        )
        return self.scalars(stmt)

    def find_all(self, workspace_id: UUID) -> List[Category]:
        stmt = (
            select(Category)
            .where(Category.workspace_id == workspace_id)
            .options(joinedload(Category.workspace))
            .order_by(Category.name)
        )
        return self.scalars(stmt)

    def has_tasks(self, category_id: UUID) -> bool:
        stmt = select(Task.id).where(Task.category_id == category_id).limit(1)
        return self.read(lambda: self.db.execute(stmt).first() is not None)
