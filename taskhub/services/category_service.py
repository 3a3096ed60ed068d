from typing import List
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from taskhub.core.errors import ValidationError
from taskhub.repositories.category import CategoryRepository
from taskhub.repositories.workspace import WorkspaceRepository
from taskhub.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate, CategoryWithWorkspace

logger = logging.getLogger(__name__)


def get_category(db: Session, category_id: UUID) -> CategoryResponse:
    return CategoryResponse.model_validate(CategoryRepository(db).find_by_id(category_id))


def find_categories_by_name(db: Session, name: str, workspace_id: UUID) -> List[CategoryResponse]:
    return [CategoryResponse.model_validate(c) for c in CategoryRepository(db).find_by_name(name, workspace_id)]


def find_all_categories(db: Session, workspace_id: UUID) -> List[CategoryWithWorkspace]:
    return [CategoryWithWorkspace.model_validate(c) for c in CategoryRepository(db).find_all(workspace_id)]


def create_category(db: Session, category_data: CategoryCreate) -> CategoryResponse:
    WorkspaceRepository(db).find_by_id(category_data.workspace_id)
    category = CategoryRepository(db).create(**category_data.model_dump())
    logger.info(f"Category {category.id} created in workspace {category.workspace_id}")
    return CategoryResponse.model_validate(category)


def update_category(db: Session, category_id: UUID, category_data: CategoryUpdate) -> CategoryResponse:
    changes = category_data.model_dump(exclude_unset=True)
    if changes.get("name") is None:
        changes.pop("name", None)
    if changes.get("workspace_id") is None:
        changes.pop("workspace_id", None)
    repo = CategoryRepository(db)
    category = repo.find_by_id(category_id)
    target = changes.get("workspace_id")
    if target is not None and target != category.workspace_id:
        WorkspaceRepository(db).find_by_id(target)
        if repo.has_tasks(category.id):
            raise ValidationError("Category is still used by tasks in its workspace")
        logger.info(f"Category {category_id} moved to workspace {target}")
    return CategoryResponse.model_validate(repo.apply(category, **changes))


def delete_category(db: Session, category_id: UUID) -> CategoryResponse:
    category = CategoryRepository(db).delete(category_id)
    logger.info(f"Category {category_id} deleted")
    return CategoryResponse.model_validate(category)
