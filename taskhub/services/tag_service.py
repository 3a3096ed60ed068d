from typing import List
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from taskhub.core.errors import ValidationError
from taskhub.repositories.tag import TagRepository
from taskhub.repositories.workspace import WorkspaceRepository
from taskhub.schemas.tag import TagCreate, TagResponse, TagUpdate, TagWithWorkspace

logger = logging.getLogger(__name__)


def get_tag(db: Session, tag_id: UUID) -> TagResponse:
    return TagResponse.model_validate(TagRepository(db).find_by_id(tag_id))


def find_tags_by_name(db: Session, name: str, workspace_id: UUID) -> List[TagResponse]:
    return [TagResponse.model_validate(t) for t in TagRepository(db).find_by_name(name, workspace_id)]


def find_all_tags(db: Session, workspace_id: UUID) -> List[TagWithWorkspace]:
    return [TagWithWorkspace.model_validate(t) for t in TagRepository(db).find_all(workspace_id)]


def create_tag(db: Session, tag_data: TagCreate) -> TagResponse:
    WorkspaceRepository(db).find_by_id(tag_data.workspace_id)
    tag = TagRepository(db).create(**tag_data.model_dump())
    logger.info(f"Tag {tag.id} created in workspace {tag.workspace_id}")
    return TagResponse.model_validate(tag)


def update_tag(db: Session, tag_id: UUID, tag_data: TagUpdate) -> TagResponse:
    changes = {k: v for k, v in tag_data.model_dump(exclude_unset=True).items() if v is not None}
    repo = TagRepository(db)
    tag = repo.find_by_id(tag_id)
    target = changes.get("workspace_id")
    if target is not None and target != tag.workspace_id:
        WorkspaceRepository(db).find_by_id(target)
        # task_tags links would otherwise cross workspaces
        if repo.has_tasks(tag.id):
            raise ValidationError("Tag is still assigned to tasks in its workspace")
        logger.info(f"Tag {tag_id} moved to workspace {target}")
    return TagResponse.model_validate(repo.apply(tag, **changes))


def delete_tag(db: Session, tag_id: UUID) -> TagResponse:
    tag = TagRepository(db).delete(tag_id)
    logger.info(f"Tag {tag_id} deleted")
    return TagResponse.model_validate(tag)
