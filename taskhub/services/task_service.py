"""
Task aggregation service.

Reads assemble a task with its subtasks, notifications, tags and category in
one ``TaskDetail``. Writes that touch a task and its subtasks run either in a
single transaction (atomic) or as a series of independent commits
(best effort), chosen per call or by the ``TASK_WRITES_ATOMIC`` setting.
"""

from typing import List, Optional, Sequence
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from taskhub.core.errors import AppError, PartialWriteError, ValidationError
from taskhub.models.task import Task
from taskhub.repositories.base import transaction
from taskhub.repositories.category import CategoryRepository
from taskhub.repositories.subtask import SubTaskRepository
from taskhub.repositories.tag import TagRepository
from taskhub.repositories.task import TaskRepository
from taskhub.schemas.task import (
    SubTaskCreate,
    SubTaskUpsert,
    TaskCreate,
    TaskDetail,
    TaskUpdate,
)

logger = logging.getLogger(__name__)

# columns that are NOT NULL: an explicit null in a partial update means "leave it"
_REQUIRED_TASK_FIELDS = ("title", "status", "priority")


def _use_atomic(db: Session, atomic: Optional[bool]) -> bool:
    if atomic is None:
        return db.info.get("atomic_task_writes", True)
    return atomic


def _partial(changes: dict) -> dict:
    return {k: v for k, v in changes.items() if not (k in _REQUIRED_TASK_FIELDS and v is None)}


def _check_category(db: Session, category_id: Optional[UUID], workspace_id: Optional[UUID]) -> None:
    if category_id is None:
        return
    category = CategoryRepository(db, auto_commit=False).get(category_id)
    if category is None or category.workspace_id != workspace_id:
        raise ValidationError("Category not found in this workspace")


def _check_tags(db: Session, tag_ids: Optional[Sequence[UUID]], workspace_id: Optional[UUID]) -> None:
    # runs before the first write, so a bad tag never leaves a stored task behind
    if not tag_ids:
        return
    unique_ids = list(dict.fromkeys(tag_ids))
    if len(TagRepository(db, auto_commit=False).find_many(unique_ids, workspace_id)) != len(unique_ids):
        raise ValidationError("Tag not found in this workspace")


def _details(tasks: Sequence[Task]) -> List[TaskDetail]:
    return [TaskDetail.model_validate(task) for task in tasks]


# Reads

def get_task_detail(db: Session, task_id: UUID) -> TaskDetail:
    return TaskDetail.model_validate(TaskRepository(db).find_by_id(task_id))


def find_all_tasks(db: Session, workspace_id: UUID) -> List[TaskDetail]:
    return _details(TaskRepository(db).find_all(workspace_id))


def find_tasks_by_title(db: Session, title: str, workspace_id: UUID) -> List[TaskDetail]:
    return _details(TaskRepository(db).find_by_title(title, workspace_id))


def find_tasks_by_tag(db: Session, tag_name: str, workspace_id: UUID) -> List[TaskDetail]:
    return _details(TaskRepository(db).find_by_tag(tag_name, workspace_id))


def find_tasks_by_category(db: Session, category_name: str, workspace_id: UUID) -> List[TaskDetail]:
    return _details(TaskRepository(db).find_by_category(category_name, workspace_id))


# Writes

def create_task_with_subtasks(
    db: Session,
    task_data: TaskCreate,
    subtasks_data: Sequence[SubTaskCreate] = (),
    atomic: Optional[bool] = None,
) -> TaskDetail:
    """Create the task row, then one subtask row per entry, keyed to the new task."""
    _check_category(db, task_data.category_id, task_data.workspace_id)
    _check_tags(db, task_data.tag_ids, task_data.workspace_id)
    values = task_data.model_dump(exclude={"tag_ids"})

    if _use_atomic(db, atomic):
        tasks = TaskRepository(db, auto_commit=False)
        subtasks = SubTaskRepository(db, auto_commit=False)
        with transaction(db):
            task = tasks.create(**values)
            if task_data.tag_ids:
                tasks.set_tags(task, task_data.tag_ids)
            for entry in subtasks_data:
                subtasks.create(task_id=task.id, **entry.model_dump())
        logger.info(f"Task {task.id} created with {len(subtasks_data)} subtask(s)")
        return get_task_detail(db, task.id)

    tasks = TaskRepository(db)
    task = tasks.create(**values)
    if task_data.tag_ids:
        tasks.set_tags(task, task_data.tag_ids)
    created, _ = _best_effort(
        db, task.id, [lambda repo, e=entry: repo.create(task_id=task.id, **e.model_dump()) for entry in subtasks_data]
    )
    logger.info(f"Task {task.id} created with {created} subtask(s)")
    return get_task_detail(db, task.id)


def update_task_with_subtasks(
    db: Session,
    task_id: UUID,
    task_data: Optional[TaskUpdate] = None,
    subtasks_data: Sequence[SubTaskUpsert] = (),
    atomic: Optional[bool] = None,
) -> TaskDetail:
    """Apply a partial task update, then update or create each listed subtask.

    Subtasks that are not listed are left alone; nothing is deleted here.
    """
    changes = _partial(task_data.model_dump(exclude_unset=True)) if task_data else {}
    tag_ids = changes.pop("tag_ids", None)

    if _use_atomic(db, atomic):
        tasks = TaskRepository(db, auto_commit=False)
        subtasks = SubTaskRepository(db, auto_commit=False)
        with transaction(db):
            task = tasks.find_by_id(task_id)
            if "category_id" in changes:
                _check_category(db, changes["category_id"], task.workspace_id)
            tasks.apply(task, **changes)
            if tag_ids is not None:
                tasks.set_tags(task, tag_ids)
            for entry in subtasks_data:
                _upsert_subtask(subtasks, task, entry)
        logger.info(f"Task {task_id} updated ({len(subtasks_data)} subtask entries)")
        return get_task_detail(db, task_id)

    tasks = TaskRepository(db)
    task = tasks.find_by_id(task_id)
    if "category_id" in changes:
        _check_category(db, changes["category_id"], task.workspace_id)
    _check_tags(db, tag_ids, task.workspace_id)
    tasks.apply(task, **changes)
    if tag_ids is not None:
        tasks.set_tags(task, tag_ids)
    _best_effort(
        db, task.id, [lambda repo, e=entry: _upsert_subtask(repo, task, e) for entry in subtasks_data]
    )
    logger.info(f"Task {task_id} updated ({len(subtasks_data)} subtask entries)")
    return get_task_detail(db, task_id)


def delete_task_cascade(db: Session, task_id: UUID) -> TaskDetail:
    """Delete every subtask of the task, then the task itself. Returns the task as it was."""
    tasks = TaskRepository(db, auto_commit=False)
    subtasks = SubTaskRepository(db, auto_commit=False)

    task = tasks.find_by_id(task_id)
    snapshot = TaskDetail.model_validate(task)
    with transaction(db):
        children = subtasks.find_for_task(task.id)
        for subtask in children:
            subtasks.remove(subtask)
        db.expire(task, ["subtasks"])
        tasks.remove(task)
    logger.info(f"Task {task_id} deleted with {len(children)} subtask(s)")
    return snapshot


def _upsert_subtask(repo: SubTaskRepository, task: Task, entry: SubTaskUpsert):
    changes = _partial(entry.changes())
    if entry.subtask_id is None:
        return repo.create(task_id=task.id, **changes)
    subtask = repo.find_by_id(entry.subtask_id)
    if subtask.task_id != task.id:
        raise ValidationError("Subtask does not belong to this task")
    return repo.apply(subtask, **changes)


def _best_effort(db: Session, task_id: UUID, writes) -> tuple:
    """Run each subtask write in its own commit; report failures instead of undoing the rest."""
    repo = SubTaskRepository(db)
    created = failed = 0
    for write in writes:
        try:
            write(repo)
            created += 1
        except AppError as exc:
            failed += 1
            logger.error(f"Subtask write for task {task_id} failed: {exc.message}")
    if failed:
        raise PartialWriteError(task_id, created, failed)
    return created, failed
