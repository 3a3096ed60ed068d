from datetime import datetime
import uuid

import pytest
from pydantic import ValidationError as SchemaError

from taskhub.core.errors import NotFoundError, PartialWriteError, ValidationError
from taskhub.models.enums import Priority, SubTaskStatus, TaskStatus
from taskhub.models.subtask import SubTask
from taskhub.repositories.notification import NotificationRepository
from taskhub.repositories.subtask import SubTaskRepository
from taskhub.schemas.category import CategoryCreate
from taskhub.schemas.tag import TagCreate
from taskhub.schemas.task import SubTaskCreate, SubTaskUpsert, TaskCreate, TaskUpdate
from taskhub.services import category_service, tag_service, task_service


def make_task(db, workspace_id, title="Write report", subtasks=(), **extra):
    data = TaskCreate(title=title, workspace_id=workspace_id, **extra)
    return task_service.create_task_with_subtasks(db, data, [SubTaskCreate(title=t) for t in subtasks])


# ============ LECTURE AGRÉGÉE ============

def test_create_then_get_round_trip(db, workspace, user):
    """TEST: les champs fournis à la création se retrouvent à la lecture"""
    category = category_service.create_category(db, CategoryCreate(name="Work", workspace_id=workspace.id))
    due = datetime(2030, 5, 17, 9, 30)
    created = make_task(
        db,
        workspace.id,
        title="Quarterly review",
        description="Prepare slides",
        due_date=due,
        status=TaskStatus.IN_PROGRESS,
        priority=Priority.HIGH,
        category_id=category.id,
        user_id=user.id,
    )

    fetched = task_service.get_task_detail(db, created.id)

    assert fetched.title == "Quarterly review"
    assert fetched.description == "Prepare slides"
    assert fetched.due_date == due
    assert fetched.status == TaskStatus.IN_PROGRESS
    assert fetched.priority == Priority.HIGH
    assert fetched.workspace_id == workspace.id
    assert fetched.category_id == category.id
    assert fetched.user_id == user.id


def test_task_detail_without_relations_has_empty_collections(db, workspace):
    """TEST: pas de sous-tâches / tags / catégorie -> listes vides et None"""
    task = make_task(db, workspace.id)

    detail = task_service.get_task_detail(db, task.id)

    assert detail.subtasks == []
    assert detail.tags == []
    assert detail.notifications == []
    assert detail.category is None
    assert detail.status == TaskStatus.NOT_STARTED
    assert detail.priority == Priority.MEDIUM


def test_task_detail_includes_related_rows(db, workspace, user):
    category = category_service.create_category(db, CategoryCreate(name="Ops", workspace_id=workspace.id))
    tag = tag_service.create_tag(db, TagCreate(name="urgent", workspace_id=workspace.id))
    task = make_task(
        db, workspace.id, subtasks=["one", "two"], category_id=category.id, tag_ids=[tag.id]
    )
    NotificationRepository(db).create(user_id=user.id, task_id=task.id, content="Due soon")

    detail = task_service.get_task_detail(db, task.id)

    assert sorted(s.title for s in detail.subtasks) == ["one", "two"]
    assert all(s.status == SubTaskStatus.PENDING for s in detail.subtasks)
    assert [t.name for t in detail.tags] == ["urgent"]
    assert detail.category.name == "Ops"
    assert [n.content for n in detail.notifications] == ["Due soon"]


def test_get_task_detail_not_found(db):
    with pytest.raises(NotFoundError, match="Task not found"):
        task_service.get_task_detail(db, uuid.uuid4())


# ============ RECHERCHES ============

def test_find_tasks_by_category_returns_exactly_the_task(db, workspace):
    """TEST: W -> C dans W -> T dans W avec C ; recherche par catégorie = [T]"""
    category = category_service.create_category(db, CategoryCreate(name="Home", workspace_id=workspace.id))
    task = make_task(db, workspace.id, title="Paint fence", category_id=category.id)
    make_task(db, workspace.id, title="No category")

    found = task_service.find_tasks_by_category(db, "Home", workspace.id)

    assert [t.id for t in found] == [task.id]
    assert found[0].category.name == "Home"


def test_find_tasks_by_category_is_workspace_scoped(db, workspace, other_workspace):
    mine = category_service.create_category(db, CategoryCreate(name="Home", workspace_id=workspace.id))
    theirs = category_service.create_category(db, CategoryCreate(name="Home", workspace_id=other_workspace.id))
    make_task(db, workspace.id, category_id=mine.id)
    other = make_task(db, other_workspace.id, category_id=theirs.id)

    found = task_service.find_tasks_by_category(db, "Home", other_workspace.id)

    assert [t.id for t in found] == [other.id]


def test_find_tasks_by_tag(db, workspace, other_workspace):
    urgent = tag_service.create_tag(db, TagCreate(name="urgent", workspace_id=workspace.id))
    later = tag_service.create_tag(db, TagCreate(name="later", workspace_id=workspace.id))
    foreign = tag_service.create_tag(db, TagCreate(name="urgent", workspace_id=other_workspace.id))
    tagged = make_task(db, workspace.id, title="A", tag_ids=[urgent.id, later.id])
    make_task(db, workspace.id, title="B", tag_ids=[later.id])
    make_task(db, other_workspace.id, title="C", tag_ids=[foreign.id])

    found = task_service.find_tasks_by_tag(db, "urgent", workspace.id)

    assert [t.id for t in found] == [tagged.id]
    assert sorted(t.name for t in found[0].tags) == ["later", "urgent"]


def test_find_tasks_by_title_and_all(db, workspace, other_workspace):
    make_task(db, workspace.id, title="Same")
    make_task(db, workspace.id, title="Other")
    make_task(db, other_workspace.id, title="Same")

    assert len(task_service.find_tasks_by_title(db, "Same", workspace.id)) == 1
    assert len(task_service.find_all_tasks(db, workspace.id)) == 2
    assert task_service.find_all_tasks(db, uuid.uuid4()) == []


# ============ ÉCRITURES AGRÉGÉES ============

def test_create_task_rejects_tag_from_other_workspace(db, workspace, other_workspace):
    foreign = tag_service.create_tag(db, TagCreate(name="x", workspace_id=other_workspace.id))

    with pytest.raises(ValidationError):
        make_task(db, workspace.id, tag_ids=[foreign.id])

    assert task_service.find_all_tasks(db, workspace.id) == []


def test_create_task_rejects_category_from_other_workspace(db, workspace, other_workspace):
    foreign = category_service.create_category(db, CategoryCreate(name="x", workspace_id=other_workspace.id))

    with pytest.raises(ValidationError):
        make_task(db, workspace.id, category_id=foreign.id)


def test_atomic_create_rolls_back_everything_on_subtask_failure(db, workspace):
    """TEST: mode atomique -> aucune ligne si une sous-tâche échoue"""
    broken = SubTaskCreate.model_construct(
        title=None, description=None, due_date=None, status=SubTaskStatus.PENDING, priority=Priority.MEDIUM
    )
    data = TaskCreate(title="All or nothing", workspace_id=workspace.id)

    with pytest.raises(ValidationError):
        task_service.create_task_with_subtasks(db, data, [SubTaskCreate(title="ok"), broken], atomic=True)

    assert task_service.find_all_tasks(db, workspace.id) == []
    assert db.query(SubTask).count() == 0


def test_best_effort_create_keeps_rows_and_reports_partial_failure(db, workspace):
    """TEST: mode best-effort -> tâche + sous-tâches valides gardées, échec signalé"""
    broken = SubTaskCreate.model_construct(
        title=None, description=None, due_date=None, status=SubTaskStatus.PENDING, priority=Priority.MEDIUM
    )
    data = TaskCreate(title="Best effort", workspace_id=workspace.id)

    with pytest.raises(PartialWriteError) as excinfo:
        task_service.create_task_with_subtasks(db, data, [SubTaskCreate(title="ok"), broken], atomic=False)

    assert excinfo.value.created == 1
    assert excinfo.value.failed == 1
    tasks = task_service.find_all_tasks(db, workspace.id)
    assert len(tasks) == 1
    assert tasks[0].id == excinfo.value.task_id
    assert [s.title for s in tasks[0].subtasks] == ["ok"]


def test_best_effort_create_with_foreign_tag_stores_nothing(db, workspace, other_workspace):
    """TEST: best-effort + tag d'un autre workspace -> refus avant toute écriture"""
    foreign = tag_service.create_tag(db, TagCreate(name="x", workspace_id=other_workspace.id))
    data = TaskCreate(title="Orphan", workspace_id=workspace.id, tag_ids=[foreign.id])

    with pytest.raises(ValidationError, match="Tag not found in this workspace"):
        task_service.create_task_with_subtasks(db, data, [SubTaskCreate(title="a")], atomic=False)

    assert task_service.find_all_tasks(db, workspace.id) == []
    assert db.query(SubTask).count() == 0


def test_best_effort_update_with_foreign_tag_changes_nothing(db, workspace, other_workspace):
    foreign = tag_service.create_tag(db, TagCreate(name="x", workspace_id=other_workspace.id))
    task = make_task(db, workspace.id, title="Untouched")

    with pytest.raises(ValidationError, match="Tag not found in this workspace"):
        task_service.update_task_with_subtasks(
            db, task.id, TaskUpdate(title="Renamed", tag_ids=[foreign.id]), atomic=False
        )

    detail = task_service.get_task_detail(db, task.id)
    assert detail.title == "Untouched"
    assert detail.tags == []


def test_best_effort_create_without_failure(db, workspace):
    data = TaskCreate(title="Fine", workspace_id=workspace.id)

    detail = task_service.create_task_with_subtasks(
        db, data, [SubTaskCreate(title="a"), SubTaskCreate(title="b")], atomic=False
    )

    assert len(detail.subtasks) == 2


def test_update_task_with_subtasks_updates_in_place_and_creates_one(db, workspace):
    """TEST: S1 mis à jour, une nouvelle sous-tâche, les autres intactes"""
    task = make_task(db, workspace.id, subtasks=["first", "second"])
    first = next(s for s in task.subtasks if s.title == "first")
    second = next(s for s in task.subtasks if s.title == "second")

    updated = task_service.update_task_with_subtasks(
        db,
        task.id,
        TaskUpdate(status=TaskStatus.COMPLETED),
        [
            SubTaskUpsert(subtask_id=first.id, status=SubTaskStatus.COMPLETED),
            SubTaskUpsert(title="new", status=SubTaskStatus.PENDING),
        ],
    )

    assert updated.status == TaskStatus.COMPLETED
    assert len(updated.subtasks) == 3
    by_id = {s.id: s for s in updated.subtasks}
    assert by_id[first.id].status == SubTaskStatus.COMPLETED
    assert by_id[first.id].title == "first"
    assert by_id[second.id].status == SubTaskStatus.PENDING
    assert by_id[second.id].title == "second"
    new = [s for s in updated.subtasks if s.id not in (first.id, second.id)]
    assert len(new) == 1
    assert new[0].title == "new"


def test_update_task_only_changes_supplied_fields(db, workspace):
    task = make_task(db, workspace.id, title="Keep me", description="original", priority=Priority.HIGH)

    updated = task_service.update_task_with_subtasks(db, task.id, TaskUpdate(description="changed"))

    assert updated.title == "Keep me"
    assert updated.priority == Priority.HIGH
    assert updated.description == "changed"


def test_update_task_replaces_tags(db, workspace):
    a = tag_service.create_tag(db, TagCreate(name="a", workspace_id=workspace.id))
    b = tag_service.create_tag(db, TagCreate(name="b", workspace_id=workspace.id))
    task = make_task(db, workspace.id, tag_ids=[a.id])

    updated = task_service.update_task_with_subtasks(db, task.id, TaskUpdate(tag_ids=[b.id]))

    assert [t.name for t in updated.tags] == ["b"]


def test_update_rejects_subtask_of_another_task(db, workspace):
    task = make_task(db, workspace.id, subtasks=["mine"])
    other = make_task(db, workspace.id, subtasks=["theirs"])
    foreign_id = other.subtasks[0].id

    with pytest.raises(ValidationError):
        task_service.update_task_with_subtasks(
            db, task.id, TaskUpdate(title="renamed"), [SubTaskUpsert(subtask_id=foreign_id, title="hijack")]
        )

    # atomique par défaut : rien n'a changé
    assert task_service.get_task_detail(db, task.id).title == "Write report"
    assert task_service.get_task_detail(db, other.id).subtasks[0].title == "theirs"


def test_update_missing_task(db):
    with pytest.raises(NotFoundError):
        task_service.update_task_with_subtasks(db, uuid.uuid4(), TaskUpdate(title="x"))


def test_subtask_upsert_requires_title_for_new_entries():
    with pytest.raises(SchemaError):
        SubTaskUpsert(status=SubTaskStatus.PENDING)


# ============ SUPPRESSION EN CASCADE ============

def test_delete_task_cascade_removes_subtasks_then_task(db, workspace, user):
    task = make_task(db, workspace.id, subtasks=["a", "b", "c"])
    subtask_ids = [s.id for s in task.subtasks]
    note = NotificationRepository(db).create(user_id=user.id, task_id=task.id, content="ping")

    deleted = task_service.delete_task_cascade(db, task.id)

    assert deleted.id == task.id
    assert len(deleted.subtasks) == 3
    with pytest.raises(NotFoundError):
        task_service.get_task_detail(db, task.id)
    repo = SubTaskRepository(db)
    for subtask_id in subtask_ids:
        with pytest.raises(NotFoundError):
            repo.find_by_id(subtask_id)
    with pytest.raises(NotFoundError):
        NotificationRepository(db).find_by_id(note.id)


def test_delete_task_cascade_without_subtasks(db, workspace):
    task = make_task(db, workspace.id)

    task_service.delete_task_cascade(db, task.id)

    assert task_service.find_all_tasks(db, workspace.id) == []


def test_delete_task_cascade_missing_task(db):
    with pytest.raises(NotFoundError):
        task_service.delete_task_cascade(db, uuid.uuid4())
