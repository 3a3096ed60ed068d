import uuid

import pytest

from taskhub.core.errors import NotFoundError
from taskhub.models.enums import ReadStatus
from taskhub.repositories.notification import NotificationRepository
from taskhub.schemas.notification import NotificationCreate
from taskhub.services import notification_service


def test_new_notification_is_unread_even_if_read_requested(db, user):
    """Test : une notification est toujours créée non lue"""
    note = NotificationRepository(db).create(user_id=user.id, content="Hello", read_status=ReadStatus.READ)
    assert note.read_status == ReadStatus.UNREAD


def test_mark_as_read_is_idempotent(db, user):
    note = notification_service.create_notification(db, NotificationCreate(user_id=user.id, content="Hello"))

    first = notification_service.mark_as_read(db, note.id)
    second = notification_service.mark_as_read(db, note.id)

    assert first.read_status == ReadStatus.READ
    assert second.read_status == ReadStatus.READ


def test_update_cannot_change_read_status(db, user):
    repo = NotificationRepository(db)
    note = repo.create(user_id=user.id, content="Hello")

    updated = repo.update(note.id, content="Edited", read_status=ReadStatus.READ)

    assert updated.content == "Edited"
    assert updated.read_status == ReadStatus.UNREAD


def test_mark_missing_notification(db):
    with pytest.raises(NotFoundError, match="Notification not found"):
        notification_service.mark_as_read(db, uuid.uuid4())


def test_notifications_for_user(db, user):
    notification_service.create_notification(db, NotificationCreate(user_id=user.id, content="one"))
    notification_service.create_notification(db, NotificationCreate(user_id=user.id, content="two"))

    notes = notification_service.get_notifications_for_user(db, user.id)

    assert sorted(n.content for n in notes) == ["one", "two"]
    assert notification_service.get_notifications_for_user(db, uuid.uuid4()) == []


# ============ ROUTES ============

def test_create_notification_route_accepts_message_key(client, user):
    response = client.post(
        "/v1/notifications",
        json={"user_id": str(user.id), "message": "Standup at 10", "read_status": "Read"},
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["content"] == "Standup at 10"
    assert data["read_status"] == "Unread"
    assert data["type"] == "Reminder"


def test_create_notification_invalid_type(client, user):
    response = client.post(
        "/v1/notifications", json={"user_id": str(user.id), "content": "x", "type": "Spam"}
    )
    assert response.status_code == 400


def test_mark_as_read_route(client, user):
    note_id = client.post(
        "/v1/notifications", json={"user_id": str(user.id), "content": "Read me"}
    ).json()["data"]["id"]

    for _ in range(2):
        response = client.put(f"/v1/notifications/{note_id}/read")
        assert response.status_code == 200
        assert response.json()["data"]["read_status"] == "Read"


def test_list_and_delete_notification_route(client, user):
    note_id = client.post(
        "/v1/notifications", json={"user_id": str(user.id), "content": "Bye"}
    ).json()["data"]["id"]

    listing = client.get(f"/v1/notifications/user/{user.id}")
    assert [n["id"] for n in listing.json()["data"]] == [note_id]

    response = client.delete(f"/v1/notifications/{note_id}")
    assert response.status_code == 200
    assert response.json()["data"] == "Notification deleted successfully"
    assert client.get(f"/v1/notifications/user/{user.id}").json()["data"] == []
