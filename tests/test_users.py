import uuid

import pytest

from taskhub.core.errors import NotFoundError, ValidationError
from taskhub.core.security import verify_password
from taskhub.repositories.user import UserRepository
from taskhub.schemas.user import UserCreate, UserUpdate
from taskhub.services import user_service

from conftest import PASSWORD


def user_payload(**overrides):
    payload = {
        "first_name": "Grace",
        "last_name": "Hopper",
        "phone_number": "555-0199",
        "email": "grace@example.com",
        "password": PASSWORD,
    }
    payload.update(overrides)
    return payload


# ============ SERVICE ============

def test_create_user_stores_a_hash(db, user):
    stored = UserRepository(db).find_by_id(user.id)
    assert stored.password_hash != PASSWORD
    assert verify_password(PASSWORD, stored.password_hash)


def test_user_view_has_full_name_and_no_password(user):
    dumped = user.model_dump()
    assert dumped["full_name"] == "Ada Lovelace"
    assert "password" not in dumped
    assert "password_hash" not in dumped


def test_duplicate_email_is_rejected(db, user):
    """Test : impossible de créer 2 users avec le même email"""
    with pytest.raises(ValidationError, match="Email already in use"):
        user_service.create_user(db, UserCreate(**user_payload(email="ada@example.com")))


def test_find_by_email(db, user):
    repo = UserRepository(db)
    assert repo.find_by_email("ada@example.com").id == user.id
    assert repo.find_by_email("missing@example.com") is None


def test_search_users(db, user):
    user_service.create_user(db, UserCreate(**user_payload()))

    assert [u.full_name for u in user_service.search_users(db, first_name="Ada")] == ["Ada Lovelace"]
    assert [u.full_name for u in user_service.search_users(db, last_name="Hopper")] == ["Grace Hopper"]
    assert user_service.search_users(db, "Ada", "Lovelace")[0].id == user.id


def test_search_users_without_parameters(db):
    with pytest.raises(ValidationError):
        user_service.search_users(db)


def test_search_users_no_match(db, user):
    with pytest.raises(NotFoundError, match="No users found matching the criteria"):
        user_service.search_users(db, first_name="Nobody")


def test_update_user_returns_edit_view_with_new_hash(db, user):
    edited = user_service.update_user(db, user.id, UserUpdate(first_name="Augusta", password="another-secret"))

    assert edited.first_name == "Augusta"
    assert edited.last_name == "Lovelace"
    assert edited.password != "another-secret"
    assert verify_password("another-secret", edited.password)


def test_update_missing_user(db):
    with pytest.raises(NotFoundError, match="User not found"):
        user_service.update_user(db, uuid.uuid4(), UserUpdate(first_name="X"))


def test_delete_user(db, user):
    deleted = user_service.delete_user(db, user.id)
    assert deleted.id == user.id
    with pytest.raises(NotFoundError):
        user_service.get_user(db, user.id)


# ============ ROUTES ============

def test_create_user_route(client):
    response = client.post("/v1/users", json=user_payload())
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["full_name"] == "Grace Hopper"
    assert "password" not in data


def test_create_user_invalid_name(client):
    response = client.post("/v1/users", json=user_payload(first_name="Gr4ce"))
    assert response.status_code == 400
    assert "first_name" in response.json()["message"]


def test_create_user_invalid_phone(client):
    response = client.post("/v1/users", json=user_payload(phone_number="call me"))
    assert response.status_code == 400


def test_create_user_short_password(client):
    response = client.post("/v1/users", json=user_payload(password="short"))
    assert response.status_code == 400


def test_create_user_duplicate_email_route(client, user):
    response = client.post("/v1/users", json=user_payload(email="ada@example.com"))
    assert response.status_code == 400
    assert response.json()["message"] == "Email already in use"


def test_get_user_route(client, user):
    response = client.get(f"/v1/users/{user.id}")
    assert response.status_code == 200
    assert response.json()["data"]["email"] == "ada@example.com"


def test_search_route(client, user):
    response = client.get("/v1/users/search", params={"firstName": "Ada"})
    assert response.status_code == 200
    assert response.json()["data"][0]["id"] == str(user.id)


def test_search_route_no_match_is_404(client, user):
    response = client.get("/v1/users/search", params={"lastName": "Nobody"})
    assert response.status_code == 404
    assert response.json()["message"] == "No users found matching the criteria"


def test_update_user_route_returns_hash(client, user):
    response = client.put(f"/v1/users/{user.id}", json={"phone_number": "555-0101"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["phone_number"] == "555-0101"
    assert data["password"].startswith("$2")


def test_delete_user_route(client, user):
    response = client.delete(f"/v1/users/{user.id}")
    assert response.status_code == 200
    assert client.get(f"/v1/users/{user.id}").status_code == 400


def test_search_route_without_parameters_is_404(client, user):
    response = client.get("/v1/users/search")
    assert response.status_code == 404
    body = response.json()
    assert body["status"] == "error"
    assert body["message"] == "No search parameters provided"


def test_create_user_password_too_long(client):
    response = client.post("/v1/users", json=user_payload(password="x" * 101))
    assert response.status_code == 400
    assert "password" in response.json()["message"]


def test_create_user_password_at_max_length(client):
    response = client.post("/v1/users", json=user_payload(password="x" * 100))
    assert response.status_code == 201
