import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient

from taskhub.core.config import Settings
from taskhub.core.database import Database
from taskhub.main import create_app
from taskhub.schemas.user import UserCreate
from taskhub.schemas.workspace import WorkspaceCreate
from taskhub.services import user_service, workspace_service

PASSWORD = "password123"


@pytest.fixture
def settings():
    """SQLite en mémoire, partagée entre toutes les sessions du test"""
    return Settings(DATABASE_URL="sqlite://", JWT_SECRET="test-secret", LOG_LEVEL="WARNING")


@pytest.fixture
def database(settings):
    """Crée et nettoie la DB avant/après chaque test"""
    database = Database(settings)
    database.create_schema()
    yield database
    database.drop_schema()
    database.dispose()


@pytest.fixture
def db(database):
    """Session DB pour les tests de services"""
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def client(settings, database):
    """Client de test FastAPI"""
    return TestClient(create_app(settings, database))


@pytest.fixture
def workspace(db):
    return workspace_service.create_workspace(db, WorkspaceCreate(name="Acme", description="Main workspace"))


@pytest.fixture
def other_workspace(db):
    return workspace_service.create_workspace(db, WorkspaceCreate(name="Globex"))


@pytest.fixture
def user(db):
    return user_service.create_user(
        db,
        UserCreate(
            first_name="Ada",
            last_name="Lovelace",
            phone_number="555-0100",
            email="ada@example.com",
            password=PASSWORD,
        ),
    )
