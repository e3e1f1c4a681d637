# tests/conftest.py
import os
from datetime import datetime, timedelta

# Must be set before the app reads its settings; overrides whatever the shell exports
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient

from app.application.services import auth_service, diary_service
from app.domain.models.diary_entry import DiaryEntry
from app.domain.models.user import User
from app.domain.schemas.auth import RegisterRequest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.infrastructure.database import Base, get_db
from app.infrastructure.file_storage import ProfilePictureStorage
from app.infrastructure.repositories.diary_repository import SQLAlchemyDiaryEntryRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from app.interfaces.deps import get_picture_storage
from app.main import app

ALICE_PASSWORD = "Secret123"

# Dedicated in-memory database; the app engine is never used by the suite
test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


class FrozenClock:
    """Controllable replacement for the services' utcnow()."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture(autouse=True)
def database():
    """Fresh schema for every test."""
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session(database):
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user_repo(db_session):
    return SQLAlchemyUserRepository(db_session, User)


@pytest.fixture
def diary_repo(db_session):
    return SQLAlchemyDiaryEntryRepository(db_session, DiaryEntry)


@pytest.fixture
def clock(monkeypatch):
    frozen = FrozenClock(datetime(2024, 3, 1, 9, 0, 0))
    monkeypatch.setattr(auth_service, "utcnow", frozen)
    monkeypatch.setattr(diary_service, "utcnow", frozen)
    return frozen


@pytest.fixture
def alice(user_repo):
    """Registered user 'alice'; returns the profile projection."""
    result = auth_service.register_user(
        user_repo,
        RegisterRequest(
            username="alice",
            email="alice@example.com",
            password=ALICE_PASSWORD,
            first_name="Alice",
            last_name="Liddell",
        ),
    )
    assert result.success
    return result.data


@pytest.fixture
def picture_storage(tmp_path):
    return ProfilePictureStorage(upload_dir=str(tmp_path / "uploads"))


@pytest.fixture
def client(picture_storage):
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_picture_storage] = lambda: picture_storage
    # No lifespan: the schema comes from the database fixture
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_via_api(client, username="alice", email="alice@example.com", password=ALICE_PASSWORD):
    r = client.post(
        "/api/auth/register",
        json={"username": username, "email": email, "password": password},
    )
    assert r.status_code == 201, r.text
    return r.json()


def login_via_api(client, username="alice", password=ALICE_PASSWORD):
    return client.post("/api/auth/login", json={"username": username, "password": password})
