"""
Shared fixtures: a throwaway SQLite database per test and an API client bound to it.
"""
import os

# Never reach a real database from the test suite
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
import moodwall.models  # noqa: F401
from moodwall.core.config import settings
from moodwall.core.security import create_access_token
from moodwall.db.base import Base
from moodwall.db.session import build_engine, get_db, get_session_factory
from moodwall.main import app
from moodwall.models.user import User


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'moodwall.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    """Factory for profiles; pass auth_user_id for a registered user."""
    def _make_user(auth_user_id=None, username=None):
        user = User(
            auth_user_id=auth_user_id,
            username_optional=username,
            preferences={} if auth_user_id else {"is_guest": True}
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def guest_headers(client):
    response = client.post("/api/session/guest", json={})
    assert response.status_code == 201
    return {settings.GUEST_HEADER: response.json()["id"]}


@pytest.fixture
def auth_headers():
    token = create_access_token("auth-user-1")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def store_failure():
    """Factory for errors shaped like the ones the database driver raises."""
    def _store_failure(message="connection to server was lost"):
        return OperationalError("SELECT 1", {}, Exception(message))
    return _store_failure
