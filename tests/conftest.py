"""Shared fixtures: in-memory SQLite database, FastAPI test client, two users.

Environment is set before the app is imported so Settings() never needs a real
.env file.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.session import Base, get_db, init_db
from app.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """FastAPI test client with get_db pointed at the test database."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register(client):
    """Register a user and return Authorization headers for them."""
    def _register(email, name="Test User", password="secret123"):
        res = client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert res.status_code == 201, res.text
        return {"Authorization": f"Bearer {res.json()['access_token']}"}
    return _register


@pytest.fixture
def alice(register):
    return register("alice@example.com", "Alice")


@pytest.fixture
def bob(register):
    return register("bob@example.com", "Bob")


@pytest.fixture
def make_project(client):
    def _make(headers, **overrides):
        body = {"name": "Website", "eta": "2030-06-01T00:00:00", **overrides}
        res = client.post("/api/projects", json=body, headers=headers)
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _make


@pytest.fixture
def make_task(client):
    def _make(headers, project_id, **overrides):
        body = {
            "name": "Landing page",
            "moduleName": "frontend",
            "dueDate": "2030-01-15T00:00:00",
            "project": project_id,
            **overrides,
        }
        res = client.post("/api/tasks", json=body, headers=headers)
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _make


@pytest.fixture
def make_todo(client):
    def _make(headers, task_id, **overrides):
        body = {
            "title": "Write copy",
            "dueDate": "2030-01-10T00:00:00",
            "task": task_id,
            **overrides,
        }
        res = client.post("/api/todos", json=body, headers=headers)
        assert res.status_code == 201, res.text
        return res.json()["data"]
    return _make
