"""
Shared fixtures: an app wired to in-memory storage and a Flask test client.
"""
import os

# Keep the module-level app off the real licences.db
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest

from app import create_app
from request_store import MemoryStorage, RequestStore


@pytest.fixture(autouse=True)
def no_credentials(monkeypatch):
    for name in ("OPENAI_API_KEY", "ANTHROPIC_API_KEY", "GOOGLE_API_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return RequestStore(storage)


@pytest.fixture
def app(storage):
    return create_app(
        {"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite://", "PORTAL_URL": "http://localhost"},
        storage=storage,
    )


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ada():
    return {
        "name": "Ada",
        "email": "ada@x.com",
        "use": "research",
        "duration": "1 year",
        "accept": "on",
    }
