# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.

Settings are read from the environment at import time, so the test
environment is set up before anything from `app` is imported.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_EMAIL"] = "admin@example.com"
os.environ.pop("ANALYTICS_WEBHOOK_URL", None)

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.database import get_session
from app.main import app as fastapi_app
from app.models import waitlist as _waitlist_models  # noqa: F401

ADMIN_EMAIL = os.environ["ADMIN_EMAIL"]
API = "/api/v1"


@pytest.fixture(scope="function")
def engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(scope="function")
def session(engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture(scope="function")
def client(engine) -> Generator[TestClient, None, None]:
    """Test client whose requests use the per-test database."""

    def override_get_session():
        with Session(engine) as session:
            yield session

    fastapi_app.dependency_overrides[get_session] = override_get_session
    with TestClient(fastapi_app) as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"X-Admin-Email": ADMIN_EMAIL}


@pytest.fixture
def valid_draft():
    return {
        "name": "Ada Lovelace",
        "email": "ada@x.com",
        "phone": "08012345678",
        "user_type": "seller",
        "reason": "",
    }
