# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Builds real SQLite-backed stores and fake stores for failure paths
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text

from app.exceptions import DatabaseConnectionError, QueryError
from app.main import create_app
from lib.database import UserStore


# =============================================================================
# Fakes
# =============================================================================

class FakeUserStore:
    """In-memory stand-in for UserStore."""

    def __init__(self, names=None, error: Exception | None = None):
        self.names = list(names or [])
        self.error = error
        self.calls = 0

    def fetch_names(self) -> list[str]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.names)

    def ping(self) -> None:
        if isinstance(self.error, DatabaseConnectionError):
            raise self.error

    def close(self) -> None:
        pass


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def make_users_db(tmp_path):
    """
    Factory: create a SQLite file with a users table holding `names`.

    Returns the SQLAlchemy URL of the new database.
    """
    counter = {"n": 0}

    def _make(names=(), column_type: str = "TEXT") -> str:
        counter["n"] += 1
        db_path = tmp_path / f"users_{counter['n']}.db"
        url = f"sqlite:///{db_path}"
        engine = create_engine(url)
        with engine.begin() as conn:
            conn.execute(text(
                f"CREATE TABLE users (id INTEGER PRIMARY KEY, first_name {column_type})"
            ))
            for name in names:
                conn.execute(
                    text("INSERT INTO users (first_name) VALUES (:name)"),
                    {"name": name},
                )
        engine.dispose()
        return url

    return _make


@pytest.fixture
def sample_names():
    return ["Ada", "Grace", "Linus", "Barbara"]


@pytest.fixture
def user_store(make_users_db, sample_names):
    """Real UserStore over a SQLite file with sample_names."""
    store = UserStore.connect(make_users_db(sample_names))
    yield store
    store.close()


@pytest.fixture
def client_for():
    """Factory: TestClient for an app wired to the given store."""

    def _client(store) -> TestClient:
        return TestClient(create_app(store=store))

    return _client


@pytest.fixture
def failing_query_store():
    return FakeUserStore(error=QueryError("Error 1146: Table 'myapp.users' doesn't exist"))
