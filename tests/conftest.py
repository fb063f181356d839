"""
Shared pytest fixtures.

Provides a test application wired to an in-memory FakeRecordRepository,
so router tests never need a Supabase database.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_record_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakeRecordRepository
from tests.fakes.conftest import override_dependency, reset_overrides


@pytest.fixture
def record_repo() -> FakeRecordRepository:
    """A fresh, empty FakeRecordRepository."""
    return FakeRecordRepository()


@pytest.fixture
def app(record_repo):
    """Test application using the fake record repository."""
    settings = Settings(environment="test", _env_file=None)
    app = create_app(settings=settings)
    override_dependency(app, get_record_repo, record_repo)
    yield app
    reset_overrides(app)


@pytest.fixture
def client(app):
    """TestClient for the test application."""
    return TestClient(app)
