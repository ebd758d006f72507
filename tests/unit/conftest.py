"""
Global fixtures for all unit tests.

Provides autouse fixtures that keep tests away from real services:
- Environment variable isolation (no real MONGODB_URI leaks in)
- Repository singleton reset between tests

These fixtures apply automatically to ALL tests in tests/unit/.
"""

import pytest

from src.common.repositories import reset_repository
from src.common.repositories.memory_repository import InMemoryJobApplicationRepository
from src.services.job_application_service import JobApplicationService


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Strip store configuration so every test starts from defaults."""
    for name in ("MONGODB_URI", "STORE_BACKEND", "MONGO_DB_NAME", "MONGO_COLLECTION"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def fresh_repository_singleton():
    """Drop any repository created by a previous test."""
    reset_repository()
    yield
    reset_repository()


@pytest.fixture
def memory_repository():
    """Empty in-memory repository."""
    return InMemoryJobApplicationRepository()


@pytest.fixture
def service(memory_repository):
    """JobApplicationService over an empty in-memory store."""
    return JobApplicationService(memory_repository)
