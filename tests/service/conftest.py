"""
Pytest fixtures for tracker service tests.
"""

import os
from unittest.mock import MagicMock

# IMPORTANT: Set environment variables BEFORE any imports from tracker_service
# so TrackerSettings never points at a real MongoDB.
os.environ["ENVIRONMENT"] = "development"
os.environ["STORE_BACKEND"] = "memory"
os.environ["CORS_ORIGINS"] = "*"

import pytest
from fastapi.testclient import TestClient

from src.common.error_handling import StoreUnavailableError
from src.common.repositories import JobApplicationRepositoryInterface, reset_repository
from src.common.repositories.memory_repository import InMemoryJobApplicationRepository
from src.services.job_application_service import JobApplicationService


@pytest.fixture
def repository():
    """Empty in-memory store shared by the app for one test."""
    return InMemoryJobApplicationRepository()


@pytest.fixture
def app(repository):
    """The tracker app with the job application service bound to `repository`."""
    from tracker_service.app import app
    from tracker_service.routes.jobs import get_job_application_service

    app.dependency_overrides[get_job_application_service] = lambda: JobApplicationService(repository)
    reset_repository()
    yield app
    app.dependency_overrides.clear()
    reset_repository()


@pytest.fixture
def client(app):
    """FastAPI test client fixture."""
    return TestClient(app)


@pytest.fixture
def failing_repository():
    """Repository whose every call fails as if MongoDB were down."""
    repository = MagicMock(spec=JobApplicationRepositoryInterface)
    error = StoreUnavailableError("store unreachable")
    for name in ("find_all", "find_by_id", "insert_one", "update_by_id", "delete_by_id", "ping"):
        getattr(repository, name).side_effect = error
    return repository


@pytest.fixture
def failing_client(app, failing_repository):
    """Test client whose store is unreachable."""
    from tracker_service.routes.jobs import get_job_application_service

    app.dependency_overrides[get_job_application_service] = (
        lambda: JobApplicationService(failing_repository)
    )
    return TestClient(app)
