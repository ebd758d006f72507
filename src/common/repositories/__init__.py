"""
Repository Pattern for Job Application Storage

Provides abstraction layer over the document store so the API layer
works the same against MongoDB or the in-memory backend.

Public API:
- get_job_application_repository(): Factory to get repository instance
- JobApplicationRepositoryInterface: Abstract interface for the collection
- WriteResult: Result dataclass for write operations
"""

from .base import JobApplicationRepositoryInterface, WriteResult, to_object_id
from .config import (
    get_job_application_repository,
    reset_repository,
    RepositoryConfig,
    StoreBackend,
)

__all__ = [
    "get_job_application_repository",
    "reset_repository",
    "JobApplicationRepositoryInterface",
    "WriteResult",
    "RepositoryConfig",
    "StoreBackend",
    "to_object_id",
]
