"""
Repository Configuration and Factory

Provides factory function to get the appropriate repository implementation
based on environment configuration.
"""

import os
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .base import JOB_APPLICATIONS_COLLECTION, JobApplicationRepositoryInterface

logger = logging.getLogger(__name__)

DEFAULT_MONGODB_URI = "mongodb://localhost:27017/job-tracker"


class StoreBackend(str, Enum):
    """Where job applications are kept."""
    MONGODB = "mongodb"
    MEMORY = "memory"  # Process-local, lost on restart


@dataclass
class RepositoryConfig:
    """
    Configuration for repository initialization.

    Loaded from environment variables with sensible defaults.
    """
    mongodb_uri: str = DEFAULT_MONGODB_URI
    backend: StoreBackend = StoreBackend.MONGODB

    # Database/collection names (database defaults to the URI path)
    database: Optional[str] = None
    collection: str = JOB_APPLICATIONS_COLLECTION

    @classmethod
    def from_env(cls) -> "RepositoryConfig":
        """
        Load configuration from environment variables.

        Environment variables:
        - MONGODB_URI: MongoDB connection string
        - STORE_BACKEND: mongodb (default) or memory
        - MONGO_DB_NAME: Database name override
        - MONGO_COLLECTION: Collection name override
        """
        backend_str = os.getenv("STORE_BACKEND", StoreBackend.MONGODB.value).lower()
        try:
            backend = StoreBackend(backend_str)
        except ValueError:
            logger.warning(f"Invalid STORE_BACKEND '{backend_str}', defaulting to mongodb")
            backend = StoreBackend.MONGODB

        return cls(
            mongodb_uri=os.getenv("MONGODB_URI") or DEFAULT_MONGODB_URI,
            backend=backend,
            database=os.getenv("MONGO_DB_NAME") or None,
            collection=os.getenv("MONGO_COLLECTION") or JOB_APPLICATIONS_COLLECTION,
        )


# Singleton repository instance
_repository_instance: Optional[JobApplicationRepositoryInterface] = None


def get_job_application_repository(
    config: Optional[RepositoryConfig] = None,
) -> JobApplicationRepositoryInterface:
    """
    Get the job application repository instance.

    Factory function that returns the appropriate repository implementation
    based on configuration. Uses singleton pattern for connection pooling;
    the config is only consulted on first use (or after reset_repository()).
    """
    global _repository_instance

    if _repository_instance is None:
        config = config or RepositoryConfig.from_env()

        if config.backend == StoreBackend.MEMORY:
            from .memory_repository import InMemoryJobApplicationRepository
            _repository_instance = InMemoryJobApplicationRepository()
            logger.info("Initialized in-memory job application repository")
        else:
            from .mongo_repository import MongoJobApplicationRepository
            _repository_instance = MongoJobApplicationRepository(
                mongodb_uri=config.mongodb_uri,
                database=config.database,
                collection=config.collection,
            )
            logger.info("Initialized MongoDB job application repository")

    return _repository_instance


def reset_repository() -> None:
    """Reset the repository singleton."""
    global _repository_instance

    if _repository_instance is not None:
        from .mongo_repository import MongoJobApplicationRepository
        if isinstance(_repository_instance, MongoJobApplicationRepository):
            MongoJobApplicationRepository.reset_connection()

    _repository_instance = None
    logger.info("Repository singleton reset")
