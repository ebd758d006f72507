"""
Tracker Service Configuration Module

Centralized configuration management with Pydantic validation.
All environment variables are validated at startup to catch misconfigurations early.
"""

from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from src.common.repositories import RepositoryConfig, StoreBackend
from src.common.repositories.base import JOB_APPLICATIONS_COLLECTION

# Load environment variables from .env file
load_dotenv()


class TrackerSettings(BaseSettings):
    """
    Tracker service configuration with validation.

    All settings can be overridden via environment variables.
    Validation happens at startup to fail fast on misconfiguration.
    """

    # === Server ===
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=5010, ge=1, le=65535, description="Listening port")
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # === CORS ===
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    # === Store ===
    mongodb_uri: str = Field(
        default="mongodb://localhost:27017/job-tracker",
        description="MongoDB connection URI (database taken from the path)"
    )
    store_backend: StoreBackend = Field(
        default=StoreBackend.MONGODB,
        description="Store backend: mongodb or memory"
    )
    mongo_db_name: Optional[str] = Field(
        default=None,
        description="Database name override (default: taken from the URI path)"
    )
    mongo_collection: str = Field(
        default=JOB_APPLICATIONS_COLLECTION,
        description="Collection holding job applications"
    )

    # === Logging ===
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(default="simple", description="Log format: simple or json")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        allowed = {"development", "staging", "production"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of: {', '.join(sorted(allowed))}")
        return v_lower

    @field_validator("mongodb_uri")
    @classmethod
    def validate_url_format(cls, v: str) -> str:
        """Basic URL format validation."""
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(f"Invalid MongoDB URI format: {v}")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in {"simple", "json"}:
            raise ValueError("log_format must be 'simple' or 'json'")
        return v_lower

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins into a list."""
        if not self.cors_origins:
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    @property
    def repository_config(self) -> RepositoryConfig:
        """Store settings in the shape the repository factory expects."""
        return RepositoryConfig(
            mongodb_uri=self.mongodb_uri,
            backend=self.store_backend,
            database=self.mongo_db_name or None,
            collection=self.mongo_collection or JOB_APPLICATIONS_COLLECTION,
        )

    def validate_production_config(self) -> List[str]:
        """
        Validate configuration is suitable for production.

        Returns list of warning/error messages.
        """
        issues = []

        if self.is_production:
            if self.store_backend == StoreBackend.MEMORY:
                issues.append("CRITICAL: STORE_BACKEND=memory loses data on restart")
            if "localhost" in self.mongodb_uri:
                issues.append("WARNING: Using localhost MongoDB in production")
            if "*" in self.cors_origins_list:
                issues.append("WARNING: CORS_ORIGINS allows every origin")

        return issues

    class Config:
        env_prefix = ""  # No prefix, use exact env var names
        case_sensitive = False  # MONGODB_URI = mongodb_uri


@lru_cache()
def get_settings() -> TrackerSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached.
    Use this function to access configuration throughout the app.
    """
    return TrackerSettings()


def validate_config_on_startup() -> None:
    """
    Validate configuration at application startup.

    Raises ValueError with details if config is invalid.
    Logs warnings for non-critical issues.
    """
    import logging
    logger = logging.getLogger(__name__)

    try:
        settings = get_settings()
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}")

    for issue in settings.validate_production_config():
        if issue.startswith("CRITICAL"):
            raise ValueError(issue)
        else:
            logger.warning(issue)

    # Log loaded configuration (redact credentials)
    logger.info(f"Configuration loaded: environment={settings.environment}")
    logger.info(f"  store_backend={settings.store_backend.value}")
    logger.info(f"  mongo_collection={settings.mongo_collection}")
    logger.info(f"  mongodb_uri={'*****' if 'localhost' not in settings.mongodb_uri else settings.mongodb_uri}")
    logger.info(f"  port={settings.port}")


# Convenience exports
settings = get_settings()
