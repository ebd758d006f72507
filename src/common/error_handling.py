"""
Centralized error handling for the job application tracker.

Two error kinds reach callers: client errors (bad input, not found) and
server errors (store unreachable). Each carries the HTTP status it maps to.
"""

import logging
from functools import wraps
from typing import Callable, List, Optional, TypeVar

from pymongo.errors import PyMongoError

# Type variable for generic return types
T = TypeVar("T")


class TrackerError(Exception):
    """Base exception for tracker operations."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ClientError(TrackerError):
    """The request itself was wrong (4xx)."""

    status_code = 400


class InvalidJobApplicationError(ClientError):
    """Raised when a job application violates the record schema."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or []


class JobApplicationNotFoundError(ClientError):
    """Raised when no job application has the requested id."""

    status_code = 404

    def __init__(self, job_id: str):
        super().__init__("Job application not found")
        self.job_id = job_id


class ServerError(TrackerError):
    """The tracker could not complete a valid request (5xx)."""

    status_code = 500


class StoreUnavailableError(ServerError):
    """Raised when the document store cannot be reached."""
    pass


def store_operation(operation_name: str):
    """
    Decorator for store calls with consistent error handling.

    Logs the failure at ERROR level with a stack trace and re-raises
    pymongo errors as StoreUnavailableError. Other exceptions propagate
    unchanged.

    Usage:
        @store_operation("insert job application")
        def insert_one(self, document):
            ...
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except PyMongoError as e:
                logger = logging.getLogger(func.__module__)
                logger.error(f"[store] [{operation_name}] ✗ Failed: {e}", exc_info=True)
                raise StoreUnavailableError(f"{operation_name} failed: {e}") from e

        return wrapper

    return decorator


def format_validation_errors(exc) -> List[str]:
    """Flatten a pydantic ValidationError into 'field: message' strings."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "body"
        messages.append(f"{location}: {error.get('msg', 'invalid value')}")
    return messages
