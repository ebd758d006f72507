"""
Job Application Service

The four CRUD operations behind the REST API. Each operation is a single
unguarded store call: validation comes from the record schema, ordering
and persistence from the repository. No transactions, no batching, and
concurrent writers resolve as last write wins.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from src.common.error_handling import (
    InvalidJobApplicationError,
    JobApplicationNotFoundError,
    format_validation_errors,
)
from src.common.logger import get_logger
from src.common.repositories import JobApplicationRepositoryInterface, to_object_id
from src.common.types import (
    JobApplicationCreate,
    JobApplicationUpdate,
    serialize_job_application,
)

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_valid_id(job_id: str) -> None:
    if to_object_id(job_id) is None:
        raise InvalidJobApplicationError(f"Invalid job application id: {job_id}")


class JobApplicationService:
    """CRUD over job applications, returning JSON-ready records."""

    def __init__(self, repository: JobApplicationRepositoryInterface):
        self.repository = repository

    def list(self) -> List[Dict[str, Any]]:
        """All job applications, newest first."""
        documents = self.repository.find_all()
        logger.debug(f"Listed {len(documents)} job applications")
        return [serialize_job_application(doc) for doc in documents]

    def create(self, record: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Validate and persist a new job application.

        Raises:
            InvalidJobApplicationError: record violates the schema
            StoreUnavailableError: store could not be reached
        """
        try:
            application = JobApplicationCreate.model_validate(record or {})
        except ValidationError as e:
            errors = format_validation_errors(e)
            logger.warning(f"Rejected job application: {'; '.join(errors)}")
            raise InvalidJobApplicationError("; ".join(errors), errors=errors) from e

        document = application.to_document()
        now = _utcnow()
        document["createdAt"] = now
        document["updatedAt"] = now

        result = self.repository.insert_one(document)
        document["_id"] = result.inserted_id

        logger.bind(result.inserted_id).info(
            f"Created job application: {application.company} - {application.position}"
        )
        return serialize_job_application(document)

    def update(self, job_id: str, partial_record: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Replace the given fields on an existing job application.

        Fields absent from partial_record are left untouched.

        Raises:
            InvalidJobApplicationError: malformed id, or a provided field has an invalid value
            JobApplicationNotFoundError: no job application has this id
            StoreUnavailableError: store could not be reached
        """
        _require_valid_id(job_id)
        job_logger = logger.bind(job_id)
        try:
            changes = JobApplicationUpdate.model_validate(partial_record or {})
        except ValidationError as e:
            errors = format_validation_errors(e)
            job_logger.warning(f"Rejected update: {'; '.join(errors)}")
            raise InvalidJobApplicationError("; ".join(errors), errors=errors) from e

        fields = changes.to_fields()
        fields["updatedAt"] = _utcnow()

        updated = self.repository.update_by_id(job_id, fields)
        if updated is None:
            job_logger.info("Update skipped: job application not found")
            raise JobApplicationNotFoundError(job_id)

        job_logger.info(f"Updated job application fields: {sorted(fields)}")
        return serialize_job_application(updated)

    def delete(self, job_id: str) -> Dict[str, Any]:
        """
        Permanently remove a job application and return what was removed.

        Raises:
            InvalidJobApplicationError: job_id is not a valid ObjectId
            JobApplicationNotFoundError: no job application has this id
            StoreUnavailableError: store could not be reached
        """
        _require_valid_id(job_id)
        deleted = self.repository.delete_by_id(job_id)
        if deleted is None:
            logger.bind(job_id).info("Delete skipped: job application not found")
            raise JobApplicationNotFoundError(job_id)

        logger.bind(job_id).info("Deleted job application")
        return serialize_job_application(deleted)
