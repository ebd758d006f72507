"""
Job Application Routes

REST surface over the job application store. Each route maps one-to-one
onto a JobApplicationService operation and translates its errors into
HTTP status codes:

- invalid input or malformed id -> 400
- unknown id -> 404
- store unreachable -> 500
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, HTTPException

from src.common.error_handling import (
    InvalidJobApplicationError,
    JobApplicationNotFoundError,
    StoreUnavailableError,
)
from src.common.repositories import get_job_application_repository
from src.services.job_application_service import JobApplicationService

from ..config import settings
from ..models import DeleteResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


def get_job_application_service() -> JobApplicationService:
    """Service bound to the configured repository (overridable in tests)."""
    repository = get_job_application_repository(settings.repository_config)
    return JobApplicationService(repository)


@router.get("")
def list_job_applications(
    service: JobApplicationService = Depends(get_job_application_service),
) -> List[Dict[str, Any]]:
    """
    List all job applications.

    Returns:
        Array of job applications, newest first
    """
    try:
        return service.list()
    except StoreUnavailableError as e:
        logger.error(f"Error fetching job applications: {e}")
        raise HTTPException(status_code=500, detail="Error fetching job applications")


@router.post("", status_code=201)
def create_job_application(
    record: Dict[str, Any] = Body(...),
    service: JobApplicationService = Depends(get_job_application_service),
) -> Dict[str, Any]:
    """
    Create a job application.

    Request Body:
        JobApplication without _id; status defaults to "applied"

    Returns:
        The created job application with _id and timestamps (201)
    """
    try:
        return service.create(record)
    except InvalidJobApplicationError as e:
        raise HTTPException(
            status_code=400,
            detail=f"Error creating job application: {e.message}",
        )
    except StoreUnavailableError as e:
        logger.error(f"Error creating job application: {e}")
        raise HTTPException(status_code=500, detail="Error creating job application")


@router.put("/{job_id}")
def update_job_application(
    job_id: str,
    partial_record: Dict[str, Any] = Body(...),
    service: JobApplicationService = Depends(get_job_application_service),
) -> Dict[str, Any]:
    """
    Update fields of a job application.

    Request Body:
        Any subset of JobApplication fields; omitted fields are unchanged

    Returns:
        The updated job application; 404 if the id is unknown, 400 if it is malformed
    """
    try:
        return service.update(job_id, partial_record)
    except JobApplicationNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except InvalidJobApplicationError as e:
        raise HTTPException(
            status_code=400,
            detail=f"Error updating job application: {e.message}",
        )
    except StoreUnavailableError as e:
        logger.error(f"Error updating job application {job_id}: {e}")
        raise HTTPException(status_code=500, detail="Error updating job application")


@router.delete("/{job_id}", response_model=DeleteResponse)
def delete_job_application(
    job_id: str,
    service: JobApplicationService = Depends(get_job_application_service),
) -> DeleteResponse:
    """
    Delete a job application permanently.

    Returns:
        Confirmation message; 404 if the id is unknown, 400 if it is malformed
    """
    try:
        service.delete(job_id)
    except JobApplicationNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except InvalidJobApplicationError as e:
        raise HTTPException(
            status_code=400,
            detail=f"Error deleting job application: {e.message}",
        )
    except StoreUnavailableError as e:
        logger.error(f"Error deleting job application {job_id}: {e}")
        raise HTTPException(status_code=500, detail="Error deleting job application")

    return DeleteResponse()
