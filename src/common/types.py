"""
Canonical Types and Schemas for the Job Application Tracker

Defines the JobApplication record schema. These pydantic models are the
store schema: they decide which fields are required, which values the
status field accepts, and which fields ever reach the database.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, model_validator


class JobStatus(str, Enum):
    """Lifecycle status of a job application."""
    APPLIED = "applied"
    INTERVIEW = "interview"
    OFFER = "offer"
    REJECTED = "rejected"


# Status whitelist in display order
JOB_STATUSES: List[str] = [status.value for status in JobStatus]

DEFAULT_STATUS = JobStatus.APPLIED

# Fields that must be non-empty whenever they are written
REQUIRED_FIELDS = ("company", "position", "applicationDate")


class ParsedJobDetails(BaseModel):
    """Metadata pulled out of a job posting page by the extraction helper."""

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    company: Optional[str] = None


class JobApplicationCreate(BaseModel):
    """
    Schema for a new job application.

    Unknown keys (including client-sent _id/createdAt/updatedAt) are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    company: str = Field(..., min_length=1)
    companyUrl: Optional[str] = None
    position: str = Field(..., min_length=1)
    jobPostingUrl: Optional[str] = None
    applicationDate: str = Field(..., min_length=1)  # free-form text, not a date
    status: JobStatus = DEFAULT_STATUS
    description: Optional[str] = None
    parsedJobDetails: Optional[ParsedJobDetails] = None

    def to_document(self) -> Dict[str, Any]:
        """Build the document to insert; unset optional fields are omitted."""
        return self.model_dump(mode="json", exclude_none=True)


class JobApplicationUpdate(BaseModel):
    """
    Schema for a partial update.

    Only the fields present in the request are validated and written.
    Required fields may be omitted but never blanked or nulled.
    """

    model_config = ConfigDict(extra="ignore")

    company: Optional[str] = Field(None, min_length=1)
    companyUrl: Optional[str] = None
    position: Optional[str] = Field(None, min_length=1)
    jobPostingUrl: Optional[str] = None
    applicationDate: Optional[str] = Field(None, min_length=1)
    status: Optional[JobStatus] = None
    description: Optional[str] = None
    parsedJobDetails: Optional[ParsedJobDetails] = None

    @model_validator(mode="after")
    def _reject_nulled_required_fields(self) -> "JobApplicationUpdate":
        for name in REQUIRED_FIELDS + ("status",):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def to_fields(self) -> Dict[str, Any]:
        """Fields to $set, limited to those the caller actually sent."""
        return self.model_dump(mode="json", exclude_unset=True)


def serialize_job_application(document: Dict[str, Any]) -> Dict[str, Any]:
    """
    Serialize a stored job application for a JSON response.

    Handles ObjectId conversion and date formatting.
    """
    result = {}
    for key, value in document.items():
        if isinstance(value, ObjectId):
            result[key] = str(value)
        elif isinstance(value, datetime):
            result[key] = value.isoformat()
        else:
            result[key] = value
    return result
