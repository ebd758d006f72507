"""
Repository Interface Definitions

Defines the abstract interface for job application store operations.
This enables swapping implementations (MongoDB, in-memory) without
changing consumer code.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from bson import ObjectId

# MongoDB collection name of the JobApplication model
JOB_APPLICATIONS_COLLECTION = "jobapplications"


@dataclass
class WriteResult:
    """
    Result of a write operation.

    Attributes:
        matched_count: Number of documents that matched the filter
        modified_count: Number of documents actually modified
        inserted_id: ID of the inserted document (if any)
    """
    matched_count: int
    modified_count: int
    inserted_id: Optional[str] = None


def to_object_id(job_id: Any) -> Optional[ObjectId]:
    """Convert a job id to ObjectId; malformed ids return None."""
    if isinstance(job_id, ObjectId):
        return job_id
    if job_id is None or not ObjectId.is_valid(str(job_id)):
        return None
    return ObjectId(str(job_id))


class JobApplicationRepositoryInterface(ABC):
    """
    Abstract interface for the job applications collection.

    Implementations:
    - MongoJobApplicationRepository: MongoDB via pymongo
    - InMemoryJobApplicationRepository: process-local dict (dev/tests)

    Lookups by a malformed id behave like lookups by an absent id.
    Listing is always newest first (createdAt descending).
    """

    @abstractmethod
    def find_all(self) -> List[Dict[str, Any]]:
        """Return every job application, newest first."""
        pass

    @abstractmethod
    def find_by_id(self, job_id: str) -> Optional[Dict[str, Any]]:
        """Find a single job application by id."""
        pass

    @abstractmethod
    def insert_one(self, document: Dict[str, Any]) -> WriteResult:
        """Insert a job application document; the store assigns _id."""
        pass

    @abstractmethod
    def update_by_id(self, job_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Set the given fields and return the updated document, or None if absent."""
        pass

    @abstractmethod
    def delete_by_id(self, job_id: str) -> Optional[Dict[str, Any]]:
        """Remove a job application and return it, or None if absent."""
        pass

    @abstractmethod
    def ping(self) -> bool:
        """Check that the store is reachable."""
        pass
