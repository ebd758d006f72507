"""
MongoDB Job Application Repository

Wraps direct pymongo access to the jobapplications collection.
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING, MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from src.common.error_handling import store_operation

from .base import (
    JOB_APPLICATIONS_COLLECTION,
    JobApplicationRepositoryInterface,
    WriteResult,
    to_object_id,
)

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "job-tracker"

# Newest first; _id breaks ties between records created in the same millisecond
NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]


class MongoJobApplicationRepository(JobApplicationRepositoryInterface):
    """
    MongoDB-backed job application repository.

    Connection Management:
    - Uses singleton MongoClient for connection pooling
    - Client is created once and reused across requests
    - PyMongo handles connection pool internally

    Error Handling:
    - pymongo errors surface as StoreUnavailableError
    - No retries; each operation is a single store call
    """

    _client: Optional[MongoClient] = None
    _db: Optional[Database] = None
    _collection: Optional[Collection] = None

    def __init__(
        self,
        mongodb_uri: str,
        database: Optional[str] = None,
        collection: str = JOB_APPLICATIONS_COLLECTION,
    ):
        """
        Initialize repository with connection parameters.

        Args:
            mongodb_uri: MongoDB connection string
            database: Database name (default: taken from the URI path, else "job-tracker")
            collection: Collection name (default: "jobapplications")
        """
        self._mongodb_uri = mongodb_uri
        self._database_name = database
        self._collection_name = collection

    def _get_collection(self) -> Collection:
        """
        Get the MongoDB collection, creating client if needed.

        Uses class-level singleton for connection pooling.
        """
        if MongoJobApplicationRepository._collection is None:
            client = MongoClient(
                self._mongodb_uri,
                serverSelectionTimeoutMS=5000,
                tz_aware=True,
            )
            if self._database_name:
                db = client[self._database_name]
            else:
                db = client.get_default_database(DEFAULT_DATABASE)
            MongoJobApplicationRepository._client = client
            MongoJobApplicationRepository._db = db
            MongoJobApplicationRepository._collection = db[self._collection_name]
            logger.info(f"Mongo repository connected: {db.name}.{self._collection_name}")
        return MongoJobApplicationRepository._collection

    @store_operation("list job applications")
    def find_all(self) -> List[Dict[str, Any]]:
        collection = self._get_collection()
        return list(collection.find({}).sort(NEWEST_FIRST))

    @store_operation("find job application")
    def find_by_id(self, job_id: str) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(job_id)
        if object_id is None:
            return None
        return self._get_collection().find_one({"_id": object_id})

    @store_operation("insert job application")
    def insert_one(self, document: Dict[str, Any]) -> WriteResult:
        collection = self._get_collection()
        result = collection.insert_one(document)

        return WriteResult(
            matched_count=0,
            modified_count=0,
            inserted_id=str(result.inserted_id) if result.inserted_id else None,
        )

    @store_operation("update job application")
    def update_by_id(self, job_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(job_id)
        if object_id is None:
            return None
        return self._get_collection().find_one_and_update(
            {"_id": object_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )

    @store_operation("delete job application")
    def delete_by_id(self, job_id: str) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(job_id)
        if object_id is None:
            return None
        return self._get_collection().find_one_and_delete({"_id": object_id})

    @store_operation("ping store")
    def ping(self) -> bool:
        self._get_collection()
        MongoJobApplicationRepository._client.admin.command("ping")
        return True

    @classmethod
    def reset_connection(cls) -> None:
        """
        Reset the connection pool.

        Used for testing or connection recovery.
        """
        if cls._client:
            cls._client.close()
        cls._client = None
        cls._db = None
        cls._collection = None
        logger.info("Mongo repository connection reset")
