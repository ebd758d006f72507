"""
In-Memory Job Application Repository

Process-local store used for development without MongoDB and for tests.
Mirrors the MongoDB repository: ObjectId identifiers, newest-first
listing, and pymongo's habit of writing the new _id back onto the
inserted document.
"""

import copy
import itertools
import threading
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId

from .base import JobApplicationRepositoryInterface, WriteResult, to_object_id


class InMemoryJobApplicationRepository(JobApplicationRepositoryInterface):
    """Dict-backed repository. Documents are copied in and out."""

    def __init__(self):
        self._documents: Dict[ObjectId, Tuple[int, Dict[str, Any]]] = {}
        self._sequence = itertools.count()
        self._lock = threading.Lock()

    def find_all(self) -> List[Dict[str, Any]]:
        with self._lock:
            entries = list(self._documents.values())
        # Newest first; insertion order breaks createdAt ties
        entries.sort(key=lambda entry: (entry[1].get("createdAt"), entry[0]), reverse=True)
        return [copy.deepcopy(document) for _, document in entries]

    def find_by_id(self, job_id: str) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(job_id)
        with self._lock:
            entry = self._documents.get(object_id)
            return copy.deepcopy(entry[1]) if entry else None

    def insert_one(self, document: Dict[str, Any]) -> WriteResult:
        object_id = document.setdefault("_id", ObjectId())
        with self._lock:
            self._documents[object_id] = (next(self._sequence), copy.deepcopy(document))
        return WriteResult(matched_count=0, modified_count=0, inserted_id=str(object_id))

    def update_by_id(self, job_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(job_id)
        with self._lock:
            entry = self._documents.get(object_id)
            if entry is None:
                return None
            entry[1].update(copy.deepcopy(fields))
            return copy.deepcopy(entry[1])

    def delete_by_id(self, job_id: str) -> Optional[Dict[str, Any]]:
        object_id = to_object_id(job_id)
        with self._lock:
            entry = self._documents.pop(object_id, None)
        return entry[1] if entry else None

    def ping(self) -> bool:
        return True

    def clear(self) -> None:
        """Drop every stored document."""
        with self._lock:
            self._documents.clear()
