"""
Tracker API Client.

Talks to the tracker service REST API from the frontend. Every call is a
single synchronous request; any failure raises TrackerApiError with a
short message suitable for showing in the UI.
"""

import logging
import os
from typing import Any, Dict, List, Optional

import requests
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_API_URL = "http://localhost:5010/api"
REQUEST_TIMEOUT = 30  # seconds


class TrackerApiError(Exception):
    """Raised when the tracker API call fails or returns a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail


def get_api_url() -> str:
    """Base URL of the tracker API (TRACKER_API_URL)."""
    return os.getenv("TRACKER_API_URL", DEFAULT_API_URL).rstrip("/")


def _error_detail(response: requests.Response) -> Optional[str]:
    try:
        return response.json().get("detail")
    except (ValueError, AttributeError):
        return None


class TrackerApiClient:
    """Thin wrapper over the /jobs endpoints."""

    def __init__(self, base_url: Optional[str] = None, timeout: int = REQUEST_TIMEOUT):
        self.base_url = (base_url or get_api_url()).rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str, failure_message: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = requests.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TrackerApiError(failure_message, detail=str(e)) from e

        if not response.ok:
            detail = _error_detail(response)
            logger.warning(f"{method} {url} returned HTTP {response.status_code}: {detail}")
            raise TrackerApiError(failure_message, status_code=response.status_code, detail=detail)

        return response

    def get_jobs(self) -> List[Dict[str, Any]]:
        """All job applications, newest first."""
        return self._request("GET", "/jobs", "Failed to fetch jobs").json()

    def create_job(self, job: Dict[str, Any]) -> Dict[str, Any]:
        """Create a job application and return it with its _id."""
        return self._request("POST", "/jobs", "Failed to create job", json=job).json()

    def update_job(self, job_id: str, job: Dict[str, Any]) -> Dict[str, Any]:
        """Send changed fields and return the updated job application."""
        return self._request("PUT", f"/jobs/{job_id}", "Failed to update job", json=job).json()

    def delete_job(self, job_id: str) -> None:
        """Delete a job application."""
        self._request("DELETE", f"/jobs/{job_id}", "Failed to delete job")
