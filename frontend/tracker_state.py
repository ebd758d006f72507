"""
Client state for the tracker UI.

Holds the record list and the in-progress form record. Every mutation
goes to the tracker API first and is merged into the local list only
after the call succeeds. There is no conflict detection: if the list
changed server-side since the last load, the next load() shows it.
"""

import copy
import logging
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import urlparse

from src.common.types import DEFAULT_STATUS, ParsedJobDetails
from src.services.job_posting_extractor import JobPostingParseError, parse_job_posting

from .api_client import TrackerApiClient, TrackerApiError

logger = logging.getLogger(__name__)

FORM_FIELDS = (
    "company",
    "companyUrl",
    "position",
    "jobPostingUrl",
    "applicationDate",
    "status",
    "description",
    "parsedJobDetails",
)

STATUS_CLASSES = {
    "applied": "bg-blue-500",
    "interview": "bg-yellow-500",
    "offer": "bg-green-500",
    "rejected": "bg-red-500",
}

# Stored URLs are only rendered as links with these schemes
LINK_SCHEMES = ("http", "https")


def empty_form() -> Dict[str, Any]:
    """A blank job application form."""
    return {
        "company": "",
        "companyUrl": "",
        "position": "",
        "jobPostingUrl": "",
        "applicationDate": "",
        "status": DEFAULT_STATUS.value,
        "description": "",
        "parsedJobDetails": None,
    }


def status_class(status: Optional[str]) -> str:
    """Badge colour class for a status."""
    return STATUS_CLASSES.get(status or "", "bg-gray-500")


def link_url(url: Optional[str]) -> Optional[str]:
    """The URL when it is safe as a link target, else None."""
    url = (url or "").strip()
    if url and urlparse(url).scheme.lower() in LINK_SCHEMES:
        return url
    return None


class TrackerState:
    """The UI-held list of job applications plus the form being edited."""

    def __init__(
        self,
        api: TrackerApiClient,
        form: Optional[Dict[str, Any]] = None,
        editing_id: Optional[str] = None,
        jobs: Optional[List[Dict[str, Any]]] = None,
    ):
        self.api = api
        self.form = form if form is not None else empty_form()
        self.editing_id = editing_id
        self.jobs: List[Dict[str, Any]] = jobs if jobs is not None else []
        self.error: Optional[str] = None

    # ------------------------------------------------------------------
    # Draft round-trip
    # ------------------------------------------------------------------

    @classmethod
    def from_session(cls, api: TrackerApiClient, data: Optional[Dict[str, Any]]) -> "TrackerState":
        data = data or {}
        form = empty_form()
        form.update({k: v for k, v in (data.get("form") or {}).items() if k in FORM_FIELDS})
        return cls(api, form=form, editing_id=data.get("editing_id"))

    def to_session(self) -> Dict[str, Any]:
        return {"form": self.form, "editing_id": self.editing_id}

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    def load(self) -> bool:
        """Replace the local list with the server's. Returns False on failure."""
        try:
            self.jobs = self.api.get_jobs()
        except TrackerApiError as e:
            self.error = e.message
            return False
        return True

    def find_job(self, job_id: str) -> Optional[Dict[str, Any]]:
        for job in self.jobs:
            if job.get("_id") == job_id:
                return job
        return None

    # ------------------------------------------------------------------
    # Form
    # ------------------------------------------------------------------

    def update_form(self, **fields: Any) -> None:
        """Set form fields; unknown names are ignored."""
        for name, value in fields.items():
            if name in FORM_FIELDS:
                self.form[name] = value

    def reset_form(self) -> None:
        self.form = empty_form()
        self.editing_id = None

    def edit(self, job_id: str) -> bool:
        """Copy a listed job application into the form for editing."""
        job = self.find_job(job_id)
        if job is None:
            self.error = "Job application not found"
            return False

        form = empty_form()
        form.update({name: copy.deepcopy(job[name]) for name in FORM_FIELDS if name in job})
        self.form = form
        self.editing_id = job_id
        return True

    def submit(self) -> bool:
        """
        Create or update from the form, then merge the result into the list.

        The form is reset only on success; on failure it is kept for retry.
        """
        payload = dict(self.form)
        try:
            if self.editing_id is not None:
                saved = self.api.update_job(self.editing_id, payload)
                self._replace_job(saved)
            else:
                saved = self.api.create_job(payload)
                self.jobs.insert(0, saved)
        except TrackerApiError as e:
            self.error = e.message
            return False

        self.reset_form()
        return True

    def _replace_job(self, saved: Dict[str, Any]) -> None:
        for index, job in enumerate(self.jobs):
            if job.get("_id") == saved.get("_id"):
                self.jobs[index] = saved
                return
        self.jobs.insert(0, saved)

    def delete(self, job_id: str) -> bool:
        """Delete on the server, then drop the job application locally."""
        try:
            self.api.delete_job(job_id)
        except TrackerApiError as e:
            self.error = e.message
            return False

        self.jobs = [job for job in self.jobs if job.get("_id") != job_id]
        if self.editing_id == job_id:
            self.reset_form()
        return True

    # ------------------------------------------------------------------
    # Job posting extraction
    # ------------------------------------------------------------------

    def parse_job_posting(
        self,
        parser: Optional[Callable[[str], ParsedJobDetails]] = None,
    ) -> bool:
        """
        Fill parsedJobDetails from the form's jobPostingUrl.

        The parsed description replaces the form description when present.
        """
        url = (self.form.get("jobPostingUrl") or "").strip()
        if not url:
            self.error = "Please provide a job posting URL"
            return False

        self.error = None
        parser = parser or parse_job_posting
        try:
            details = parser(url)
        except JobPostingParseError as e:
            self.error = str(e)
            return False

        self.form["parsedJobDetails"] = details.model_dump()
        self.form["description"] = details.description or self.form.get("description", "")
        return True
