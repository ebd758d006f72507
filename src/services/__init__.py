"""
Services module for job application tracking.

- JobApplicationService: CRUD over the job application store
- job_posting_extractor: best-effort scraping of job posting metadata
"""

from src.services.job_application_service import JobApplicationService
from src.services.job_posting_extractor import (
    JobPostingError,
    JobPostingFetchError,
    JobPostingParseError,
    extract_job_details,
    parse_job_posting,
)

__all__ = [
    "JobApplicationService",
    "JobPostingError",
    "JobPostingFetchError",
    "JobPostingParseError",
    "extract_job_details",
    "parse_job_posting",
]
