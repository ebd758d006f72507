"""
Job Posting Extractor

Best-effort scraper for job posting metadata. Fetches the posting HTML
through a public CORS proxy and walks an ordered list of CSS selectors
for each field, taking the first non-empty match.

There is no correctness guarantee and no retry: any failure surfaces to
the caller as a single JobPostingParseError message.

Fields and selector order:
- title: h1.job-title, title, h1, meta[property="og:title"]
- description: .job-description, #job-description, .description, article, main
- company: meta[property="og:site_name"], .company-name, h2.company
"""

import logging
from typing import List, Optional
from urllib.parse import quote

import requests
from bs4 import BeautifulSoup
from bs4.element import Tag

from src.common.types import ParsedJobDetails

logger = logging.getLogger(__name__)

# Public proxy that returns the raw upstream body
PROXY_URL = "https://api.allorigins.win/raw?url="

# Request timeout in seconds
REQUEST_TIMEOUT = 15

TITLE_SELECTORS = [
    "h1.job-title",
    "title",
    "h1",
    'meta[property="og:title"]',
]

DESCRIPTION_SELECTORS = [
    ".job-description",
    "#job-description",
    ".description",
    "article",
    "main",
]

COMPANY_SELECTORS = [
    'meta[property="og:site_name"]',
    ".company-name",
    "h2.company",
]


class JobPostingError(Exception):
    """Base exception for job posting extraction."""
    pass


class JobPostingFetchError(JobPostingError):
    """Raised when the proxy request fails or returns a non-success status."""
    pass


class JobPostingParseError(JobPostingError):
    """The single user-facing failure of parse_job_posting()."""
    pass


def build_proxy_url(job_posting_url: str) -> str:
    """Proxy URL for a posting, encoded like JavaScript's encodeURIComponent."""
    return PROXY_URL + quote(job_posting_url, safe="-_.!~*'()")


def fetch_job_posting_html(job_posting_url: str) -> str:
    """
    Fetch raw posting HTML through the proxy.

    Raises:
        JobPostingFetchError: network error or non-2xx response
    """
    try:
        response = requests.get(build_proxy_url(job_posting_url), timeout=REQUEST_TIMEOUT)
    except requests.exceptions.RequestException as e:
        logger.warning(f"Proxy request failed for {job_posting_url}: {e}")
        raise JobPostingFetchError("Failed to fetch job posting") from e

    if not response.ok:
        logger.warning(
            f"Proxy returned HTTP {response.status_code} for {job_posting_url}"
        )
        raise JobPostingFetchError("Failed to fetch job posting")

    return response.text


def _element_text(element: Tag) -> str:
    """Trimmed text content; meta tags carry their text in the content attribute."""
    if element.name == "meta":
        return (element.get("content") or "").strip()
    return element.get_text().strip()


def extract_text(soup: BeautifulSoup, selectors: List[str]) -> Optional[str]:
    """Return the first non-empty text among the selectors, or None."""
    for selector in selectors:
        element = soup.select_one(selector)
        if element is None:
            continue
        text = _element_text(element)
        if text:
            return text
    return None


def extract_job_details(html_content: str) -> ParsedJobDetails:
    """Apply the selector fallbacks to posting HTML."""
    soup = BeautifulSoup(html_content, "html.parser")

    return ParsedJobDetails(
        title=extract_text(soup, TITLE_SELECTORS),
        description=extract_text(soup, DESCRIPTION_SELECTORS),
        company=extract_text(soup, COMPANY_SELECTORS),
    )


def parse_job_posting(job_posting_url: str) -> ParsedJobDetails:
    """
    Fetch and extract job details for a posting URL.

    Raises:
        JobPostingParseError: with message "Error parsing job posting: <reason>"
    """
    logger.info(f"Parsing job posting: {job_posting_url}")
    try:
        html_content = fetch_job_posting_html(job_posting_url)
        details = extract_job_details(html_content)
    except Exception as e:
        raise JobPostingParseError(f"Error parsing job posting: {e}") from e

    logger.info(
        f"Parsed job posting: title={details.title!r}, company={details.company!r}"
    )
    return details
