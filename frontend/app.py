"""
Flask application for the Job Application Tracker UI.

Provides a single page with:
- A form to add or edit a job application
- Job posting parsing (fills description and parsed details from a URL)
- The list of job applications, newest first, with edit/delete

The list lives in the tracker service. The in-progress form and the id
being edited live in a server-side draft; the session cookie carries only
the draft id.

Stack: Flask + Tailwind CSS (CDN)
"""

import logging
import os
from typing import Any, Dict

import requests
from dotenv import load_dotenv
from flask import Flask, jsonify, redirect, render_template, request, session, url_for

from src.common.types import JOB_STATUSES
from version import __version__

from .api_client import TrackerApiClient, get_api_url
from .draft_store import DraftStore
from .tracker_state import TrackerState, link_url, status_class

# Load environment variables
load_dotenv()

APP_VERSION = __version__

app = Flask(__name__)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

# Session configuration
flask_secret_key = os.getenv("FLASK_SECRET_KEY")

if not flask_secret_key:
    # Local development: Generate random key with warning
    logger.warning("FLASK_SECRET_KEY not set. Generating random key (sessions will not persist between restarts)")
    flask_secret_key = os.urandom(24).hex()

app.secret_key = flask_secret_key
app.config["SESSION_COOKIE_HTTPONLY"] = True
app.config["SESSION_COOKIE_SAMESITE"] = "Lax"

# Fields the form posts back
FORM_INPUTS = (
    "company",
    "companyUrl",
    "position",
    "jobPostingUrl",
    "applicationDate",
    "status",
    "description",
)

# The session cookie only carries the draft id; the form draft stays server-side
DRAFT_ID_KEY = "draft_id"

drafts = DraftStore()


@app.context_processor
def inject_version():
    """Inject version info into all templates."""
    return {"version": APP_VERSION}


app.add_template_filter(status_class, "status_class")
app.add_template_filter(link_url, "link_url")


# ============================================================================
# Helpers
# ============================================================================

def get_api_client() -> TrackerApiClient:
    """API client for the configured tracker service."""
    return TrackerApiClient()


def _load_state() -> TrackerState:
    return TrackerState.from_session(get_api_client(), drafts.get(session.get(DRAFT_ID_KEY)))


def _save_state(state: TrackerState) -> None:
    session[DRAFT_ID_KEY] = drafts.save(session.get(DRAFT_ID_KEY), state.to_session())
    if state.error:
        session["error"] = state.error


def _posted_form() -> Dict[str, Any]:
    return {name: request.form[name] for name in FORM_INPUTS if name in request.form}


# ============================================================================
# HTML Routes
# ============================================================================

@app.route("/")
def index():
    """Render the form and the job application list."""
    state = _load_state()
    state.load()
    error = session.pop("error", None) or state.error

    return render_template(
        "index.html",
        jobs=state.jobs,
        form=state.form,
        editing_id=state.editing_id,
        statuses=JOB_STATUSES,
        error=error,
    )


@app.route("/jobs", methods=["POST"])
def submit_job():
    """Create a job application, or update the one being edited."""
    state = _load_state()
    state.update_form(**_posted_form())
    if state.submit():
        logger.info("Saved job application from form")
    _save_state(state)
    return redirect(url_for("index"))


@app.route("/jobs/<job_id>/edit", methods=["POST"])
def edit_job(job_id: str):
    """Load a job application into the form."""
    state = _load_state()
    if state.load():
        state.edit(job_id)
    _save_state(state)
    return redirect(url_for("index"))


@app.route("/jobs/<job_id>/delete", methods=["POST"])
def delete_job(job_id: str):
    """Delete a job application."""
    state = _load_state()
    if state.delete(job_id):
        logger.info(f"Deleted job application {job_id}")
    _save_state(state)
    return redirect(url_for("index"))


@app.route("/parse", methods=["POST"])
def parse_posting():
    """Parse the job posting URL in the form and fill in its details."""
    state = _load_state()
    state.update_form(**_posted_form())
    state.parse_job_posting()
    _save_state(state)
    return redirect(url_for("index"))


@app.route("/form/reset", methods=["POST"])
def reset_form():
    """Clear the form and leave edit mode."""
    state = _load_state()
    state.reset_form()
    _save_state(state)
    return redirect(url_for("index"))


@app.route("/health", methods=["GET"])
def health_check():
    """
    Public health endpoint for external monitoring.

    Reports whether the tracker service answers its own health check.
    """
    api_root = get_api_url()
    if api_root.endswith("/api"):
        api_root = api_root[: -len("/api")]

    try:
        response = requests.get(f"{api_root}/health", timeout=3)
        api_status = "healthy" if response.status_code == 200 else "unhealthy"
    except requests.exceptions.RequestException:
        api_status = "unreachable"

    return jsonify({
        "status": "healthy" if api_status == "healthy" else "degraded",
        "version": APP_VERSION,
        "services": {"tracker_api": api_status},
    })


# ============================================================================
# Application Entry Point
# ============================================================================

def main() -> None:
    port = int(os.getenv("FLASK_PORT", 5000))
    debug = os.getenv("FLASK_DEBUG", "false").lower() == "true"

    logger.info(f"Starting Job Application Tracker UI on http://localhost:{port}")
    logger.info(f"Tracker API: {get_api_url()}")

    app.run(host="0.0.0.0", port=port, debug=debug)


if __name__ == "__main__":
    main()
