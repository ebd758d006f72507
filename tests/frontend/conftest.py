"""
Pytest fixtures for frontend/Flask tests.
"""

import os

import pytest


@pytest.fixture(scope="session", autouse=True)
def set_test_env():
    """Set test environment variables."""
    os.environ["FLASK_SECRET_KEY"] = "test-secret-key"
    os.environ["TRACKER_API_URL"] = "http://tracker.test/api"


@pytest.fixture
def app():
    """Flask app fixture with test configuration."""
    from frontend.app import app
    app.config["TESTING"] = True
    app.config["SECRET_KEY"] = "test-secret-key"
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def sample_jobs():
    """Two job applications as the tracker API returns them, newest first."""
    return [
        {
            "_id": "65f1c0ffee0000000000000b",
            "company": "Globex",
            "position": "Engineering Manager",
            "applicationDate": "2024-03-02",
            "status": "interview",
            "createdAt": "2024-03-02T09:00:00+00:00",
            "updatedAt": "2024-03-02T09:00:00+00:00",
        },
        {
            "_id": "65f1c0ffee0000000000000a",
            "company": "Acme",
            "companyUrl": "https://acme.example",
            "position": "Backend Engineer",
            "jobPostingUrl": "https://jobs.acme.example/123",
            "applicationDate": "2024-03-01",
            "status": "applied",
            "description": "Build and run the payments API.",
            "createdAt": "2024-03-01T09:00:00+00:00",
            "updatedAt": "2024-03-01T09:00:00+00:00",
        },
    ]


@pytest.fixture
def mock_api(mocker, sample_jobs):
    """
    Mock the tracker API client used by the Flask routes.

    get_jobs returns a copy of sample_jobs; mutations echo their input.
    """
    from frontend.api_client import TrackerApiClient

    api = mocker.MagicMock(spec=TrackerApiClient)
    api.get_jobs.side_effect = lambda: [dict(job) for job in sample_jobs]
    api.create_job.side_effect = lambda job: {**job, "_id": "65f1c0ffee0000000000000c"}
    api.update_job.side_effect = lambda job_id, job: {**job, "_id": job_id}
    api.delete_job.return_value = None
    mocker.patch("frontend.app.get_api_client", return_value=api)
    return api
