"""
Route tests for the tracker UI.

The tracker API client is mocked (see mock_api in conftest); the form
draft is kept server-side and found again through the session between requests.
"""

import requests
from unittest.mock import MagicMock

from src.common.types import ParsedJobDetails
from src.services.job_posting_extractor import JobPostingParseError


class TestIndex:

    def test_renders_jobs(self, client, mock_api):
        response = client.get("/")

        assert response.status_code == 200
        html = response.get_data(as_text=True)
        assert "Job Application Tracker" in html
        assert "Engineering Manager" in html
        assert "Backend Engineer" in html
        assert "bg-yellow-500" in html
        assert "Add Application" in html
        # newest first
        assert html.index("Globex") < html.index("Acme")

    def test_unsafe_urls_are_not_links(self, client, mock_api, sample_jobs):
        sample_jobs[1]["companyUrl"] = "javascript:alert(1)"
        sample_jobs[1]["jobPostingUrl"] = "javascript:alert(2)"

        html = client.get("/").get_data(as_text=True)

        assert "javascript:" not in html
        assert "View Job Posting" not in html
        assert "Acme" in html

    def test_renders_empty_list(self, client, mock_api):
        mock_api.get_jobs.side_effect = None
        mock_api.get_jobs.return_value = []

        html = client.get("/").get_data(as_text=True)

        assert "No job applications yet." in html

    def test_shows_load_error(self, client, mock_api):
        from frontend.api_client import TrackerApiError
        mock_api.get_jobs.side_effect = TrackerApiError("Failed to fetch jobs")

        html = client.get("/").get_data(as_text=True)

        assert "Failed to fetch jobs" in html


class TestSubmit:

    def test_create(self, client, mock_api):
        response = client.post("/jobs", data={
            "company": "Initech",
            "position": "Staff Engineer",
            "applicationDate": "2024-03-03",
            "status": "applied",
        })

        assert response.status_code == 302
        sent = mock_api.create_job.call_args.args[0]
        assert sent["company"] == "Initech"
        assert sent["position"] == "Staff Engineer"

    def test_edit_then_update(self, client, mock_api, sample_jobs):
        acme_id = sample_jobs[1]["_id"]

        client.post(f"/jobs/{acme_id}/edit")
        html = client.get("/").get_data(as_text=True)
        assert "Update Application" in html
        assert 'value="Acme"' in html

        client.post("/jobs", data={
            "company": "Acme",
            "position": "Backend Engineer",
            "applicationDate": "2024-03-01",
            "status": "offer",
        })

        job_id, sent = mock_api.update_job.call_args.args
        assert job_id == acme_id
        assert sent["status"] == "offer"
        mock_api.create_job.assert_not_called()

    def test_failure_is_shown_once(self, client, mock_api):
        from frontend.api_client import TrackerApiError
        mock_api.create_job.side_effect = TrackerApiError("Failed to create job")

        client.post("/jobs", data={"company": "Initech"})

        assert "Failed to create job" in client.get("/").get_data(as_text=True)
        assert "Failed to create job" not in client.get("/").get_data(as_text=True)


class TestDelete:

    def test_delete(self, client, mock_api, sample_jobs):
        response = client.post(f"/jobs/{sample_jobs[0]['_id']}/delete")

        assert response.status_code == 302
        mock_api.delete_job.assert_called_once_with(sample_jobs[0]["_id"])


class TestResetForm:

    def test_cancel_edit(self, client, mock_api, sample_jobs):
        client.post(f"/jobs/{sample_jobs[1]['_id']}/edit")

        client.post("/form/reset")

        html = client.get("/").get_data(as_text=True)
        assert "Add Application" in html
        assert 'value="Acme"' not in html


class TestParse:

    def test_parse_fills_form(self, client, mock_api, mocker):
        parser = mocker.patch(
            "frontend.tracker_state.parse_job_posting",
            return_value=ParsedJobDetails(
                title="Senior Engineer", description="Design distributed systems.", company="Acme Corp"
            ),
        )

        client.post("/parse", data={"jobPostingUrl": "https://jobs.example/1", "company": "Acme"})

        parser.assert_called_once_with("https://jobs.example/1")
        html = client.get("/").get_data(as_text=True)
        assert "Parsed Job Details" in html
        assert "Senior Engineer" in html
        assert "Design distributed systems." in html

    def test_large_parsed_posting_survives(self, client, mock_api, mocker):
        description = "Own the data platform end to end. " * 400
        mocker.patch(
            "frontend.tracker_state.parse_job_posting",
            return_value=ParsedJobDetails(
                title="Data Engineer", description=description, company="Globex"
            ),
        )

        response = client.post(
            "/parse", data={"jobPostingUrl": "https://jobs.example/2", "company": "Globex"}
        )

        assert len(response.headers.get("Set-Cookie", "")) < 4093
        with client.session_transaction() as sess:
            assert set(sess.keys()) == {"draft_id"}

        html = client.get("/").get_data(as_text=True)
        assert description.strip() in html
        assert 'value="Globex"' in html

    def test_parse_without_url(self, client, mock_api):
        client.post("/parse", data={"jobPostingUrl": ""})

        assert "Please provide a job posting URL" in client.get("/").get_data(as_text=True)

    def test_parse_error_is_shown(self, client, mock_api, mocker):
        mocker.patch(
            "frontend.tracker_state.parse_job_posting",
            side_effect=JobPostingParseError("Error parsing job posting: Failed to fetch job posting"),
        )

        client.post("/parse", data={"jobPostingUrl": "https://jobs.example/1"})

        html = client.get("/").get_data(as_text=True)
        assert "Error parsing job posting: Failed to fetch job posting" in html


class TestHealth:

    def test_healthy(self, client, mocker):
        mock_get = mocker.patch("frontend.app.requests.get")
        mock_get.return_value = MagicMock(status_code=200)

        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json()["status"] == "healthy"
        mock_get.assert_called_once_with("http://tracker.test/health", timeout=3)

    def test_api_unreachable(self, client, mocker):
        mocker.patch(
            "frontend.app.requests.get",
            side_effect=requests.exceptions.ConnectionError("refused"),
        )

        data = client.get("/health").get_json()

        assert data["status"] == "degraded"
        assert data["services"]["tracker_api"] == "unreachable"
