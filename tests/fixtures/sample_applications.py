"""
Sample job applications and job posting pages for tests.

Each application is a create-request body as the frontend sends it.
Each page is a small HTML document exercising one selector fallback.
"""

from typing import Any, Dict


def make_application(**overrides: Any) -> Dict[str, Any]:
    """A valid create body; keyword arguments replace fields."""
    application = {
        "company": "Acme",
        "companyUrl": "https://acme.example",
        "position": "Backend Engineer",
        "jobPostingUrl": "https://jobs.acme.example/123",
        "applicationDate": "2024-03-01",
        "description": "Build and run the payments API.",
    }
    application.update(overrides)
    return application


SAMPLE_APPLICATIONS: Dict[str, Dict[str, Any]] = {
    "acme_backend": make_application(),
    "globex_manager": make_application(
        company="Globex",
        companyUrl="https://globex.example",
        position="Engineering Manager",
        jobPostingUrl="https://globex.example/careers/42",
        applicationDate="last Tuesday",
        status="interview",
        description="Lead the platform team.",
    ),
    "initech_parsed": make_application(
        company="Initech",
        position="Staff Engineer",
        status="offer",
        parsedJobDetails={
            "title": "Staff Engineer - Initech",
            "description": "TPS report modernisation.",
            "company": "Initech",
        },
    ),
}


TITLE_ONLY_PAGE = """
<html>
  <head><title>Engineer – Acme</title></head>
  <body><p>Apply now.</p></body>
</html>
"""

FULL_POSTING_PAGE = """
<html>
  <head>
    <title>Careers | Acme</title>
    <meta property="og:title" content="Senior Engineer at Acme">
    <meta property="og:site_name" content="Acme Corp">
  </head>
  <body>
    <h1 class="job-title">  Senior Engineer  </h1>
    <h1>Acme Careers</h1>
    <div class="job-description">
      Design distributed systems.
    </div>
    <main>Everything else</main>
    <h2 class="company">Acme Inc.</h2>
  </body>
</html>
"""

FALLBACK_POSTING_PAGE = """
<html>
  <head>
    <title>   </title>
    <meta property="og:title" content="Data Engineer (Remote)">
  </head>
  <body>
    <article>Own the warehouse.</article>
    <span class="company-name">Globex</span>
  </body>
</html>
"""

EMPTY_PAGE = "<html><head></head><body></body></html>"
