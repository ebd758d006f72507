"""
FastAPI tracker service for job applications.

Provides the REST API the frontend synchronises with: list, create,
update and delete job applications, plus a health check. Requests are
independent synchronous round-trips to the store.
"""

from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.common.logger import get_logger, setup_logging
from src.common.repositories import get_job_application_repository
from src.common.error_handling import StoreUnavailableError
from version import __version__

from .config import settings, validate_config_on_startup
from .models import HealthResponse
from .routes import jobs_router

setup_logging(level=settings.log_level, format=settings.log_format)
logger = get_logger(__name__)

# Validate configuration at startup
validate_config_on_startup()

app = FastAPI(title="Job Application Tracker", version=__version__)

if settings.cors_origins_list:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(jobs_router)


@app.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """
    Health check endpoint for container orchestration.

    Reports whether the store answers a ping.
    """
    repository = get_job_application_repository(settings.repository_config)
    try:
        repository.ping()
        store_status = "connected"
    except StoreUnavailableError:
        store_status = "disconnected"

    return HealthResponse(
        status="healthy" if store_status == "connected" else "degraded",
        store=store_status,
        store_backend=settings.store_backend.value,
        version=__version__,
        timestamp=datetime.now(timezone.utc),
    )


def main() -> None:
    """Run the API with uvicorn on the configured host/port."""
    logger.info(f"Starting tracker service on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
