"""
Shared Pydantic models for the tracker service.

Job application records themselves travel as plain JSON objects shaped by
src.common.types; these models cover the service's own responses.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class DeleteResponse(BaseModel):
    """Confirmation returned after a job application is removed."""

    message: str = Field(
        "Job application deleted successfully",
        description="Human-readable confirmation.",
    )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="healthy or degraded")
    store: str = Field(..., description="connected or disconnected")
    store_backend: str
    version: str
    timestamp: datetime
