"""
Pydantic models for API responses.
These define the contract between the API and external clients.

The diagnostic endpoint returns the domain model
:class:`vex_backend.domain.diagnostics.TestResponse` directly; this file
holds only response models that are specific to API concerns.
"""

from pydantic import AwareDatetime, BaseModel


class HealthCheckResponse(BaseModel):
    """Response for health check endpoint."""

    status: str
    service: str
    version: str
    timestamp: AwareDatetime
