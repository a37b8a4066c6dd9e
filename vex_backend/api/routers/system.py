"""
System API router for the vex_backend service.

This module provides system-level API endpoints including health checks.

Routes defined at root level:
- GET /health - Health check endpoint

These routes are mounted at the root level in the main app.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from vex_backend import __version__
from vex_backend.api.responses import HealthCheckResponse

SERVICE_NAME = "vex-backend"

# Create the router for system endpoints
router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Health check endpoint."""
    return HealthCheckResponse(
        status="healthy",
        service=SERVICE_NAME,
        version=__version__,
        timestamp=datetime.now(timezone.utc),
    )
