"""
Route table for the vex_backend API.

GET /test   -> diagnostics.handle_test
GET /health -> system.health_check

Anything else falls through to FastAPI's default 404 / 405 responses.
"""

from fastapi import FastAPI

from vex_backend.api.routers import diagnostics, system


def configure(app: FastAPI) -> None:
    """Register every router on ``app``."""
    app.include_router(diagnostics.router, tags=["Diagnostics"])
    app.include_router(system.router, tags=["System"])
