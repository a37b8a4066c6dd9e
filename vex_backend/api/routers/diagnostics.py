"""
Diagnostic API router.

Routes defined at root level:
- GET /test - Confirms the service is answering, with the current time

These routes are mounted at the root level in the main app.
"""

from fastapi import APIRouter

from vex_backend.domain.diagnostics import TestResponse

router = APIRouter()


@router.get("/test", response_model=TestResponse)
async def handle_test() -> TestResponse:
    """Return the fixed diagnostic payload stamped with the current time."""
    return TestResponse.now()
