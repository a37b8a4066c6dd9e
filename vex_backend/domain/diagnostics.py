"""
Diagnostic domain models.

This module contains the value object returned by the ``/test`` endpoint.
It carries two fixed fields and the instant at which it was created, so a
caller can confirm that the service is up and answering in real time.

The model is frozen: a response is built once per request and serialized
straight away.
"""

from datetime import datetime, timezone
from typing import Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

TEST_MESSAGE = "Test endpoint is working!"
TEST_STATUS = "success"


def utc_now() -> datetime:
    """Current wall-clock time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class TestResponse(BaseModel):
    """Payload of the diagnostic endpoint.

    ``timestamp`` must be timezone-aware; it serializes to an RFC3339
    string such as ``2025-01-01T12:00:00.123456Z``.
    """

    # Not a pytest test class despite the name.
    __test__ = False

    model_config = ConfigDict(frozen=True)

    message: Literal["Test endpoint is working!"] = TEST_MESSAGE
    status: Literal["success"] = TEST_STATUS
    timestamp: AwareDatetime = Field(default_factory=utc_now)

    @classmethod
    def now(cls) -> "TestResponse":
        """Build a response stamped with the current time."""
        return cls(timestamp=utc_now())
