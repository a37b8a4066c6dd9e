"""
Runtime configuration for the vex_backend server.

Settings come from command-line flags or environment variables; the only
things worth configuring are the bind address and the log output.

Environment variables:
- SERVER_HOST: interface to bind (default ``127.0.0.1``)
- SERVER_PORT: TCP port, ``8080`` or ``:8080`` (default ``8080``)
- LOG_LEVEL: logging level name (default ``INFO``)
- LOG_FORMAT: ``logging`` format string
"""

import os
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ENV_VARS = {
    "host": "SERVER_HOST",
    "port": "SERVER_PORT",
    "log_level": "LOG_LEVEL",
    "log_format": "LOG_FORMAT",
}


class ServerSettings(BaseModel):
    """Bind address and logging options for one server process."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(default=DEFAULT_HOST, min_length=1)
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT

    @field_validator("host")
    @classmethod
    def host_must_not_be_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("host cannot be empty or whitespace")
        return v

    @field_validator("port", mode="before")
    @classmethod
    def strip_port_colon(cls, v: Any) -> Any:
        # Deployments historically set SERVER_PORT=":8080"
        if isinstance(v, str):
            v = v.strip()
            if v.startswith(":"):
                v = v[1:]
        return v

    @field_validator("log_level")
    @classmethod
    def upper_case_level(cls, v: str) -> str:
        return v.strip().upper()

    @property
    def url(self) -> str:
        """Base URL of the server, e.g. ``http://127.0.0.1:8080``."""
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"http://{host}:{self.port}"

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "ServerSettings":
        """Build settings from environment variables.

        Unset variables keep their defaults.
        """
        if environ is None:
            environ = os.environ
        values = {
            field: environ[var]
            for field, var in ENV_VARS.items()
            if environ.get(var)
        }
        return cls(**values)
