#!/usr/bin/env python3
"""
Command-line entry point for the vex_backend server.

Usage:
    vex-server --host 0.0.0.0 --port 8080
    SERVER_HOST=0.0.0.0 SERVER_PORT=:8080 vex-server

Flags take precedence over environment variables, which take precedence
over the defaults in :mod:`vex_backend.config`.
"""

from typing import Optional

import click
from pydantic import ValidationError

from vex_backend.config import (
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    ENV_VARS,
    ServerSettings,
)
from vex_backend.exceptions import ServerStartupError
from vex_backend.log import setup_logging
from vex_backend.server import run


def build_settings(
    host: Optional[str],
    port: Optional[str],
    log_level: Optional[str],
    log_format: Optional[str],
) -> ServerSettings:
    """Turn CLI values into settings, reporting bad values as usage errors."""
    values = {
        "host": host,
        "port": port,
        "log_level": log_level,
        "log_format": log_format,
    }
    try:
        return ServerSettings(
            **{key: value for key, value in values.items() if value}
        )
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise click.UsageError(f"Invalid server settings: {errors}")


@click.command()
@click.option(
    "--host",
    envvar=ENV_VARS["host"],
    help=f"Interface to bind. [default: {DEFAULT_HOST}]",
)
@click.option(
    "--port",
    envvar=ENV_VARS["port"],
    help=f"TCP port to bind, '8080' or ':8080'. [default: {DEFAULT_PORT}]",
)
@click.option(
    "--log-level",
    envvar=ENV_VARS["log_level"],
    help=f"Logging level name. [default: {DEFAULT_LOG_LEVEL}]",
)
@click.option(
    "--log-format",
    envvar=ENV_VARS["log_format"],
    help="Format string for log records.",
)
def main(
    host: Optional[str],
    port: Optional[str],
    log_level: Optional[str],
    log_format: Optional[str],
) -> None:
    """Run the vex backend diagnostic server."""
    settings = build_settings(host, port, log_level, log_format)
    logger = setup_logging(settings.log_level, settings.log_format)

    try:
        run(settings, logger=logger)
    except ServerStartupError as e:
        logger.error(
            "Server failed to start",
            extra={"error_type": type(e).__name__, "error_message": str(e)},
        )
        raise click.ClickException(str(e))
    except KeyboardInterrupt:
        # uvicorn has already shut down; exit quietly instead of "Aborted!"
        logger.info("Interrupted, exiting")


if __name__ == "__main__":
    main()
