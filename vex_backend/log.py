"""
Logging setup for the vex_backend server.
"""

import logging
import sys

from vex_backend.config import DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL

LOGGER_NAME = "vex_backend"


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL, log_format: str = DEFAULT_LOG_FORMAT
) -> logging.Logger:
    """Configure process logging and return the application logger."""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        print(f"Invalid log level: {level}, defaulting to INFO")
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing configuration
    )

    logging.getLogger("uvicorn").setLevel(numeric_level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)
    return logger
