"""
FastAPI application for the vex_backend diagnostic service.

The app is assembled by :func:`create_app` rather than at import time, so
the server and the tests each build their own instance with their own
logger.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from vex_backend import __version__
from vex_backend.api import routes
from vex_backend.api.middleware import AccessLogMiddleware

ACCESS_LOGGER_NAME = "vex_backend.access"


def create_app(logger: Optional[logging.Logger] = None) -> FastAPI:
    """Build the application with access logging and the route table."""
    if logger is None:
        logger = logging.getLogger(ACCESS_LOGGER_NAME)

    app = FastAPI(
        title="Vex Backend",
        description="Diagnostic endpoint for the vex backend",
        version=__version__,
    )

    app.add_middleware(AccessLogMiddleware, logger=logger)
    routes.configure(app)

    return app
