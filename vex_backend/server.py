"""
Server bootstrap.

Binds the listening socket and hands it to uvicorn, which owns the accept
loop, the event loop and signal handling for the life of the process.
"""

import logging
import socket
from typing import Optional

import uvicorn

from vex_backend.api.app import create_app
from vex_backend.config import ServerSettings
from vex_backend.exceptions import BindError
from vex_backend.log import setup_logging


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Bind a TCP socket to ``host:port``.

    The socket is bound but not listening; uvicorn starts listening when it
    takes the socket over.

    Raises:
        BindError: If the address is in use, not permitted or cannot be
            resolved.
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family=family, type=socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        raise BindError(host, port, e) from e
    sock.set_inheritable(True)
    return sock


def run(
    settings: Optional[ServerSettings] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """
    Start the HTTP server and serve until the process is terminated.

    Args:
        settings: Bind address and logging options; read from the
            environment when omitted
        logger: Application logger; configured from ``settings`` when
            omitted

    Raises:
        BindError: If the listening socket cannot be bound
    """
    if settings is None:
        settings = ServerSettings.from_env()
    if logger is None:
        logger = setup_logging(settings.log_level, settings.log_format)

    app = create_app(logger.getChild("access"))

    sock = bind_socket(settings.host, settings.port)
    try:
        bound_port = sock.getsockname()[1]
        bound = settings.model_copy(update={"port": bound_port})
        logger.info(f"Starting server on {bound.url}")

        config = uvicorn.Config(
            app,
            log_config=None,  # logging is configured by setup_logging
            access_log=False,  # AccessLogMiddleware writes the access log
        )
        server = uvicorn.Server(config)
        server.run(sockets=[sock])
    finally:
        sock.close()
        logger.info("Server stopped")
