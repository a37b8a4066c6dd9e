"""
Exceptions raised while bringing the server up.
"""


class ServerStartupError(Exception):
    """Raised when the server cannot start"""

    pass


class BindError(ServerStartupError):
    """Raised when the listening socket cannot be bound"""

    def __init__(self, host: str, port: int, reason: OSError) -> None:
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"Could not bind to {host}:{port}: {reason}")
