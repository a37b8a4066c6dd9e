"""
vex_backend: a small diagnostic HTTP service.

The service exposes ``GET /test``, which answers with a fixed JSON payload
and the current timestamp, plus a ``GET /health`` probe. It is started with
the ``vex-server`` command (see :mod:`vex_backend.cli`).
"""

__version__ = "0.1.0"
