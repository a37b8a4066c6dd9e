"""
HTTP API layer for vex_backend.

The application is built by :func:`vex_backend.api.app.create_app`; routes
are registered in :mod:`vex_backend.api.routes`.
"""
