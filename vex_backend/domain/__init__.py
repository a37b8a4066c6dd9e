"""
Domain layer for vex_backend.

Contains the framework-independent value objects returned by the API.

Import domain components using their full module paths, e.g.:
    from vex_backend.domain.diagnostics import TestResponse
"""
