"""
API routers mounted at the root level by :mod:`vex_backend.api.routes`.
"""
