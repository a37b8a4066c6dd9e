"""
Tests for vex_backend domain models.
"""
