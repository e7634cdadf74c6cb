"""
Testing utilities module.

Provides helpers for testing applications wired with appcontext.
"""

from .utilities import TestAppContext, create_mock_context

__all__ = [
    "TestAppContext",
    "create_mock_context",
]
