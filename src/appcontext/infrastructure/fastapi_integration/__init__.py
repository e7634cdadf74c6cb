"""
FastAPI integration module.

Provides helpers for exposing application context objects to FastAPI endpoints.
"""

from .integration import (
    create_fastapi_dependency,
    create_tagged_dependency,
    depends_on,
    inject_dependencies,
)

__all__ = [
    "create_fastapi_dependency",
    "create_tagged_dependency",
    "depends_on",
    "inject_dependencies",
]
