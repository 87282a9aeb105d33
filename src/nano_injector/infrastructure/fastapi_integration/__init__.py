"""
FastAPI integration module.

Provides helpers and utilities for integrating nano-injector with FastAPI.
"""

from .integration import (
    ScopedInjectorMiddleware,
    create_fastapi_dependency,
    create_scoped_dependency,
)

__all__ = [
    "create_fastapi_dependency",
    "create_scoped_dependency",
    "ScopedInjectorMiddleware",
]
