"""
Domain layer - Core models and contracts.

This layer contains the error taxonomy, value objects and interfaces of the injector.
It has no dependencies on other layers.
"""

from .enums import CreationKind, Lifetime
from .exceptions import (
    CircularDependencyError,
    InjectingError,
    NoActiveInjectorError,
    NoBinderError,
    NoCreationMethodSpecifiedError,
)
from .interfaces import IBinder, IInjector
from .models import CreationMethod, InjectorSettings, ResolutionContext, default_diagnostics_sink

__all__ = [
    # Enums
    "Lifetime",
    "CreationKind",
    # Exceptions
    "InjectingError",
    "NoBinderError",
    "CircularDependencyError",
    "NoCreationMethodSpecifiedError",
    "NoActiveInjectorError",
    # Interfaces
    "IBinder",
    "IInjector",
    # Models
    "CreationMethod",
    "InjectorSettings",
    "ResolutionContext",
    "default_diagnostics_sink",
]
