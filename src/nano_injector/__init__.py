"""
nano-injector: Provider based Dependency Injection with hierarchical injectors.

Public API exports for the nano-injector package.
"""

# Application exports
from nano_injector.application.binder import Binder
from nano_injector.application.injector import INJECTOR_PROVIDER, Injector
from nano_injector.application.injectors_stack import INJECTORS_STACK, InjectorsStack
from nano_injector.application.provider import (
    Provider,
    create_provider,
    get_provider_id,
    get_provider_name,
    is_provider,
)

# Domain exports
from nano_injector.domain.enums import Lifetime
from nano_injector.domain.exceptions import (
    CircularDependencyError,
    InjectingError,
    NoActiveInjectorError,
    NoBinderError,
    NoCreationMethodSpecifiedError,
)

__version__ = "0.1.0"

__all__ = [
    # Injector
    "Injector",
    "INJECTOR_PROVIDER",
    "Binder",
    # Providers
    "Provider",
    "create_provider",
    "is_provider",
    "get_provider_id",
    "get_provider_name",
    # Ambient stack
    "InjectorsStack",
    "INJECTORS_STACK",
    # Enums
    "Lifetime",
    # Exceptions
    "InjectingError",
    "NoBinderError",
    "CircularDependencyError",
    "NoCreationMethodSpecifiedError",
    "NoActiveInjectorError",
]
