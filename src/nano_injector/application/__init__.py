"""
Application layer - Resolution engine.

This layer contains providers, binders, injectors and the ambient injectors stack.
It depends only on the Domain layer.
"""

from .binder import Binder
from .circular_detector import CircularDependencyDetector
from .injector import INJECTOR_PROVIDER, Injector
from .injectors_stack import INJECTORS_STACK, MISSING, InjectorsStack
from .provider import Provider, create_provider, get_provider_id, get_provider_name, is_provider
from .resolver import ProviderDefaultsResolver

__all__ = [
    "Injector",
    "INJECTOR_PROVIDER",
    "Binder",
    "Provider",
    "create_provider",
    "is_provider",
    "get_provider_id",
    "get_provider_name",
    "InjectorsStack",
    "INJECTORS_STACK",
    "MISSING",
    "CircularDependencyDetector",
    "ProviderDefaultsResolver",
]
