"""Application layer - Providers, the tokens values are bound to."""

import itertools
from typing import Any, Generic, Optional, TypeVar

from nano_injector.application.injectors_stack import INJECTORS_STACK, MISSING

T = TypeVar("T")

_provider_ids = itertools.count()


class Provider(Generic[T]):
    """Unique token standing for "a value of type T".

    Providers compare and hash by identity only. Calling a provider resolves it
    through the currently active injector.

    Example:
        >>> ConfigProvider = create_provider("Config")
        >>> class AppService:
        ...     def __init__(self):
        ...         self.config = ConfigProvider()
        >>> injector.create_instance(AppService)
    """

    __slots__ = ("_id", "_name")

    def __init__(self, name: Optional[str] = None) -> None:
        self._id = next(_provider_ids)
        self._name = name

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> Optional[str]:
        return self._name

    def __call__(self, default: Any = MISSING) -> Any:
        """Return the value bound to this provider in the active injector.

        Args:
            default: Returned instead of raising when no binder exists.

        Raises:
            NoActiveInjectorError: If no injector is active.
            NoBinderError: If the provider is not bound and no default was given.
        """
        return INJECTORS_STACK.get(self, default)

    def __repr__(self) -> str:
        return f"Provider(id={self._id}, name={self._name!r})"


def create_provider(name: Optional[str] = None) -> Provider[Any]:
    """Create a new provider.

    Args:
        name: Name used in diagnostics, for example in circular dependency chains.
    """
    return Provider(name)


def is_provider(value: Any) -> bool:
    """Determine whether the value is a provider."""
    return isinstance(value, Provider)


def get_provider_id(provider: Provider[Any]) -> int:
    return provider.id


def get_provider_name(provider: Provider[Any]) -> Optional[str]:
    return provider.name
