import logging
from typing import Any, Callable, Generic, Optional, Type, TypeVar

from nano_injector.application.injectors_stack import INJECTORS_STACK, MISSING
from nano_injector.domain import (
    CreationKind,
    CreationMethod,
    IBinder,
    IInjector,
    Lifetime,
    NoCreationMethodSpecifiedError,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Binder(IBinder, Generic[T]):
    """Defines how the value of the providers it is bound to gets created.

    A binder holds exactly one creation method at a time. Configuring a new one
    replaces the previous method and drops any cached singleton.

    Attributes:
        _injector: The injector owning this binder, passed to factories.
        _creation_method: The configured creation method, if any.
        _lifetime: Whether created values are cached.
        _cached_value: Cached singleton value, or MISSING.

    Example:
        >>> injector.bind_provider(DatabaseProvider).to_factory(lambda i: Database()).as_singleton()
    """

    def __init__(self, injector: IInjector) -> None:
        self._injector = injector
        self._creation_method: Optional[CreationMethod] = None
        self._lifetime = Lifetime.TRANSIENT
        self._cached_value: Any = MISSING

    @property
    def injector(self) -> IInjector:
        return self._injector

    @property
    def creation_method(self) -> Optional[CreationMethod]:
        return self._creation_method

    @property
    def lifetime(self) -> Lifetime:
        return self._lifetime

    @property
    def is_singleton(self) -> bool:
        return self._lifetime == Lifetime.SINGLETON

    def _set_creation_method(self, kind: CreationKind, target: Any) -> "Binder[T]":
        self._creation_method = CreationMethod(kind=kind, target=target)
        self._cached_value = MISSING
        return self

    def to_value(self, value: T) -> "Binder[T]":
        """Bind directly to a value.

        Args:
            value: The value returned on every resolution.
        """
        return self._set_creation_method(CreationKind.VALUE, value)

    def to_constructor(self, cls: Type[T]) -> "Binder[T]":
        """Create values by instantiating the class.

        Parameters with a provider default are resolved through the injector the
        value is requested from, as in Injector.create_instance.

        Args:
            cls: The class to instantiate.
        """
        return self._set_creation_method(CreationKind.CONSTRUCTOR, cls)

    def to_factory(self, factory: Callable[[IInjector], T]) -> "Binder[T]":
        """Create values by calling the factory with the owning injector.

        Args:
            factory: Function receiving the injector and returning the value.
        """
        return self._set_creation_method(CreationKind.FACTORY, factory)

    def as_singleton(self, value: bool = True) -> "Binder[T]":
        """Define whether the value is created once and shared forever.

        Args:
            value: True to cache the first created value, False to create a new one
                on every resolution.
        """
        self._lifetime = Lifetime.SINGLETON if value else Lifetime.TRANSIENT
        if not value:
            self._cached_value = MISSING
        return self

    def get_value(self) -> T:
        """Create the value if needed and return it.

        Returns:
            Value according to the lifetime:
            - Singleton: cached value, created on first call
            - Transient: new value on every call (fixed values are returned as is)

        Raises:
            NoCreationMethodSpecifiedError: If no creation method was configured.
        """
        if self._cached_value is not MISSING:
            return self._cached_value

        if self._creation_method is None:
            raise NoCreationMethodSpecifiedError()

        resolving_injector = INJECTORS_STACK.active_injector if INJECTORS_STACK.is_active else None
        value = self._creation_method.create(self._injector, resolving_injector)
        if self.is_singleton:
            logger.debug("Caching singleton value created by %s", self._creation_method.kind)
            self._cached_value = value
        return value
