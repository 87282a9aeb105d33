from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping, Optional, Tuple, Type, TypeVar, Union

if TYPE_CHECKING:
    from nano_injector.application.provider import Provider

T = TypeVar("T")


class IBinder(ABC):
    """Abstract interface for a binder holding one creation strategy."""

    @abstractmethod
    def get_value(self) -> Any:
        """Create the value if needed through the configured method and return it.

        Raises:
            NoCreationMethodSpecifiedError: If no creation method was configured.
        """


class IInjector(ABC):
    """Abstract interface for a hierarchical injector."""

    @abstractmethod
    def bind_provider(self, *providers: "Provider[Any]") -> IBinder:
        """Create a binder and register it under every given provider.

        Args:
            providers: Providers the new binder answers for.
        """

    @abstractmethod
    def get_value(self, provider: "Provider[T]") -> T:
        """Resolve the provider through this injector and its ancestors.

        Args:
            provider: The provider to resolve.

        Raises:
            NoBinderError: If no injector in the chain binds the provider.
            CircularDependencyError: If the provider is already being resolved.
        """

    @abstractmethod
    def try_get_value(self, provider: "Provider[T]", default: Any = None) -> Any:
        """Resolve the provider, returning default when it is not bound.

        Args:
            provider: The provider to resolve.
            default: Value returned when no binder exists.
        """

    @abstractmethod
    def create_instance(self, cls: Type[T], *args: Any, **kwargs: Any) -> T:
        """Activate this injector and instantiate the class."""

    @abstractmethod
    def call_func(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Activate this injector and call the function."""

    @abstractmethod
    def inject_values(
        self,
        instance: Any,
        providers: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]],
    ) -> None:
        """Resolve providers and assign them to fields of the instance."""

    @abstractmethod
    def create_child(self, name: Optional[str] = None) -> "IInjector":
        """Create an injector that falls back to this one for unbound providers."""
