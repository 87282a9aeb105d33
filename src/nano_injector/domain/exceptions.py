from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from nano_injector.application.provider import Provider

UNNAMED = "?"


def _display_name(provider: Any) -> str:
    name: Optional[str] = getattr(provider, "name", None)
    return name if name is not None else UNNAMED


class InjectingError(Exception):
    """Base exception for injection errors."""


class NoBinderError(InjectingError):
    """Raised when no injector in the chain has a binder for a provider.

    Attributes:
        provider: The provider that could not be resolved.
    """

    def __init__(self, provider: "Provider[Any]") -> None:
        self.provider = provider
        super().__init__(f"No binder found for provider {_display_name(provider)}")


class CircularDependencyError(InjectingError):
    """Raised when a provider is requested while it is already being resolved.

    Attributes:
        dependency_chain: Providers forming the cycle, the first one repeated at the end.
    """

    def __init__(self, dependency_chain: List["Provider[Any]"]) -> None:
        self.dependency_chain = dependency_chain
        message = f"Circular dependency detected: {' -> '.join(self.names)}"
        super().__init__(message)

    @property
    def names(self) -> List[str]:
        return [_display_name(provider) for provider in self.dependency_chain]


class NoCreationMethodSpecifiedError(InjectingError):
    """Raised when a binder is resolved before any creation method was configured."""

    def __init__(self) -> None:
        super().__init__("No creation method specified")


class NoActiveInjectorError(InjectingError):
    """Raised when a provider is called outside of any activated injector.

    This occurs when:
    - A provider is called at module level or from a plain function.
    - The ambient stack was popped more times than it was pushed.
    """

    def __init__(self, message: str = "No active injector") -> None:
        super().__init__(message)
