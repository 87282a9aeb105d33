import logging
from typing import Any, Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from nano_injector.domain.enums import CreationKind
from nano_injector.domain.exceptions import CircularDependencyError
from nano_injector.domain.interfaces import IInjector

LOGGER_NAME = "nano_injector"


def default_diagnostics_sink(message: str) -> None:
    """Report an injector diagnostic as a warning on the library logger."""
    logging.getLogger(LOGGER_NAME).warning(message)


class CreationMethod(BaseModel):
    """Value object describing how a binder produces its value.

    Attributes:
        kind: Which creation strategy is used.
        target: The fixed value, the factory, or the class to instantiate.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: CreationKind = Field(..., description="The creation strategy.")
    target: Any = Field(..., description="Value, factory or class used by the strategy.")

    def create(self, injector: IInjector, resolving_injector: Optional[IInjector] = None) -> Any:
        """Produce a value with this strategy.

        Args:
            injector: The injector owning the binder, passed to factories.
            resolving_injector: The injector the value is requested from. Constructor
                parameters with a provider default are resolved through it. Defaults
                to the owning injector.
        """
        if self.kind == CreationKind.VALUE:
            return self.target
        if self.kind == CreationKind.CONSTRUCTOR:
            return (resolving_injector or injector).create_instance(self.target)
        return self.target(injector)


class InjectorSettings(BaseModel):
    """Configuration of an injector.

    Attributes:
        name: Optional name, mainly for diagnostics.
        parent: Injector used as fallback for unbound providers.
        logger: Diagnostics sink receiving warning messages.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: Optional[str] = Field(default=None, description="Name of the injector.")
    parent: Optional[IInjector] = Field(default=None, description="Parent injector for fallback resolution.")
    logger: Callable[[str], Any] = Field(
        default=default_diagnostics_sink,
        description="Function receiving diagnostic messages.",
    )


class ResolutionContext(BaseModel):
    """Tracks the providers an injector is currently resolving.

    Used for circular dependency detection.

    Attributes:
        stack: Providers currently being resolved, outermost first.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    stack: List[Any] = Field(
        default_factory=list,
        description="Stack of providers currently being resolved.",
    )

    def push(self, provider: Any) -> None:
        """Add a provider to the resolution stack.

        Args:
            provider: The provider being resolved.

        Raises:
            CircularDependencyError: If the provider is already in the stack.
        """
        if provider in self:
            cycle_start_index = next(index for index, resolving in enumerate(self.stack) if resolving is provider)
            raise CircularDependencyError(self.stack[cycle_start_index:] + [provider])
        self.stack.append(provider)

    def pop(self) -> None:
        """Remove the most recent provider from the stack."""
        if self.stack:
            self.stack.pop()

    def __contains__(self, provider: Any) -> bool:
        return any(resolving is provider for resolving in self.stack)
