"""Application layer - Ambient stack of activated injectors."""

import logging
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterator, List, Optional

from nano_injector.domain import IInjector, NoActiveInjectorError

if TYPE_CHECKING:
    from nano_injector.application.provider import Provider

logger = logging.getLogger(__name__)


class _Missing:
    """Marker for an omitted default value."""

    def __repr__(self) -> str:
        return "<MISSING>"


MISSING: Any = _Missing()


class InjectorsStack:
    """Holds the injector currently performing a resolution.

    Injectors push themselves while they construct instances, call functions or
    resolve binders, and pop themselves afterwards. The top of the stack is the
    active injector, which providers consult when they are called without an
    explicit injector. Each thread sees its own stack.

    Attributes:
        _local: Thread-local storage for the injectors stack.
    """

    def __init__(self) -> None:
        """Initialize the stack with thread-local storage."""
        self._local = threading.local()

    def _get_stack(self) -> List[IInjector]:
        if not hasattr(self._local, "injectors"):
            self._local.injectors = []
        return self._local.injectors

    def push(self, injector: IInjector) -> None:
        """Make the injector the active one.

        The same injector may be pushed several times; every push must be matched
        by a pop.

        Args:
            injector: The injector to activate.
        """
        self._get_stack().append(injector)

    def pop(self) -> Optional[IInjector]:
        """Deactivate the top injector and restore the previously active one.

        Returns:
            The injector removed from the stack, or None if the stack was empty.
        """
        stack = self._get_stack()
        if stack:
            return stack.pop()
        return None

    @property
    def active_injector(self) -> IInjector:
        """The injector on top of the stack.

        Raises:
            NoActiveInjectorError: If no injector is active.
        """
        stack = self._get_stack()
        if not stack:
            raise NoActiveInjectorError()
        return stack[-1]

    @property
    def is_active(self) -> bool:
        return bool(self._get_stack())

    @property
    def depth(self) -> int:
        return len(self._get_stack())

    def get(self, provider: "Provider[Any]", default: Any = MISSING) -> Any:
        """Resolve the provider through the active injector.

        Args:
            provider: The provider to resolve.
            default: Returned when the provider is not bound. If omitted, a missing
                binding raises NoBinderError.

        Raises:
            NoActiveInjectorError: If no injector is active.
        """
        injector = self.active_injector
        if default is MISSING:
            return injector.get_value(provider)
        return injector.try_get_value(provider, default)

    @contextmanager
    def activated(self, injector: IInjector) -> Iterator[IInjector]:
        """Keep the injector active for the duration of the block.

        Example:
            >>> with INJECTORS_STACK.activated(injector):
            ...     config = ConfigProvider()
        """
        self.push(injector)
        logger.debug("Activated %r (depth %d)", injector, self.depth)
        try:
            yield injector
        finally:
            self.pop()
            logger.debug("Deactivated %r (depth %d)", injector, self.depth)


INJECTORS_STACK = InjectorsStack()
