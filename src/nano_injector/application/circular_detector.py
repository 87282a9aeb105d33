"""Application layer - Circular dependency detection."""

import threading
from typing import Any

from nano_injector.domain import ResolutionContext


class CircularDependencyDetector:
    """Detects circular dependencies during resolution through one injector.

    Every injector owns a detector. Uses thread-local storage so that the same
    injector resolving in two threads does not report false cycles.

    Attributes:
        _local: Thread-local storage for resolution contexts.
    """

    def __init__(self) -> None:
        """Initialize the circular dependency detector with thread-local storage."""
        self._local = threading.local()

    def _get_context(self) -> ResolutionContext:
        """Get the current thread's resolution context."""
        if not hasattr(self._local, "context"):
            self._local.context = ResolutionContext()
        return self._local.context

    def push(self, provider: Any) -> None:
        """Add a provider to the resolution stack.

        Args:
            provider: The provider being resolved.

        Raises:
            CircularDependencyError: If the provider is already in the stack.

        Example:
            >>> detector = CircularDependencyDetector()
            >>> detector.push(ServiceAProvider)
            >>> detector.push(ServiceBProvider)
            >>> detector.push(ServiceAProvider)  # Raises CircularDependencyError
        """
        self._get_context().push(provider)

    def pop(self) -> None:
        """Remove the last provider from the resolution stack.

        Called after the resolution finished, successfully or not.
        """
        self._get_context().pop()
