from typing import Any, Callable, Optional, Set, Tuple, TypeVar

from nano_injector.application import INJECTORS_STACK, Injector, Provider
from nano_injector.domain import IInjector, Lifetime

T = TypeVar("T")


class TestInjector(Injector):
    """Injector for testing with binding override capabilities.

    Resolves everything it does not override through its parent injector, so
    production bindings stay untouched. Used as a context manager it activates
    itself and drops its overrides on exit.

    This is useful for:
    - Mocking external services (databases, APIs, etc.)
    - Replacing implementations with test doubles
    - Running code that calls providers directly

    Attributes:
        _overrides: Providers overridden in this injector.

    Example:
        >>> injector = Injector()
        >>> injector.bind_provider(EmailProvider).to_constructor(SmtpEmailService).as_singleton()
        >>>
        >>> def test_user_service():
        ...     with TestInjector(injector) as test_injector:
        ...         mock_email = MockEmailService()
        ...         test_injector.mock_value(EmailProvider, mock_email)
        ...
        ...         service = test_injector.create_instance(UserService)
        ...         service.send_welcome_email(user)
        ...
        ...         assert mock_email.send_called
    """

    __test__ = False  # Tell pytest not to collect this class as a test

    def __init__(self, parent: Optional[IInjector] = None, name: Optional[str] = "test") -> None:
        """Initialize the test injector.

        Args:
            parent: Optional injector to fall back to for providers that are not overridden.
            name: Name of the test injector.
        """
        super().__init__(name=name, parent=parent)
        self._overrides: Set[Provider[Any]] = set()

    def _override(self, provider: Provider[Any]) -> Any:
        self.unbind(provider)
        self._overrides.add(provider)
        return self.bind_provider(provider)

    def mock_value(self, provider: Provider[T], mock_instance: T) -> None:
        """Replace the value of a provider with a mock instance.

        Example:
            >>> test_injector.mock_value(DatabaseProvider, mock_db)
            >>> service = test_injector.create_instance(UserService)
            >>> assert service.db is mock_db
        """
        self._override(provider).to_value(mock_instance)

    def mock_factory(self, provider: Provider[T], factory: Callable[[], T]) -> None:
        """Replace a provider with a mock factory called on each resolution.

        Example:
            >>> test_injector.mock_factory(HandlerProvider, lambda: MockRequestHandler())
            >>> assert test_injector.get_value(HandlerProvider) is not test_injector.get_value(HandlerProvider)
        """
        self._override(provider).to_factory(lambda injector: factory())

    def override_binding(
        self, provider: Provider[T], factory: Callable[[IInjector], T], lifetime: Lifetime
    ) -> None:
        """Override a provider with a custom factory and lifetime.

        Example:
            >>> test_injector.override_binding(
            ...     CacheProvider,
            ...     lambda injector: InMemoryCacheService(),  # Instead of Redis
            ...     Lifetime.SINGLETON,
            ... )
        """
        self._override(provider).to_factory(factory).as_singleton(lifetime == Lifetime.SINGLETON)

    def reset_overrides(self) -> None:
        """Remove all overrides so the parent bindings apply again."""
        for provider in self._overrides:
            self.unbind(provider)
        self._overrides.clear()

    def __enter__(self) -> "TestInjector":
        """Context manager entry - activates the injector."""
        INJECTORS_STACK.push(self)
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        """Context manager exit - deactivate and clean up overrides."""
        INJECTORS_STACK.pop()
        self.reset_overrides()
        return False


def create_mock_injector(*values: Tuple[Provider[Any], Any], parent: Optional[IInjector] = None) -> TestInjector:
    """Create a test injector with pre-configured mock values.

    Args:
        *values: Tuples of (provider, mock_instance).
        parent: Optional injector to fall back to.

    Example:
        >>> test_injector = create_mock_injector(
        ...     (DatabaseProvider, mock_db),
        ...     (CacheProvider, mock_cache),
        ... )
        >>> service = test_injector.create_instance(UserService)
    """
    injector = TestInjector(parent)

    for provider, mock_instance in values:
        injector.mock_value(provider, mock_instance)

    return injector


class MockScope:
    """Context manager yielding an activated child injector.

    Bindings made inside the block live in the child only, and providers called
    directly inside the block resolve through it.

    Example:
        >>> with MockScope(injector) as scoped:
        ...     scoped.bind_provider(RequestProvider).to_value(fake_request)
        ...     assert RequestProvider() is fake_request
        ...
        ... # Previously active injector restored here
    """

    def __init__(self, parent_injector: IInjector, name: Optional[str] = "mock-scope") -> None:
        """Initialize the mock scope.

        Args:
            parent_injector: The injector to create the child from.
            name: Name of the child injector.
        """
        self._parent_injector = parent_injector
        self._name = name
        self._scoped_injector: Optional[IInjector] = None

    def __enter__(self) -> IInjector:
        """Create the child injector and activate it."""
        self._scoped_injector = self._parent_injector.create_child(self._name)
        INJECTORS_STACK.push(self._scoped_injector)
        return self._scoped_injector

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        """Deactivate and drop the child injector."""
        if self._scoped_injector is not None:
            INJECTORS_STACK.pop()
            self._scoped_injector = None
        return False
