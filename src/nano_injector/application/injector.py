import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Type, TypeVar, Union

from nano_injector.application.binder import Binder
from nano_injector.application.circular_detector import CircularDependencyDetector
from nano_injector.application.injectors_stack import INJECTORS_STACK
from nano_injector.application.provider import Provider, create_provider, is_provider
from nano_injector.application.resolver import ProviderDefaultsResolver
from nano_injector.domain import IInjector, InjectorSettings, NoBinderError

T = TypeVar("T")

logger = logging.getLogger(__name__)

INJECTOR_PROVIDER: Provider["Injector"] = create_provider("Injector")
"""Provider every injector binds to itself."""


class Injector(IInjector):
    """Holds provider bindings and resolves providers to values.

    Injectors form a hierarchy: a provider not bound in an injector is looked up
    in its parent, then the grandparent, and so on. The closest binding wins.
    While an injector constructs an instance, calls a function or resolves a
    binder it is the active injector, so providers called inside that code are
    resolved through it.

    Attributes:
        _settings: Validated name, parent and diagnostics sink.
        _binders: Dictionary mapping providers to their binders.
        _resolver: Component filling provider defaults of called functions.
        _circular_detector: Component detecting circular dependencies.

    Example:
        >>> injector = Injector(name="app")
        >>> injector.bind_provider(ConfigProvider).to_value(Config(port=3000))
        >>> injector.bind_provider(LoggerProvider).to_constructor(ConsoleLogger)
        >>> app = injector.create_instance(AppService)
    """

    def __init__(
        self,
        name: Optional[str] = None,
        parent: Optional[IInjector] = None,
        logger: Optional[Callable[[str], Any]] = None,
    ) -> None:
        """Initialize the injector and bind it to INJECTOR_PROVIDER.

        Args:
            name: Name of the injector, useful mainly for debugging.
            parent: Parent injector used for providers not bound here.
            logger: Function receiving diagnostic messages. Defaults to a warning
                on the "nano_injector" logger.

        Raises:
            pydantic.ValidationError: If parent is not an injector or logger is not callable.
        """
        settings: Dict[str, Any] = {"name": name, "parent": parent}
        if logger is not None:
            settings["logger"] = logger
        self._settings = InjectorSettings(**settings)
        self._binders: Dict[Provider[Any], Binder[Any]] = {}
        self._resolver = ProviderDefaultsResolver()
        self._circular_detector = CircularDependencyDetector()
        self.bind_provider(INJECTOR_PROVIDER).to_value(self)

    @property
    def name(self) -> Optional[str]:
        return self._settings.name

    @property
    def parent(self) -> Optional["Injector"]:
        return self._settings.parent

    def bind_provider(self, *providers: Provider[Any]) -> Binder[Any]:
        """Create a new binder and join it to the given providers.

        A provider already bound in this injector is overridden. Bindings of
        ancestors are left untouched.

        Args:
            providers: Providers the binder answers for.

        Returns:
            The new binder, to configure its creation method.

        Raises:
            ValueError: If no provider is given.
            TypeError: If an argument is not a provider.

        Example:
            >>> injector.bind_provider(ReaderProvider, WriterProvider).to_constructor(FileStorage).as_singleton()
        """
        if not providers:
            raise ValueError("At least one provider is required")
        for provider in providers:
            if not is_provider(provider):
                raise TypeError(f"Expected a provider, got {provider!r}")

        binder: Binder[Any] = Binder(self)
        for provider in dict.fromkeys(providers):
            if provider in self._binders and provider is not INJECTOR_PROVIDER:
                self._settings.logger(f"Provider {provider!r} is already bound in {self!r}, overriding")
            self._binders[provider] = binder
        logger.debug("Bound %s in %r", providers, self)
        return binder

    def unbind(self, provider: Provider[Any]) -> bool:
        """Remove the binding of the provider from this injector only.

        Returns:
            True if a binding was removed.
        """
        return self._binders.pop(provider, None) is not None

    def get_binder(self, provider: Provider[T]) -> Optional[Binder[T]]:
        """Find the binder of the provider, walking up to the root injector.

        Returns:
            The closest binder, or None if no injector in the chain binds the provider.
        """
        injector: Optional[Injector] = self
        while injector is not None:
            binder = injector._binders.get(provider)
            if binder is not None:
                return binder
            injector = injector.parent
        return None

    def is_bound(self, provider: Provider[Any], recursive: bool = True) -> bool:
        """Check whether the provider is bound.

        Args:
            provider: The provider to look up.
            recursive: Whether bindings of ancestors count.
        """
        if recursive:
            return self.get_binder(provider) is not None
        return provider in self._binders

    def get_value(self, provider: Provider[T]) -> T:
        """Resolve the provider to its value.

        Args:
            provider: The provider to resolve.

        Returns:
            The value produced by the closest binder.

        Raises:
            NoBinderError: If no injector in the chain binds the provider.
            CircularDependencyError: If the provider is already being resolved by this injector.
            NoCreationMethodSpecifiedError: If the binder has no creation method.

        Example:
            >>> config = injector.get_value(ConfigProvider)
        """
        binder = self.get_binder(provider)
        if binder is None:
            raise NoBinderError(provider)
        return self._resolve_binder(provider, binder)

    def try_get_value(self, provider: Provider[T], default: Any = None) -> Any:
        """Resolve the provider, or return default if no injector binds it.

        Only a missing binding of this provider is turned into the default. Errors
        raised while creating the value, including missing bindings of other
        providers, propagate.

        Args:
            provider: The provider to resolve.
            default: Value returned when the provider is not bound.
        """
        binder = self.get_binder(provider)
        if binder is None:
            return default
        return self._resolve_binder(provider, binder)

    def _resolve_binder(self, provider: Provider[T], binder: Binder[T]) -> T:
        self._circular_detector.push(provider)
        try:
            return self.activate_and_call(binder.get_value)
        finally:
            self._circular_detector.pop()

    def activate_and_call(self, func: Callable[[], T]) -> T:
        """Activate this injector, call the function and restore the previous one.

        The injector is deactivated even if the function raises.
        """
        with INJECTORS_STACK.activated(self):
            return func()

    def create_instance(self, cls: Type[T], *args: Any, **kwargs: Any) -> T:
        """Activate this injector and create an instance of the class.

        Explicit arguments are passed through. Constructor parameters that were
        omitted and whose default is a provider are resolved from this injector.

        Example:
            >>> class User:
            ...     def __init__(self, name: str, logger=LoggerProvider):
            ...         self.name = name
            ...         self.logger = logger
            >>> user = injector.create_instance(User, "Alice")
        """
        return self.call_func(cls, *args, **kwargs)

    def call_func(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Activate this injector and call the function.

        Explicit arguments are passed through. Parameters that were omitted and
        whose default is a provider are resolved from this injector.

        Example:
            >>> injector.call_func(lambda: ConfigProvider().app_name)
        """

        def call() -> T:
            call_args, call_kwargs = self._resolver.bind_arguments(func, args, kwargs, self)
            return func(*call_args, **call_kwargs)

        return self.activate_and_call(call)

    def inject_values(
        self,
        instance: Any,
        providers: Union[Mapping, Iterable[Tuple[str, Any]]],
    ) -> None:
        """Resolve the providers and assign them to the instance.

        Entries whose value is not a provider are skipped, so manual and injected
        fields can be declared together.

        Args:
            instance: Object receiving attributes, or mutable mapping receiving items.
            providers: Mapping or pairs of field name to provider.

        Example:
            >>> injector.inject_values(self, {"repository": RepositoryProvider, "retries": 3})
        """
        pairs = providers.items() if isinstance(providers, Mapping) else providers
        for field_name, provider in pairs:
            if not is_provider(provider):
                continue
            value = self.get_value(provider)
            if isinstance(instance, MutableMapping):
                instance[field_name] = value
            else:
                setattr(instance, field_name, value)

    def create_child(self, name: Optional[str] = None) -> "Injector":
        """Create an injector inheriting the bindings of this one.

        The child resolves through the same binders, and so shares singletons,
        until it binds a provider itself.
        """
        return Injector(name=name, parent=self, logger=self._settings.logger)

    def __repr__(self) -> str:
        return f"Injector(name={self.name!r})"
