import inspect
import logging
from typing import Any, Callable, Dict, Optional, Tuple

from nano_injector.application.provider import is_provider
from nano_injector.domain import IInjector

logger = logging.getLogger(__name__)


class ProviderDefaultsResolver:
    """Fills omitted parameters whose default value is a provider.

    Only default values are inspected, never type hints: a parameter is injected
    when the caller did not pass it and its default is a provider.

    Example:
        >>> class UserService:
        ...     def __init__(self, name: str, repository=RepositoryProvider):
        ...         self.name = name
        ...         self.repository = repository
        >>>
        >>> args, kwargs = ProviderDefaultsResolver().bind_arguments(UserService, ("alice",), {}, injector)
    """

    def _get_signature(self, func: Callable[..., Any]) -> Optional[inspect.Signature]:
        try:
            return inspect.signature(func)
        except (TypeError, ValueError):
            # Builtins and some extension types expose no signature.
            return None

    def bind_arguments(
        self,
        func: Callable[..., Any],
        args: Tuple[Any, ...],
        kwargs: Dict[str, Any],
        injector: IInjector,
    ) -> Tuple[Tuple[Any, ...], Dict[str, Any]]:
        """Complete the call arguments with values resolved from the injector.

        Args:
            func: The function or class about to be called.
            args: Positional arguments given by the caller.
            kwargs: Keyword arguments given by the caller.
            injector: The injector resolving provider defaults.

        Returns:
            Positional and keyword arguments to call func with.

        Raises:
            TypeError: If the given arguments do not match the signature.
        """
        signature = self._get_signature(func)
        if signature is None:
            return args, kwargs

        bound = signature.bind_partial(*args, **kwargs)
        injected = False
        for param_name, param in signature.parameters.items():
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            if param_name in bound.arguments or not is_provider(param.default):
                continue
            logger.debug("Injecting parameter '%s' of %r", param_name, func)
            bound.arguments[param_name] = injector.get_value(param.default)
            injected = True

        if not injected:
            return args, kwargs
        return bound.args, bound.kwargs
