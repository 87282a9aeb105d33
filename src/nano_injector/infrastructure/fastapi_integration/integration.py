from typing import Any, Awaitable, Callable, Optional, TypeVar

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from nano_injector.application import Provider
from nano_injector.domain import IInjector

T = TypeVar("T")

REQUEST_INJECTOR_ATTRIBUTE = "injector"


def create_fastapi_dependency(injector: IInjector, provider: Provider[T]) -> Callable[[], T]:
    """Create a FastAPI Depends() callable that resolves the provider from the injector.

    The resolved value lifetime follows the binding (singleton or transient).

    Args:
        injector: The injector to resolve the provider from.
        provider: The provider to resolve when the dependency is called.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> injector = Injector()
        >>> injector.bind_provider(RepositoryProvider).to_constructor(UserRepository).as_singleton()
        >>>
        >>> get_user_repo = create_fastapi_dependency(injector, RepositoryProvider)
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_user_repo)):
        ...     return await repo.get_all()
    """

    def dependency() -> T:
        """Resolve the provider from the injector."""
        return injector.get_value(provider)

    return dependency


def create_scoped_dependency(provider: Provider[T]) -> Callable[[Request], T]:
    """Create a FastAPI dependency that resolves from the request injector.

    Requires the ScopedInjectorMiddleware to be installed.

    Args:
        provider: The provider to resolve from the request injector.

    Returns:
        A callable that resolves from the request injector.

    Example:
        >>> app.add_middleware(ScopedInjectorMiddleware, injector=injector)
        >>>
        >>> get_request_context = create_scoped_dependency(RequestContextProvider)
        >>>
        >>> @app.get("/process")
        >>> async def process_request(ctx: RequestContext = Depends(get_request_context)):
        ...     return {"request_id": ctx.request_id}
    """

    def scoped_dependency(request: Request) -> T:
        """Resolve from the request injector."""
        request_injector: Optional[IInjector] = getattr(request.state, REQUEST_INJECTOR_ATTRIBUTE, None)
        if request_injector is None:
            raise RuntimeError(
                "Request does not have an injector. Did you forget to add ScopedInjectorMiddleware?"
            )
        return request_injector.get_value(provider)

    return scoped_dependency


class ScopedInjectorMiddleware(BaseHTTPMiddleware):
    """Middleware that creates a child injector for each request.

    Bindings made on the request injector (for example the current user) are
    visible only to that request, while unbound providers fall back to the
    application injector.

    The child injector is accessible via `request.state.injector`.

    Attributes:
        injector: The application injector to create children from.
        configure: Optional callback binding request specific values.

    Example:
        >>> def bind_request(request_injector, request):
        ...     request_injector.bind_provider(RequestIdProvider).to_value(request.headers["x-request-id"])
        >>>
        >>> app = FastAPI()
        >>> app.add_middleware(ScopedInjectorMiddleware, injector=injector, configure=bind_request)
    """

    def __init__(
        self,
        app: FastAPI,
        injector: IInjector,
        configure: Optional[Callable[[IInjector, Request], Any]] = None,
    ):
        """Initialize the middleware with the application injector.

        Args:
            app: The FastAPI/Starlette application.
            injector: The injector to create request injectors from.
            configure: Called with the request injector and the request before the endpoint.
        """
        super().__init__(app)
        self.injector = injector
        self.configure = configure

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Create a request injector and execute the endpoint.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            The response from the endpoint.
        """
        request_injector = self.injector.create_child("request")
        if self.configure is not None:
            self.configure(request_injector, request)
        setattr(request.state, REQUEST_INJECTOR_ATTRIBUTE, request_injector)

        try:
            return await call_next(request)
        finally:
            setattr(request.state, REQUEST_INJECTOR_ATTRIBUTE, None)
