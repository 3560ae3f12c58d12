"""Route table models: per-method handler slots keyed by path pattern."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, model_validator

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD")


class Handler(BaseModel):
    """
    A route handler with optional request and response schemas.

    Attributes:
        handler: Callable taking a Request and returning a Response (may be async)
        request_schema: Pydantic model the request body must validate against
        response_schema: Pydantic model the response body must validate against
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    handler: Callable[..., Any]
    request_schema: type[BaseModel] | None = None
    response_schema: type[BaseModel] | None = None


class Route(BaseModel):
    """
    Handlers for one path pattern, one optional slot per HTTP method.

    An empty slot means "no handler" and yields a 405 for that method.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid", frozen=True)

    GET: Handler | None = None
    POST: Handler | None = None
    PUT: Handler | None = None
    PATCH: Handler | None = None
    DELETE: Handler | None = None
    OPTIONS: Handler | None = None
    HEAD: Handler | None = None

    @model_validator(mode="before")
    @classmethod
    def wrap_callables(cls, data: Any) -> Any:
        """Accept lowercase method names and bare callables as handlers."""
        if not isinstance(data, Mapping):
            return data
        wrapped: dict[str, Any] = {}
        for method, handler in data.items():
            if callable(handler) and not isinstance(handler, Handler):
                handler = Handler(handler=handler)
            wrapped[str(method).upper()] = handler
        return wrapped

    def handler_for(self, method: str) -> Handler | None:
        """
        Get the handler registered for a method.

        Args:
            method: HTTP method (any case)

        Returns:
            Handler, or None if no handler is registered for the method
        """
        method = method.upper()
        if method not in HTTP_METHODS:
            return None
        return getattr(self, method)

    def allowed_methods(self) -> list[str]:
        """List the methods that have a handler, in HTTP_METHODS order."""
        return [method for method in HTTP_METHODS if getattr(self, method) is not None]

    @classmethod
    def coerce(cls, value: Any) -> "Route":
        """
        Convert a route table entry into a Route.

        Args:
            value: A Route or a mapping of method name to handler

        Returns:
            Route instance
        """
        if isinstance(value, cls):
            return value
        return cls.model_validate(value)


RouteEntry = Union[Route, Mapping[str, Union[Handler, Callable[..., Any]]]]
Routes = Mapping[str, RouteEntry]


def define_handler(
    handler: Callable[..., Any],
    request_schema: type[BaseModel] | None = None,
    response_schema: type[BaseModel] | None = None,
) -> Handler:
    """
    Build a Handler with request and/or response schemas.

    Args:
        handler: Route handler callable
        request_schema: Model the request body is validated against
        response_schema: Model the response body is validated against

    Returns:
        Handler instance
    """
    return Handler(
        handler=handler,
        request_schema=request_schema,
        response_schema=response_schema,
    )


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of matching a path against a route table.

    ``route`` is the route table entry as registered (not coerced), or None.
    """

    route: Any = None
    params: dict[str, str] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        """Whether a route matched."""
        return self.route is not None
