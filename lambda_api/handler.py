"""
Generic routing handler.

``api_handler`` normalizes an API Gateway proxy event, matches it against a
route table, invokes the route's handler and renders the result. Errors are
contained by two boundaries: handler and routing failures go to the error
handler, and a failing error handler falls back to a hardcoded 500. The
function always returns a well-formed result.
"""

import time
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from lambda_api.config import settings
from lambda_api.handlers.exception_handler import (
    default_error_handler,
    internal_server_error,
    method_not_allowed,
    not_found_handler,
)
from lambda_api.logging.config import get_logger
from lambda_api.middleware.logging import (
    CORRELATION_HEADER,
    get_or_generate_correlation_id,
    log_invocation,
    log_request_complete,
    log_request_error,
    log_request_start,
)
from lambda_api.middleware.validation import validate_request, validate_response
from lambda_api.models.request import Request
from lambda_api.models.response import Response
from lambda_api.models.route import Route, Routes
from lambda_api.routes.status import default_routes
from lambda_api.routing import match_route
from lambda_api.utils.headers import set_header
from lambda_api.utils.invoke import invoke
from lambda_api.utils.request import parse_request
from lambda_api.utils.response import build_response

logger = get_logger(__name__)

ErrorHandler = Callable[[Request, Exception], Response | Awaitable[Response]]
CatchAllHandler = Callable[[Request], Response | Awaitable[Response]]


async def _dispatch(
    request: Request,
    routes: Routes,
    catch_all: CatchAllHandler,
) -> dict[str, Any]:
    """Route the request and render the handler's response."""
    match = match_route(routes, request.path)

    if not match.found:
        return build_response(Response.coerce(await invoke(catch_all, request)))

    route = Route.coerce(match.route)
    handler = route.handler_for(request.method)
    if handler is None:
        return build_response(method_not_allowed(request, route.allowed_methods()))

    request.path_parameters = match.params
    validate_request(handler, request)

    response = Response.coerce(await invoke(handler.handler, request))
    validate_response(handler, response)
    return build_response(response)


async def _handle_error(
    request: Request, exc: Exception, error_handler: ErrorHandler
) -> dict[str, Any]:
    """Run the error handler, falling back to a hardcoded 500 if it fails."""
    try:
        return build_response(Response.coerce(await invoke(error_handler, request, exc)))
    except Exception as handler_exc:
        log_request_error(request, handler_exc)
        return internal_server_error(request.correlation_id)


async def api_handler(
    event: Mapping[str, Any],
    context: Any,
    routes: Routes | None = None,
    error_handler: ErrorHandler | None = None,
    catch_all: CatchAllHandler | None = None,
) -> dict[str, Any]:
    """
    Dispatch an API Gateway proxy event to a route handler.

    Args:
        event: API Gateway proxy event
        context: Lambda context object
        routes: Route table keyed by path pattern (default: GET /ping)
        error_handler: Called as ``error_handler(request, exc)`` when routing
            or a handler raises (default: default_error_handler)
        catch_all: Called for paths that match no route (default: 404)

    Returns:
        API Gateway proxy result: statusCode, headers, body and, when
        cookies are set, multiValueHeaders
    """
    log_invocation(context, settings.commit_hash)

    start_time = time.time()

    try:
        request = parse_request(event)
        request.context["correlation_id"] = get_or_generate_correlation_id(request)
    except Exception:
        logger.exception("Unable to parse request event")
        return internal_server_error()

    log_request_start(request)

    try:
        result = await _dispatch(
            request,
            default_routes() if routes is None else routes,
            catch_all or not_found_handler,
        )
    except Exception as exc:
        result = await _handle_error(request, exc, error_handler or default_error_handler)

    set_header(CORRELATION_HEADER, request.correlation_id, result["headers"])

    elapsed_ms = (time.time() - start_time) * 1000
    log_request_complete(request, result["statusCode"], elapsed_ms)

    return result
