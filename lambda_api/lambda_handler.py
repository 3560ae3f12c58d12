"""AWS Lambda entry points.

``create_lambda_handler`` binds a route table (and optional error and
catch-all handlers) to a synchronous function with the signature Lambda
expects. Each invocation runs ``api_handler`` to completion on a fresh
event loop.
"""

import asyncio
from collections.abc import Callable
from typing import Any

from lambda_api.handler import CatchAllHandler, ErrorHandler, api_handler
from lambda_api.logging.config import configure_logging
from lambda_api.models.route import Routes
from lambda_api.routing import check_routes

LambdaHandler = Callable[[dict, Any], dict]


def create_lambda_handler(
    routes: Routes | None = None,
    error_handler: ErrorHandler | None = None,
    catch_all: CatchAllHandler | None = None,
) -> LambdaHandler:
    """
    Create a Lambda function handler for a route table.

    Args:
        routes: Route table keyed by path pattern (default: GET /ping)
        error_handler: Custom error handler
        catch_all: Handler for unmatched paths

    Returns:
        Function taking (event, context) and returning an API Gateway
        proxy result

    Example:
        handler = create_lambda_handler({
            "/items/{id}": {"GET": get_item, "DELETE": delete_item},
        })
    """
    configure_logging()
    if routes is not None:
        check_routes(routes)

    def handler(event: dict, context: Any) -> dict:
        return asyncio.run(
            api_handler(
                event,
                context,
                routes=routes,
                error_handler=error_handler,
                catch_all=catch_all,
            )
        )

    return handler


_default_handler: LambdaHandler | None = None


def lambda_handler(event: dict, context: object) -> dict:
    """
    AWS Lambda function handler serving the default routes.

    Args:
        event: API Gateway event containing request details
        context: Lambda context object with runtime information

    Returns:
        API Gateway response dict with statusCode, headers, and body

    Notes:
        - This function is stateless and should not maintain state across invocations
        - Environment variables are loaded from Lambda configuration
    """
    global _default_handler
    if _default_handler is None:
        _default_handler = create_lambda_handler()
    return _default_handler(event, context)
