"""Request routing for AWS Lambda functions behind API Gateway."""

from lambda_api.exceptions import (
    BadRequestError,
    ForbiddenError,
    LambdaAPIError,
    MethodNotAllowedError,
    NotFoundError,
    RequestValidationError,
    ResponseValidationError,
    UnauthorizedError,
)
from lambda_api.handler import api_handler
from lambda_api.lambda_handler import create_lambda_handler
from lambda_api.models import (
    HTTP_METHODS,
    Handler,
    Request,
    Response,
    Route,
    RouteMatch,
    Routes,
    define_handler,
)
from lambda_api.routing import match_route

__all__ = [
    "HTTP_METHODS",
    "BadRequestError",
    "ForbiddenError",
    "Handler",
    "LambdaAPIError",
    "MethodNotAllowedError",
    "NotFoundError",
    "Request",
    "RequestValidationError",
    "Response",
    "ResponseValidationError",
    "Route",
    "RouteMatch",
    "Routes",
    "UnauthorizedError",
    "api_handler",
    "create_lambda_handler",
    "define_handler",
    "match_route",
]
