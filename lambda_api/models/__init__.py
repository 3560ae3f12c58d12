"""Data models for lambda-api."""

from lambda_api.models.request import Request
from lambda_api.models.response import Response
from lambda_api.models.route import (
    HTTP_METHODS,
    Handler,
    Route,
    RouteMatch,
    Routes,
    define_handler,
)

__all__ = [
    "HTTP_METHODS",
    "Handler",
    "Request",
    "Response",
    "Route",
    "RouteMatch",
    "Routes",
    "define_handler",
]
