"""Default error, not-found and method-not-allowed handlers."""

import json
from typing import Any

from lambda_api.exceptions import (
    LambdaAPIError,
    MethodNotAllowedError,
    RequestValidationError,
)
from lambda_api.logging.config import get_logger
from lambda_api.models.request import Request
from lambda_api.models.response import Response

logger = get_logger(__name__)

# Pre-rendered so that the last-resort fallback has nothing left that can fail
_INTERNAL_SERVER_ERROR_BODY = json.dumps(
    {
        "status": "error",
        "error_code": "INTERNAL_ERROR",
        "message": "Internal server error",
        "details": {},
    }
)


def create_error_response(
    error_code: str,
    message: str,
    status_code: int,
    details: dict[str, Any] | None = None,
    correlation_id: str | None = None,
    headers: dict[str, str] | None = None,
) -> Response:
    """
    Create standardized error response.

    Args:
        error_code: Machine-readable error code
        message: Human-readable error message
        status_code: HTTP status code
        details: Additional error details
        correlation_id: Request correlation ID for tracing
        headers: Extra response headers

    Returns:
        Response with error information
    """
    content: dict[str, Any] = {
        "status": "error",
        "error_code": error_code,
        "message": message,
        "details": details or {},
    }

    if correlation_id:
        content["correlation_id"] = correlation_id

    return Response(status_code=status_code, headers=headers, body=content)


def internal_server_error(correlation_id: str | None = None) -> dict[str, Any]:
    """
    Hardcoded 500 result used when error handling itself fails.

    Args:
        correlation_id: Request correlation ID, echoed as X-Request-ID

    Returns:
        Wire-format result
    """
    headers = {"Content-Type": "application/json"}
    if correlation_id:
        headers["X-Request-ID"] = correlation_id
    return {
        "statusCode": 500,
        "headers": headers,
        "body": _INTERNAL_SERVER_ERROR_BODY,
    }


async def not_found_handler(request: Request) -> Response:
    """Catch-all handler for paths that match no route."""
    return create_error_response(
        error_code="NOT_FOUND",
        message="Not found",
        status_code=404,
        details={"path": request.path},
        correlation_id=request.correlation_id,
    )


def method_not_allowed(request: Request, allowed: list[str]) -> Response:
    """
    Response for a matched path with no handler for the request method.

    Args:
        request: The request
        allowed: Methods the matched route accepts

    Returns:
        405 Response with an Allow header
    """
    return create_error_response(
        error_code="METHOD_NOT_ALLOWED",
        message="Method not allowed",
        status_code=405,
        details={"method": request.method, "allowed_methods": allowed},
        correlation_id=request.correlation_id,
        headers={"Allow": ", ".join(allowed)},
    )


def validation_error_response(request: Request, exc: RequestValidationError) -> Response:
    """
    Format request schema validation errors into actionable messages.

    Args:
        request: The request that failed validation
        exc: RequestValidationError wrapping pydantic error entries

    Returns:
        400 Response with validation error details
    """
    details: dict[str, Any] = {"validation_errors": []}
    error_messages = []

    for error in exc.errors():
        field_parts = [str(loc) for loc in error.get("loc", ())]
        field = ".".join(field_parts) if field_parts else "body"

        msg = error.get("msg", "Invalid value")
        error_type = error.get("type", "value_error")

        if error_type == "missing":
            msg = "Field is required"

        details["validation_errors"].append(
            {"field": field, "message": msg, "type": error_type}
        )
        error_messages.append(f"{field}: {msg}")

    summary = error_messages[0] if error_messages else exc.message
    if len(error_messages) > 1:
        summary += f" (and {len(error_messages) - 1} more errors)"

    return create_error_response(
        error_code=exc.error_code,
        message=summary,
        status_code=exc.status_code,
        details=details,
        correlation_id=request.correlation_id,
    )


async def default_error_handler(request: Request, exc: Exception) -> Response:
    """
    Handle exceptions raised while routing or running a handler.

    LambdaAPIError subclasses choose their own status code. Anything else
    is logged with its traceback and answered with a generic 500.

    Args:
        request: The request being processed
        exc: The exception raised

    Returns:
        Error Response
    """
    if isinstance(exc, RequestValidationError):
        return validation_error_response(request, exc)

    if isinstance(exc, LambdaAPIError):
        if exc.status_code >= 500:
            logger.error(
                f"{type(exc).__name__}: {exc.message}",
                exc_info=exc,
                extra={
                    "correlation_id": request.correlation_id,
                    "context": {"method": request.method, "path": request.path},
                },
            )
        headers = None
        if isinstance(exc, MethodNotAllowedError) and exc.allowed:
            headers = {"Allow": ", ".join(exc.allowed)}
        return create_error_response(
            error_code=exc.error_code,
            message=exc.message,
            status_code=exc.status_code,
            details=exc.details,
            correlation_id=request.correlation_id,
            headers=headers,
        )

    logger.error(
        f"Unhandled exception: {type(exc).__name__}: {exc}",
        exc_info=exc,
        extra={
            "correlation_id": request.correlation_id,
            "context": {
                "exception_type": type(exc).__name__,
                "method": request.method,
                "path": request.path,
            },
        },
    )

    return create_error_response(
        error_code="INTERNAL_ERROR",
        message="Internal server error",
        status_code=500,
        correlation_id=request.correlation_id,
    )
