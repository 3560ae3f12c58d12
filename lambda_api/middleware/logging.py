"""Request logging helpers with correlation ID support."""

import uuid
from typing import Any

from lambda_api.logging.config import get_logger
from lambda_api.models.request import Request

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Request-ID"


def get_or_generate_correlation_id(request: Request) -> str:
    """
    Extract or generate a correlation ID for the request.

    Uses the X-Request-ID header, then the API Gateway request ID from the
    raw event, then a new UUID.

    Args:
        request: The normalized request

    Returns:
        The correlation ID
    """
    header = request.headers.get(CORRELATION_HEADER.lower())
    if header:
        return header

    event = request.context.get("event") or {}
    request_context = event.get("requestContext") or {}
    request_id = request_context.get("requestId")
    if isinstance(request_id, str) and request_id:
        return request_id

    return str(uuid.uuid4())


def log_invocation(context: Any, version: str | None) -> None:
    """
    Log the executing function's identity and version.

    Args:
        context: Lambda context object
        version: Deployed version (commit hash)
    """
    logger.info(
        f"Executing {getattr(context, 'function_name', None)} version: {version}",
        extra={
            "context": {
                "function_name": getattr(context, "function_name", None),
                "function_version": getattr(context, "function_version", None),
                "aws_request_id": getattr(context, "aws_request_id", None),
                "commit_hash": version,
            }
        },
    )


def log_request_start(request: Request) -> None:
    """
    Log the start of a request.

    Args:
        request: The incoming request
    """
    logger.info(
        "Request started",
        extra={
            "correlation_id": request.correlation_id,
            "context": {
                "method": request.method,
                "path": request.path,
                "query_params": request.query,
            },
        },
    )


def log_request_error(request: Request, exc: Exception) -> None:
    """
    Log a failure of the error handler itself.

    Args:
        request: The incoming request
        exc: The exception raised by the error handler
    """
    logger.error(
        "Error handler failed with exception",
        exc_info=exc,
        extra={
            "correlation_id": request.correlation_id,
            "context": {
                "method": request.method,
                "path": request.path,
            },
        },
    )


def log_request_complete(
    request: Request, status_code: int, elapsed_ms: float
) -> None:
    """
    Log the completion of a request.

    Args:
        request: The incoming request
        status_code: Status code of the result
        elapsed_ms: Time elapsed during request processing
    """
    logger.info(
        "Request completed",
        extra={
            "correlation_id": request.correlation_id,
            "context": {
                "method": request.method,
                "path": request.path,
                "status_code": status_code,
                "response_time_ms": round(elapsed_ms, 2),
            },
        },
    )
