"""Cross-cutting request processing: logging and schema validation."""

from lambda_api.middleware.logging import (
    get_or_generate_correlation_id,
    log_invocation,
    log_request_complete,
    log_request_error,
    log_request_start,
)
from lambda_api.middleware.validation import validate_request, validate_response

__all__ = [
    "get_or_generate_correlation_id",
    "log_invocation",
    "log_request_complete",
    "log_request_error",
    "log_request_start",
    "validate_request",
    "validate_response",
]
