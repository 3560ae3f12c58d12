"""Exception classes raised by route handlers and the dispatcher."""

from typing import Any


class LambdaAPIError(Exception):
    """Base exception for lambda-api.

    Route handlers raise subclasses of this to choose the status code of
    the error response rendered by the default error handler.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code
            error_code: Machine-readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}


class BadRequestError(LambdaAPIError):
    """Raised when the request cannot be processed (400)."""

    def __init__(
        self,
        message: str = "Bad request",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="BAD_REQUEST",
            details=details,
        )


class UnauthorizedError(LambdaAPIError):
    """Raised when authentication fails (401)."""

    def __init__(
        self,
        message: str = "Unauthorized",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="UNAUTHORIZED",
            details=details,
        )


class ForbiddenError(LambdaAPIError):
    """Raised when access is denied (403)."""

    def __init__(
        self,
        message: str = "Forbidden",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="FORBIDDEN",
            details=details,
        )


class NotFoundError(LambdaAPIError):
    """Raised when a resource is not found (404)."""

    def __init__(
        self,
        message: str = "Not found",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class MethodNotAllowedError(LambdaAPIError):
    """Raised when a path exists but does not accept the method (405)."""

    def __init__(
        self,
        message: str = "Method not allowed",
        allowed: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize MethodNotAllowedError.

        Args:
            message: Error message
            allowed: Methods the route does accept
            details: Additional error details
        """
        error_details = details or {}
        if allowed:
            error_details["allowed_methods"] = allowed
        super().__init__(
            message=message,
            status_code=405,
            error_code="METHOD_NOT_ALLOWED",
            details=error_details,
        )
        self.allowed = allowed or []


class RequestValidationError(LambdaAPIError):
    """Raised when a request body fails its handler's request schema (400)."""

    def __init__(
        self,
        errors: list[dict[str, Any]],
        message: str = "Invalid request data",
    ) -> None:
        """
        Initialize RequestValidationError.

        Args:
            errors: Error entries as produced by pydantic's ValidationError.errors()
            message: Error message
        """
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
        )
        self._errors = errors

    def errors(self) -> list[dict[str, Any]]:
        """Return the underlying validation error entries."""
        return self._errors


class ResponseValidationError(LambdaAPIError):
    """Raised when a handler's response body fails its response schema (500)."""

    def __init__(
        self,
        errors: list[dict[str, Any]],
        message: str = "Response failed validation",
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="RESPONSE_VALIDATION_ERROR",
        )
        self._errors = errors

    def errors(self) -> list[dict[str, Any]]:
        """Return the underlying validation error entries."""
        return self._errors
