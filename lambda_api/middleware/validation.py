"""Request and response schema validation for route handlers."""

from pydantic import ValidationError

from lambda_api.exceptions import RequestValidationError, ResponseValidationError
from lambda_api.models.request import Request
from lambda_api.models.response import Response
from lambda_api.models.route import Handler


def validate_request(handler: Handler, request: Request) -> None:
    """
    Validate the request body against the handler's request schema.

    On success the body is replaced with the validated model instance.

    Args:
        handler: Handler about to be invoked
        request: Request to validate

    Raises:
        RequestValidationError: If the body does not match the schema
    """
    if handler.request_schema is None:
        return

    try:
        request.body = handler.request_schema.model_validate(request.body)
    except ValidationError as exc:
        raise RequestValidationError(errors=exc.errors(include_url=False)) from exc


def validate_response(handler: Handler, response: Response) -> None:
    """
    Validate the response body against the handler's response schema.

    Args:
        handler: Handler that produced the response
        response: Response to validate

    Raises:
        ResponseValidationError: If the body does not match the schema
    """
    schema = handler.response_schema
    if schema is None or isinstance(response.body, schema):
        return

    try:
        schema.model_validate(response.body)
    except ValidationError as exc:
        raise ResponseValidationError(errors=exc.errors(include_url=False)) from exc
