"""Rendering of handler Responses into the API Gateway proxy result shape."""

from typing import Any

from pydantic import TypeAdapter

from lambda_api.models.response import Response
from lambda_api.utils.cookies import build_cookie
from lambda_api.utils.headers import get_header, set_header

_JSON = TypeAdapter(Any)


def serialize_body(body: Any) -> str:
    """
    Serialize a non-string body to compact JSON.

    Pydantic models, dataclasses, datetimes and UUIDs are supported.

    Args:
        body: Response body

    Returns:
        JSON text
    """
    return _JSON.dump_json(body).decode("utf-8")


def build_response(response: Response) -> dict[str, Any]:
    """
    Build the wire-format result for a Response.

    String bodies pass through (Content-Type defaults to text/plain), other
    bodies are JSON serialized (Content-Type defaults to application/json)
    and a missing body renders as an empty string. Cookies are emitted as
    separate Set-Cookie values under multiValueHeaders.

    Args:
        response: Response returned by a handler

    Returns:
        Dict with statusCode, headers, body and, when cookies are set,
        multiValueHeaders
    """
    headers: dict[str, str] = dict(response.headers or {})

    if isinstance(response.body, str):
        body = response.body
        if not get_header("Content-Type", headers):
            set_header("Content-Type", "text/plain", headers)
    elif response.body is not None:
        body = serialize_body(response.body)
        if not get_header("Content-Type", headers):
            set_header("Content-Type", "application/json", headers)
    else:
        body = ""

    result: dict[str, Any] = {
        "statusCode": response.status_code,
        "headers": headers,
        "body": body,
    }

    # A single header cannot carry multiple cookies in the proxy result
    cookies = build_cookie(response.cookies)
    if cookies:
        result["multiValueHeaders"] = {"Set-Cookie": cookies}

    return result
