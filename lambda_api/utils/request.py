"""
Request normalization.

Converts an API Gateway proxy event into the canonical Request model.
All functions here are pure and never raise on malformed input.
"""

import base64
import binascii
import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl

from lambda_api.logging.config import get_logger
from lambda_api.models.request import Request
from lambda_api.utils.cookies import parse_cookie
from lambda_api.utils.headers import get_header, standard_headers

logger = get_logger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def standard_path(path: str | None) -> str:
    """
    Normalize a request path.

    Ensures the path is lowercased, always has a single leading slash, never
    has a trailing slash and contains no empty segments.

    Args:
        path: Raw path from the event

    Returns:
        Normalized path, at minimum ``/``
    """
    segments = [segment for segment in (path or "").split("/") if segment]
    return "/" + "/".join(segments).lower()


def standard_query_parameters(query: Mapping[str, str | None] | None) -> dict[str, str]:
    """
    Keep only query-string parameters that have a value.

    Args:
        query: Raw queryStringParameters from the event (may be None)

    Returns:
        Dict of non-empty parameter values
    """
    if not query:
        return {}
    return {
        name: value
        for name, value in query.items()
        if isinstance(value, str) and value
    }


def _media_type(content_type: str | None) -> str:
    """Strip parameters (e.g. charset) from a Content-Type value."""
    return (content_type or "").split(";", 1)[0].strip().lower()


def parse_body(
    body: str | None,
    is_base64_encoded: bool = False,
    content_type: str | None = "application/json",
) -> Any:
    """
    Parse the request body.

    Form-encoded bodies are parsed into a flat dict, anything else is
    parsed as JSON. If parsing fails the decoded text is returned as is.

    Args:
        body: Raw body from the event
        is_base64_encoded: Whether the body is base64 encoded
        content_type: Content-Type header value

    Returns:
        Parsed body, the raw text if it could not be parsed, or ``{}`` if
        there is no body
    """
    if not body:
        return {}

    content = body
    if is_base64_encoded:
        try:
            # Line-wrapped (MIME style) base64 is valid
            encoded = "".join(body.split())
            content = base64.b64decode(encoded, validate=True).decode("utf-8", errors="replace")
        except (binascii.Error, ValueError) as exc:
            logger.warning(
                "Error decoding base64 request body",
                extra={"context": {"error": str(exc)}},
            )
            return body

    try:
        if _media_type(content_type) == FORM_CONTENT_TYPE:
            return dict(parse_qsl(content, keep_blank_values=True))
        return json.loads(content)
    except (ValueError, RecursionError) as exc:
        logger.warning(
            "Error parsing request body",
            extra={"context": {"error": str(exc), "content_type": content_type}},
        )

    # Fall back to the raw body
    return content


def parse_request(event: Mapping[str, Any]) -> Request:
    """
    Build a Request from an API Gateway proxy event.

    Path parameters are left empty; they are filled in by route matching.

    Args:
        event: API Gateway proxy event

    Returns:
        Normalized Request
    """
    headers = event.get("headers") or {}
    return Request(
        method=str(event.get("httpMethod") or "").upper(),
        path=standard_path(event.get("path")),
        query=standard_query_parameters(event.get("queryStringParameters")),
        headers=standard_headers(headers),
        cookies=parse_cookie(headers),
        body=parse_body(
            event.get("body"),
            bool(event.get("isBase64Encoded")),
            get_header("Content-Type", headers),
        ),
        path_parameters={},
        context={"event": event},
    )
