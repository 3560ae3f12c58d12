"""Shared fixtures: API Gateway events and Lambda contexts."""

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest


def build_event(
    path: str = "/",
    method: str = "GET",
    headers: dict[str, str | None] | None = None,
    query: dict[str, str | None] | None = None,
    body: str | None = None,
    is_base64_encoded: bool = False,
    request_id: str = "",
) -> dict[str, Any]:
    """Build a minimal API Gateway proxy event."""
    return {
        "body": body,
        "headers": headers or {},
        "multiValueHeaders": {},
        "httpMethod": method,
        "isBase64Encoded": is_base64_encoded,
        "path": path,
        "pathParameters": None,
        "queryStringParameters": query,
        "multiValueQueryStringParameters": None,
        "stageVariables": None,
        "resource": "?",
        "requestContext": {
            "httpMethod": method,
            "path": path,
            "requestId": request_id,
            "stage": "test",
        },
    }


@pytest.fixture
def make_event() -> Callable[..., dict[str, Any]]:
    """Factory for API Gateway proxy events."""
    return build_event


@pytest.fixture
def context() -> SimpleNamespace:
    """Lambda context stand-in."""
    return SimpleNamespace(
        function_name="test-function",
        function_version="$LATEST",
        aws_request_id="test-request-id",
    )
