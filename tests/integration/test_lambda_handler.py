"""Tests for the synchronous Lambda entry points."""

import json
from unittest.mock import patch

from lambda_api.lambda_handler import create_lambda_handler, lambda_handler
from lambda_api.models import Request, Response


async def hello(request: Request) -> Response:
    name = request.query.get("name", "world")
    return Response(body=f"Hello, {name}")


def test_create_lambda_handler(make_event, context) -> None:
    """Test that the created handler runs synchronously."""
    handler = create_lambda_handler({"/hello": {"GET": hello}})

    result = handler(make_event(path="/hello", query={"name": "Lambda"}), context)

    assert result["statusCode"] == 200
    assert result["body"] == "Hello, Lambda"
    assert result["headers"]["Content-Type"] == "text/plain"


def test_create_lambda_handler_catch_all(make_event, context) -> None:
    def catch_all(request: Request) -> Response:
        return Response(status_code=301, headers={"Location": "/hello"})

    handler = create_lambda_handler({"/hello": {"GET": hello}}, catch_all=catch_all)

    result = handler(make_event(path="/old"), context)

    assert result["statusCode"] == 301
    assert result["headers"]["Location"] == "/hello"


def test_default_lambda_handler(make_event, context) -> None:
    """Test that the module-level handler serves /ping."""
    result = lambda_handler(make_event(path="/ping"), context)

    assert result["statusCode"] == 200
    data = json.loads(result["body"])
    assert data["status"] == "ok"
    assert isinstance(data["uptime_seconds"], int)


def test_create_lambda_handler_checks_route_table() -> None:
    with patch("lambda_api.routing.logger") as mock_logger:
        create_lambda_handler({"/Hello/{name}": {"GET": hello}})

    assert mock_logger.warning.called
