"""Tests for rendering Responses into proxy results."""

import json
from datetime import UTC, datetime

from pydantic import BaseModel

from lambda_api.models.response import Response
from lambda_api.utils.response import build_response


class Widget(BaseModel):
    name: str
    created_at: datetime


def test_string_body_passes_through() -> None:
    """Test that a string body is sent verbatim as text/plain."""
    result = build_response(Response(body="hello"))

    assert result["statusCode"] == 200
    assert result["body"] == "hello"
    assert result["headers"]["Content-Type"] == "text/plain"


def test_string_body_keeps_existing_content_type() -> None:
    """Test that a handler-set content type is not overridden."""
    result = build_response(Response(body="<p>hi</p>", headers={"content-type": "text/html"}))

    assert result["headers"] == {"content-type": "text/html"}


def test_object_body_is_json() -> None:
    """Test that a non-string body is JSON serialized and round-trips."""
    result = build_response(Response(status_code=201, body={"x": 1}))

    assert result["statusCode"] == 201
    assert json.loads(result["body"]) == {"x": 1}
    assert result["headers"]["Content-Type"] == "application/json"


def test_list_body_is_json() -> None:
    result = build_response(Response(body=[1, "two", None]))
    assert json.loads(result["body"]) == [1, "two", None]


def test_model_body_is_json() -> None:
    """Test that pydantic models and datetimes are serialized."""
    widget = Widget(name="gear", created_at=datetime(2025, 1, 2, tzinfo=UTC))

    result = build_response(Response(body=widget))

    assert json.loads(result["body"]) == {
        "name": "gear",
        "created_at": "2025-01-02T00:00:00Z",
    }


def test_no_body() -> None:
    """Test that a missing body renders as an empty string."""
    result = build_response(Response(status_code=204))

    assert result["body"] == ""
    assert result["headers"] == {}
    assert "multiValueHeaders" not in result


def test_cookies_go_to_multi_value_headers() -> None:
    """Test that each cookie gets its own Set-Cookie value."""
    result = build_response(Response(cookies={"a": "1", "b": ""}))

    set_cookies = result["multiValueHeaders"]["Set-Cookie"]
    assert len(set_cookies) == 2
    assert set_cookies[0].startswith("a=1; Max-Age=31536000")
    assert set_cookies[1].startswith("b=; Expires=")


def test_status_code_alias() -> None:
    """Test that statusCode is accepted when coercing a mapping."""
    result = build_response(Response.coerce({"statusCode": 202, "body": "ok"}))
    assert result["statusCode"] == 202
