"""End-to-end tests against the sample application's route table."""

import json
from types import SimpleNamespace

import pytest

from examples import sample_app


@pytest.fixture(autouse=True)
def clear_items():
    sample_app._items.clear()
    yield
    sample_app._items.clear()


def test_create_then_fetch_item(make_event, context: SimpleNamespace) -> None:
    created = sample_app.handler(
        make_event(
            "/items",
            "POST",
            headers={"Content-Type": "application/json"},
            body=json.dumps({"name": "widget", "quantity": 3}),
        ),
        context,
    )

    assert created["statusCode"] == 201
    item = json.loads(created["body"])
    assert item == {"item_id": "1", "name": "widget", "quantity": 3}

    fetched = sample_app.handler(make_event("/items/1"), context)

    assert fetched["statusCode"] == 200
    assert json.loads(fetched["body"]) == item


def test_invalid_item_rejected(make_event, context: SimpleNamespace) -> None:
    result = sample_app.handler(
        make_event("/items", "POST", body=json.dumps({"name": ""})),
        context,
    )

    assert result["statusCode"] == 400
    assert json.loads(result["body"])["error_code"] == "VALIDATION_ERROR"


def test_missing_item(make_event, context: SimpleNamespace) -> None:
    result = sample_app.handler(make_event("/items/99"), context)

    body = json.loads(result["body"])
    assert result["statusCode"] == 404
    assert body["details"] == {"item_id": "99"}


def test_logout_expires_session_cookie(make_event, context: SimpleNamespace) -> None:
    result = sample_app.handler(make_event("/session", "DELETE"), context)

    assert result["statusCode"] == 204
    [cookie] = result["multiValueHeaders"]["Set-Cookie"]
    assert cookie.startswith("session=;")
    assert "Expires=" in cookie
