"""Tests for the default /ping route."""

import pytest

from lambda_api.models import Request
from lambda_api.routes.status import default_routes, ping


@pytest.mark.asyncio
async def test_ping_returns_ok() -> None:
    response = await ping(Request(method="GET", path="/ping"))

    assert response.status_code == 200
    assert response.body["status"] == "ok"
    assert "version" in response.body


@pytest.mark.asyncio
async def test_uptime_is_non_negative_integer() -> None:
    response = await ping(Request(method="GET", path="/ping"))

    assert isinstance(response.body["uptime_seconds"], int)
    assert response.body["uptime_seconds"] >= 0


def test_default_routes() -> None:
    assert default_routes() == {"/ping": {"GET": ping}}
