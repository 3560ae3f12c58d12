"""Tests for the local server CLI."""

from unittest.mock import patch

import pytest

from scripts.run_local import load_target, main, resolve_handler


class TestLoadTarget:
    """Tests for load_target."""

    def test_loads_attribute(self) -> None:
        from lambda_api.routes.status import default_routes

        assert load_target("lambda_api.routes.status:default_routes") is default_routes

    @pytest.mark.parametrize("target", ["lambda_api.routes.status", ":routes", "module:"])
    def test_rejects_malformed_target(self, target: str) -> None:
        with pytest.raises(ValueError):
            load_target(target)

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            load_target("lambda_api.routes.status:nothing_here")


class TestResolveHandler:
    """Tests for resolve_handler."""

    def test_route_table_becomes_handler(self) -> None:
        handler = resolve_handler({"/ping": {"GET": lambda request: None}})
        assert callable(handler)

    def test_callable_returned_as_is(self) -> None:
        def handler(event: dict, context: object) -> dict:
            return {}

        assert resolve_handler(handler) is handler

    def test_rejects_other_values(self) -> None:
        with pytest.raises(TypeError):
            resolve_handler(42)


def test_main_serves_target() -> None:
    argv = ["run_local.py", "lambda_api.lambda_handler:lambda_handler", "--port", "8123"]

    with patch("sys.argv", argv), patch(
        "scripts.run_local.configure_logging"
    ), patch("scripts.run_local.run_local") as mock_run:
        main()

    args, kwargs = mock_run.call_args
    assert callable(args[0])
    assert kwargs == {"host": "127.0.0.1", "port": 8123}


def test_main_exits_on_bad_target() -> None:
    with patch("sys.argv", ["run_local.py", "not-a-target"]), patch(
        "scripts.run_local.configure_logging"
    ):
        with pytest.raises(SystemExit) as exc_info:
            main()

    assert exc_info.value.code == 1
