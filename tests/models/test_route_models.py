"""Tests for route table and response models."""

import pytest
from pydantic import BaseModel, ValidationError

from lambda_api.models import HTTP_METHODS, Handler, Request, Response, Route, define_handler


async def get_handler(request: Request) -> Response:
    return Response()


def post_handler(request: Request) -> Response:
    return Response()


class Schema(BaseModel):
    value: int


class TestRoute:
    """Tests for Route."""

    def test_coerce_mapping_of_callables(self) -> None:
        route = Route.coerce({"GET": get_handler, "post": post_handler})

        assert route.handler_for("GET").handler is get_handler
        assert route.handler_for("post").handler is post_handler
        assert route.handler_for("DELETE") is None

    def test_coerce_returns_route_unchanged(self) -> None:
        route = Route(GET=Handler(handler=get_handler))
        assert Route.coerce(route) is route

    def test_handler_with_schemas(self) -> None:
        handler = define_handler(get_handler, request_schema=Schema, response_schema=Schema)
        route = Route.coerce({"PUT": handler})

        assert route.handler_for("PUT") is handler
        assert route.PUT.request_schema is Schema

    def test_unknown_method_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Route.coerce({"FETCH": get_handler})

    def test_handler_for_unknown_method(self) -> None:
        route = Route.coerce({"GET": get_handler})
        assert route.handler_for("BREW") is None

    def test_allowed_methods(self) -> None:
        route = Route.coerce({"POST": post_handler, "GET": get_handler})
        assert route.allowed_methods() == ["GET", "POST"]

    def test_empty_route_allows_nothing(self) -> None:
        route = Route.coerce({})
        assert route.allowed_methods() == []
        assert all(route.handler_for(method) is None for method in HTTP_METHODS)


class TestResponseCoerce:
    """Tests for Response.coerce."""

    def test_none(self) -> None:
        response = Response.coerce(None)
        assert response.status_code == 200
        assert response.body is None

    def test_response_instance(self) -> None:
        response = Response(status_code=204)
        assert Response.coerce(response) is response

    def test_mapping_with_status_code_alias(self) -> None:
        response = Response.coerce({"statusCode": 201, "cookies": {"a": "1"}})
        assert response.status_code == 201
        assert response.cookies == {"a": "1"}

    def test_mapping_with_field_name(self) -> None:
        assert Response.coerce({"status_code": 202}).status_code == 202

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError):
            Response.coerce("just a string")
