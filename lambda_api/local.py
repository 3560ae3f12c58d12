"""
Local development server for Lambda API handlers.

Serves a Lambda handler over HTTP by converting each request into an API
Gateway proxy event and the handler's result back into an HTTP response.
"""

import base64
import inspect
import uuid
from collections.abc import Callable
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool

from lambda_api.config import settings
from lambda_api.logging.config import get_logger
from lambda_api.models.route import HTTP_METHODS

logger = get_logger(__name__)

TEXT_CONTENT_TYPES = ("text/", "application/json", "application/x-www-form-urlencoded")


class LocalContext:
    """Stand-in for the Lambda context object when running locally."""

    function_name = "local"
    function_version = "$LATEST"
    memory_limit_in_mb = 128

    def __init__(self) -> None:
        self.aws_request_id = str(uuid.uuid4())

    def get_remaining_time_in_millis(self) -> int:
        return 0


def _is_text(content_type: str | None) -> bool:
    if not content_type:
        return True
    return content_type.lower().startswith(TEXT_CONTENT_TYPES)


async def build_event(request: Request) -> dict[str, Any]:
    """
    Convert an HTTP request into an API Gateway proxy event.

    Args:
        request: Incoming FastAPI request

    Returns:
        API Gateway proxy event
    """
    headers: dict[str, str] = {}
    multi_value_headers: dict[str, list[str]] = {}
    for name, value in request.headers.items():
        headers[name] = value
        multi_value_headers.setdefault(name, []).append(value)

    query: dict[str, str] = {}
    multi_value_query: dict[str, list[str]] = {}
    for name, value in request.query_params.multi_items():
        query[name] = value
        multi_value_query.setdefault(name, []).append(value)

    raw_body = await request.body()
    is_base64_encoded = bool(raw_body) and not _is_text(request.headers.get("content-type"))
    if is_base64_encoded:
        body: str | None = base64.b64encode(raw_body).decode("ascii")
    else:
        body = raw_body.decode("utf-8", errors="replace") if raw_body else None

    return {
        "httpMethod": request.method,
        "path": request.url.path,
        "headers": headers,
        "multiValueHeaders": multi_value_headers,
        "queryStringParameters": query or None,
        "multiValueQueryStringParameters": multi_value_query or None,
        "pathParameters": None,
        "stageVariables": None,
        "body": body,
        "isBase64Encoded": is_base64_encoded,
        "resource": request.url.path,
        "requestContext": {
            "httpMethod": request.method,
            "path": request.url.path,
            "protocol": request.scope.get("http_version", "1.1"),
            "requestId": str(uuid.uuid4()),
            "stage": "local",
        },
    }


def build_http_response(result: dict[str, Any]) -> Response:
    """
    Convert an API Gateway proxy result into an HTTP response.

    Args:
        result: Result returned by the Lambda handler

    Returns:
        Response with every multiValueHeaders value sent as its own header
    """
    body = result.get("body") or ""
    content = base64.b64decode(body) if result.get("isBase64Encoded") else body

    response = Response(content=content, status_code=int(result.get("statusCode", 200)))
    for name, value in (result.get("headers") or {}).items():
        response.headers[name] = f"{value}"
    for name, values in (result.get("multiValueHeaders") or {}).items():
        for value in values:
            response.headers.append(name, f"{value}")
    return response


def create_local_app(handler: Callable[[dict, Any], Any]) -> FastAPI:
    """
    Create an ASGI app that serves a Lambda handler.

    Args:
        handler: Lambda handler taking (event, context); may be async

    Returns:
        FastAPI application with a single catch-all route
    """
    app = FastAPI(
        title=f"{settings.api_title} (local)",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.api_route("/{full_path:path}", methods=list(HTTP_METHODS))
    async def invoke_handler(request: Request) -> Response:
        event = await build_event(request)
        context = LocalContext()
        try:
            if inspect.iscoroutinefunction(handler):
                result = await handler(event, context)
            else:
                result = await run_in_threadpool(handler, event, context)
        except Exception as exc:
            logger.error(
                f"Handler raised: {type(exc).__name__}: {exc}",
                exc_info=exc,
                extra={"context": {"method": request.method, "path": request.url.path}},
            )
            return PlainTextResponse(f"{exc}", status_code=500)

        logger.info(
            f"{request.method} {request.url.path} {result.get('statusCode')}",
            extra={"context": {"status_code": result.get("statusCode")}},
        )
        return build_http_response(result)

    return app


def run_local(
    handler: Callable[[dict, Any], Any],
    host: str | None = None,
    port: int | None = None,
) -> None:
    """
    Serve a Lambda handler locally with uvicorn.

    Args:
        handler: Lambda handler taking (event, context)
        host: Interface to bind (default: settings.local_host)
        port: Port to listen on (default: settings.local_port)
    """
    host = host or settings.local_host
    port = port or settings.local_port
    logger.info(f"Lambda handler can be invoked at http://{host}:{port}")
    uvicorn.run(create_local_app(handler), host=host, port=port, log_config=None)
