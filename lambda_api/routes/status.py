"""Default health check route."""

import time

from lambda_api.config import settings
from lambda_api.models.request import Request
from lambda_api.models.response import Response

# Module-level variable to track cold start time
_start_time = time.time()


async def ping(request: Request) -> Response:
    """
    Health check endpoint for monitoring.

    Returns:
        Response with status, version, and uptime_seconds
    """
    return Response(
        status_code=200,
        body={
            "status": "ok",
            "version": settings.commit_hash,
            "uptime_seconds": int(time.time() - _start_time),
        },
    )


def default_routes() -> dict[str, dict]:
    """Route table used when no routes are supplied."""
    return {"/ping": {"GET": ping}}
