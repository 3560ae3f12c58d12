"""Canonical request model handed to route handlers."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Request(BaseModel):
    """
    Simplified representation of an inbound HTTP request.

    Produced once per invocation by ``parse_request``. Query, headers,
    cookies and path parameters are always dicts, never None.

    Attributes:
        method: Uppercase HTTP method
        path: Normalized path: leading slash, lowercase, no trailing slash
        query: Query-string parameters that have a value
        headers: Header values under original-case and lowercased names
        cookies: Cookie values parsed from the Cookie header
        body: Parsed body (JSON value or form mapping) or the raw text
        path_parameters: Values bound from ``{name}`` route segments
        context: Free-form per-request values (raw event, correlation ID)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    method: str = Field(..., description="Uppercase HTTP method")
    path: str = Field(default="/", description="Normalized request path")
    query: dict[str, str] = Field(default_factory=dict)
    headers: dict[str, str] = Field(default_factory=dict)
    cookies: dict[str, str] = Field(default_factory=dict)
    body: Any = Field(default_factory=dict)
    path_parameters: dict[str, str] = Field(default_factory=dict)
    context: dict[str, Any] = Field(default_factory=dict)

    @property
    def correlation_id(self) -> str | None:
        """Correlation ID assigned by the dispatcher, if any."""
        return self.context.get("correlation_id")
