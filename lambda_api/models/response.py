"""Response model returned by route handlers."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Response(BaseModel):
    """
    Response returned by a route handler.

    A ``str`` body is sent verbatim; any other body is serialized to JSON.
    A cookie set to ``""`` is expired on the client.

    Attributes:
        status_code: HTTP status code (``statusCode`` is accepted as an alias)
        headers: Response headers
        cookies: Cookies to set or, when blank, clear
        body: Response body
    """

    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    status_code: int = Field(default=200, alias="statusCode")
    headers: dict[str, str] | None = None
    cookies: dict[str, str] | None = None
    body: Any = None

    @classmethod
    def coerce(cls, value: Any) -> "Response":
        """
        Convert a handler's return value into a Response.

        Args:
            value: A Response, a mapping of Response fields, or None

        Returns:
            Response instance

        Raises:
            TypeError: If the value cannot be interpreted as a response
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.model_validate(dict(value))
        raise TypeError(
            f"Handler returned {type(value).__name__}, expected Response or mapping"
        )
