"""Cookie header parsing and Set-Cookie serialization."""

import re
import time
from collections.abc import Mapping
from email.utils import formatdate
from urllib.parse import quote, unquote

from lambda_api.config import settings
from lambda_api.utils.headers import get_header

# RFC 6265 cookie-name, i.e. an RFC 7230 token
_COOKIE_NAME_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def parse_cookie(headers: Mapping[str, str | None] | None) -> dict[str, str]:
    """
    Parse the Cookie header into a name-value dict.

    Cookies with a blank value are dropped.

    Args:
        headers: Request headers (Cookie is looked up case-insensitively)

    Returns:
        Dict of cookie values, empty if there is no Cookie header
    """
    header = get_header("Cookie", headers)
    if not header:
        return {}

    cookies: dict[str, str] = {}
    for pair in header.split(";"):
        name, separator, value = pair.strip().partition("=")
        name = name.strip()
        if not separator or not name or name in cookies:
            continue
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        value = unquote(value)
        if value:
            cookies[name] = value
    return cookies


def serialize_cookie(
    name: str,
    value: str,
    max_age: int | None = None,
    expires: float | None = None,
    secure: bool = True,
    http_only: bool = True,
    same_site: str | None = "Strict",
) -> str:
    """
    Serialize a single Set-Cookie header value.

    Args:
        name: Cookie name
        value: Cookie value (percent-encoded on output)
        max_age: Max-Age in seconds
        expires: Expiry as a POSIX timestamp
        secure: Add the Secure attribute
        http_only: Add the HttpOnly attribute
        same_site: SameSite attribute value (omitted if None)

    Returns:
        Set-Cookie header value, e.g. ``a=1; Max-Age=31536000; HttpOnly; Secure; SameSite=Strict``

    Raises:
        ValueError: If the name is not a valid cookie name
    """
    if not _COOKIE_NAME_RE.fullmatch(name):
        raise ValueError(f"Invalid cookie name: {name!r}")

    parts = [f"{name}={quote(value, safe='!~*()')}"]
    if max_age is not None:
        parts.append(f"Max-Age={max_age}")
    if expires is not None:
        parts.append(f"Expires={formatdate(expires, usegmt=True)}")
    if http_only:
        parts.append("HttpOnly")
    if secure:
        parts.append("Secure")
    if same_site:
        parts.append(f"SameSite={same_site}")
    return "; ".join(parts)


def build_cookie(
    cookies: Mapping[str, str] | None,
    max_age: int | None = None,
    secure: bool | None = None,
    http_only: bool | None = None,
    same_site: str | None = None,
) -> list[str] | None:
    """
    Build Set-Cookie header values for a response's cookies.

    A cookie whose value is ``""`` is expired immediately; other values are
    set with the configured Max-Age. Attribute defaults come from settings.

    Args:
        cookies: Cookie name-value mapping from the Response
        max_age: Override for settings.cookie_max_age_seconds
        secure: Override for settings.cookie_secure
        http_only: Override for settings.cookie_http_only
        same_site: Override for settings.cookie_same_site

    Returns:
        List of Set-Cookie values, or None if no cookies were given
    """
    if cookies is None:
        return None

    max_age = settings.cookie_max_age_seconds if max_age is None else max_age
    secure = settings.cookie_secure if secure is None else secure
    http_only = settings.cookie_http_only if http_only is None else http_only
    same_site = settings.cookie_same_site if same_site is None else same_site

    header: list[str] = []
    for name, value in cookies.items():
        if value == "":
            # Explicitly blank: expire the cookie now
            header.append(
                serialize_cookie(
                    name,
                    "",
                    expires=time.time(),
                    secure=secure,
                    http_only=http_only,
                    same_site=same_site,
                )
            )
        elif value:
            header.append(
                serialize_cookie(
                    name,
                    value,
                    max_age=max_age,
                    secure=secure,
                    http_only=http_only,
                    same_site=same_site,
                )
            )
    return header
