"""Case-insensitive access to header mappings."""

from collections.abc import Mapping, MutableMapping


def standard_headers(headers: Mapping[str, str | None] | None) -> dict[str, str]:
    """
    Keep headers that have a value, under both original and lowercased names.

    Args:
        headers: Raw header mapping from the event

    Returns:
        Dict with each non-empty header stored twice, e.g.
        ``{"Content-Type": v, "content-type": v}``
    """
    result: dict[str, str] = {}
    for name, value in (headers or {}).items():
        if isinstance(value, str) and value:
            result[name] = value
            result[name.lower()] = value
    return result


def get_header(name: str, headers: Mapping[str, str | None] | None) -> str | None:
    """
    Case-insensitive header lookup.

    Args:
        name: Header name in any case
        headers: Header mapping (may be None)

    Returns:
        The header value, or None if the header is not set
    """
    if not headers:
        return None

    # Exact match
    value = headers.get(name)
    if value:
        return value

    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered and candidate:
            return candidate
    return None


def set_header(name: str, value: str, headers: MutableMapping[str, str] | None) -> None:
    """
    Case-insensitive header update.

    Every existing key matching ``name`` case-insensitively is updated in
    place; if none exists the header is added under ``name`` as given.

    Args:
        name: Header name in any case
        value: Header value
        headers: Header mapping to update (ignored if None)
    """
    if headers is None:
        return
    lowered = name.lower()
    matched = False
    for key in list(headers.keys()):
        if key.lower() == lowered:
            headers[key] = value
            matched = True
    if not matched:
        headers[name] = value
