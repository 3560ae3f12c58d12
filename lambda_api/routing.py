"""
Route matching.

Finds the route table entry for a normalized path. Rules are applied in
order and the first match wins:

1. Exact match on the path pattern
2. Case-insensitive match on the path pattern
3. Segment-wise match, where ``{name}`` segments bind path parameters and
   literal segments must be equal. Candidates are tried in table order, so
   overlapping patterns resolve to the first one declared.
"""

from collections.abc import Mapping
from typing import Any

from lambda_api.logging.config import get_logger
from lambda_api.models.route import RouteMatch

logger = get_logger(__name__)


def _is_parameter(segment: str) -> bool:
    return len(segment) >= 2 and segment.startswith("{") and segment.endswith("}")


def _match_segments(
    pattern_segments: list[str], path_segments: list[str]
) -> dict[str, str] | None:
    """
    Match path segments against pattern segments of the same length.

    Returns:
        Bound parameters, or None if a literal segment differs
    """
    params: dict[str, str] = {}
    for pattern_segment, path_segment in zip(pattern_segments, path_segments):
        if _is_parameter(pattern_segment):
            params[pattern_segment[1:-1]] = path_segment
        elif pattern_segment != path_segment:
            return None
    return params


def match_route(routes: Mapping[str, Any], path: str) -> RouteMatch:
    """
    Match a path against a route table.

    Args:
        routes: Route table keyed by path pattern
        path: Normalized request path

    Returns:
        RouteMatch with the matched route table entry and its bound path
        parameters; ``route`` is None if nothing matched
    """
    # Direct match
    if path in routes:
        return RouteMatch(route=routes[path], params={})

    # Case-insensitive match
    lowered = path.lower()
    for candidate, route in routes.items():
        if candidate.lower() == lowered:
            return RouteMatch(route=route, params={})

    # Path-parameter match
    path_segments = path.split("/")
    for candidate, route in routes.items():
        candidate_segments = candidate.split("/")
        if len(candidate_segments) != len(path_segments):
            continue
        params = _match_segments(candidate_segments, path_segments)
        if params is not None:
            return RouteMatch(route=route, params=params)

    return RouteMatch(route=None, params={})


def unreachable_patterns(routes: Mapping[str, Any]) -> list[str]:
    """
    Find parameter patterns that can never match a normalized path.

    Request paths are lowercased, so a ``{name}`` pattern with an
    uppercase literal segment never matches.

    Args:
        routes: Route table keyed by path pattern

    Returns:
        Offending patterns in table order
    """
    unreachable = []
    for candidate in routes:
        segments = candidate.split("/")
        if not any(_is_parameter(segment) for segment in segments):
            continue
        literals = [segment for segment in segments if not _is_parameter(segment)]
        if any(segment != segment.lower() for segment in literals):
            unreachable.append(candidate)
    return unreachable


def check_routes(routes: Mapping[str, Any]) -> None:
    """Log a warning for each route pattern that can never match."""
    for pattern in unreachable_patterns(routes):
        logger.warning(
            f"Route pattern {pattern} can never match: literal segments must be lowercase",
            extra={"context": {"pattern": pattern}},
        )
