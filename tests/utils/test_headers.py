"""Tests for header helpers."""

from lambda_api.utils.headers import get_header, set_header, standard_headers


def test_standard_headers_adds_lowercase_keys() -> None:
    """Test that headers are available under original and lowercase names."""
    headers = standard_headers({"Cookie": "1", "Content-Type": "2"})

    assert headers["Cookie"] == "1"
    assert headers["cookie"] == "1"
    assert headers["Content-Type"] == "2"
    assert headers["content-type"] == "2"


def test_standard_headers_drops_empty_values() -> None:
    """Test that headers without a value are dropped."""
    assert standard_headers({"a": "1", "b": "", "c": None}) == {"a": "1"}


def test_standard_headers_handles_none() -> None:
    assert standard_headers(None) == {}


def test_get_header_case_insensitive() -> None:
    """Test that a header value can be read case-insensitively."""
    headers = {"Content-Type": "text/plain"}
    assert get_header("content-type", headers) == "text/plain"
    assert get_header("CONTENT-TYPE", headers) == "text/plain"


def test_get_header_missing() -> None:
    """Test that a missing header returns None."""
    assert get_header("Origin", {"Content-Type": "text/plain"}) is None
    assert get_header("Origin", None) is None


def test_set_header_updates_existing_key() -> None:
    """Test that an existing header is updated in place."""
    headers = {"Content-Type": "text/plain"}
    set_header("content-type", "application/json", headers)

    assert get_header("Content-Type", headers) == "application/json"
    assert list(headers.keys()) == ["Content-Type"]


def test_set_header_adds_new_key() -> None:
    """Test that a new header is added under the given name."""
    headers: dict[str, str] = {}
    set_header("content-type", "application/json", headers)

    assert list(headers.keys()) == ["content-type"]
