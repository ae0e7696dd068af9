"""Tests for websurfx.http.request: frozen Request built from ASGI scope."""

import pytest

from websurfx.http.request import Request


def _make_scope(**overrides: object) -> dict[str, object]:
    """Build a minimal valid ASGI HTTP scope."""
    base: dict[str, object] = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/",
        "raw_path": b"/",
        "query_string": b"",
        "root_path": "",
        "headers": [],
        "server": ("localhost", 8080),
        "client": ("127.0.0.1", 54321),
    }
    base.update(overrides)
    return base


class TestRequestFromASGI:
    def test_basic_fields(self) -> None:
        req = Request.from_asgi(_make_scope(method="POST", path="/search"))
        assert req.method == "POST"
        assert req.path == "/search"
        assert req.http_version == "1.1"
        assert req.client == ("127.0.0.1", 54321)

    def test_headers_and_query(self) -> None:
        scope = _make_scope(
            headers=[(b"user-agent", b"curl/8.5.0")],
            query_string=b"q=rust&page=2",
        )
        req = Request.from_asgi(scope)
        assert req.headers["User-Agent"] == "curl/8.5.0"
        assert req.query["q"] == "rust"
        assert req.query.get_int("page") == 2

    def test_url_includes_query(self) -> None:
        req = Request.from_asgi(_make_scope(path="/search", query_string=b"q=rust"))
        assert req.url == "/search?q=rust"

    def test_url_without_query(self) -> None:
        req = Request.from_asgi(_make_scope(path="/about"))
        assert req.url == "/about"

    def test_remote_addr(self) -> None:
        req = Request.from_asgi(_make_scope())
        assert req.remote_addr == "127.0.0.1:54321"

    def test_missing_client(self) -> None:
        scope = _make_scope()
        del scope["client"]
        req = Request.from_asgi(scope)
        assert req.client is None
        assert req.remote_addr == "-"

    def test_client_as_list(self) -> None:
        req = Request.from_asgi(_make_scope(client=["10.0.0.1", 4000]))
        assert req.client == ("10.0.0.1", 4000)

    def test_frozen(self) -> None:
        req = Request.from_asgi(_make_scope())
        with pytest.raises(AttributeError):
            req.path = "/other"  # type: ignore[misc]
