"""Tests for websurfx.server.negotiation: return value to Response."""

import pytest

from websurfx.http.response import Redirect, Response
from websurfx.server.negotiation import negotiate


class TestNegotiate:
    def test_response_passes_through(self) -> None:
        r = Response("ok", status=201)
        assert negotiate(r) is r

    def test_str_is_html(self) -> None:
        r = negotiate("<h1>Websurfx</h1>")
        assert r.status == 200
        assert r.content_type == "text/html; charset=utf-8"
        assert r.text == "<h1>Websurfx</h1>"

    def test_bytes_is_octet_stream(self) -> None:
        r = negotiate(b"\x00\x01")
        assert r.content_type == "application/octet-stream"
        assert r.body == b"\x00\x01"

    def test_redirect(self) -> None:
        r = negotiate(Redirect("/"))
        assert r.status == 302
        assert r.header("Location") == "/"

    def test_tuple_overrides_status(self) -> None:
        r = negotiate(("gone", 410))
        assert r.status == 410
        assert r.text == "gone"

    def test_nested_tuple_response(self) -> None:
        r = negotiate((Response("x", content_type="text/plain"), 202))
        assert r.status == 202
        assert r.content_type == "text/plain"

    @pytest.mark.parametrize("value", [None, 42, {"a": 1}, ["x"]])
    def test_unsupported_raises(self, value: object) -> None:
        with pytest.raises(TypeError, match="Cannot convert"):
            negotiate(value)
