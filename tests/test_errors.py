"""Tests for websurfx.errors: hierarchy and messages."""

import pytest

from websurfx.errors import (
    BindError,
    ConfigurationError,
    HTTPError,
    InvalidPortFormat,
    NotFound,
    PortOutOfRange,
    StartupError,
    TemplateInitializationError,
    WebsurfxError,
)


class TestStartupErrors:
    @pytest.mark.parametrize(
        "exc",
        [
            InvalidPortFormat("abc", (1024, 65535)),
            PortOutOfRange(80, (1024, 65535)),
            TemplateInitializationError("broken"),
            BindError("127.0.0.1", 8080, "Address already in use"),
        ],
    )
    def test_all_are_startup_errors(self, exc: Exception) -> None:
        assert isinstance(exc, StartupError)
        assert isinstance(exc, WebsurfxError)

    def test_port_errors_are_configuration_errors(self) -> None:
        assert issubclass(InvalidPortFormat, ConfigurationError)
        assert issubclass(PortOutOfRange, ConfigurationError)

    def test_template_error_keeps_path(self) -> None:
        exc = TemplateInitializationError("failed", path="/srv/templates/index.html")
        assert exc.path == "/srv/templates/index.html"
        assert str(exc) == "failed"

    def test_bind_error_message(self) -> None:
        exc = BindError("0.0.0.0", 8080, "Address already in use")
        assert exc.host == "0.0.0.0"
        assert exc.port == 8080
        assert str(exc) == "cannot bind 0.0.0.0:8080: Address already in use"


class TestHTTPError:
    def test_status_and_detail(self) -> None:
        exc = HTTPError(status=418, detail="I'm a teapot")
        assert exc.status == 418
        assert str(exc) == "418: I'm a teapot"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=503)) == "503"

    def test_not_found(self) -> None:
        exc = NotFound()
        assert exc.status == 404
        assert exc.detail == "Not Found"
        assert isinstance(exc, HTTPError)

    def test_http_errors_are_not_startup_errors(self) -> None:
        assert not isinstance(NotFound(), StartupError)

    def test_raisable(self) -> None:
        with pytest.raises(HTTPError) as exc_info:
            raise NotFound("no such page")
        assert exc_info.value.detail == "no such page"
