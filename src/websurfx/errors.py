"""websurfx exception hierarchy.

Startup errors (configuration, templates, bind) abort the bootstrap
sequence before any request is served.  HTTP errors map to a status code
for a single request and never stop the server.
"""

from dataclasses import dataclass


class WebsurfxError(Exception):
    """Base for all websurfx-specific errors."""


class StartupError(WebsurfxError):
    """Fatal error raised while bringing the server up.

    The CLI maps these to a terse message and a non-zero exit status.
    """


class ConfigurationError(StartupError):
    """Raised when the server configuration is invalid."""


class InvalidPortFormat(ConfigurationError):
    """The port string is not an unsigned integer."""

    def __init__(self, value: str, bounds: tuple[int, int]) -> None:
        self.value = value
        self.bounds = bounds
        low, high = bounds
        super().__init__(f"`{value}` is not a valid port number (expected {low}-{high})")


class PortOutOfRange(ConfigurationError):
    """The port parsed but falls outside the allowed range."""

    def __init__(self, value: int, bounds: tuple[int, int]) -> None:
        self.value = value
        self.bounds = bounds
        low, high = bounds
        super().__init__(f"port {value} not in range {low}-{high}")


class TemplateInitializationError(StartupError):
    """The template directory could not be loaded completely."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class BindError(StartupError):
    """The listen address is unavailable (e.g. port already in use)."""

    def __init__(self, host: str, port: int, reason: str) -> None:
        self.host = host
        self.port = port
        super().__init__(f"cannot bind {host}:{port}: {reason}")


@dataclass(frozen=True, slots=True)
class HTTPError(WebsurfxError):
    """An error that maps directly to an HTTP status code.

    Raised by middleware or handlers. The ASGI handler catches these
    and turns them into a response for that request only.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404: the requested resource does not exist."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)
