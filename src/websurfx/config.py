"""Server configuration.

ServerConfig is a frozen dataclass, immutable after creation. The port is
the only value taken from the command line; everything else describes the
on-disk layout of the ``public/`` tree.
"""

from dataclasses import dataclass
from pathlib import Path

from websurfx.errors import InvalidPortFormat, PortOutOfRange

PORT_RANGE: tuple[int, int] = (1024, 65535)
DEFAULT_PORT = "8080"


def validate_port(value: str = DEFAULT_PORT) -> int:
    """Parse *value* as a port number in ``PORT_RANGE`` (inclusive).

    Accepts ASCII digits with at most one leading ``+``.

    Raises:
        InvalidPortFormat: *value* is not an unsigned integer.
        PortOutOfRange: *value* parsed but lies outside ``PORT_RANGE``.
    """
    digits = value.removeprefix("+")
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidPortFormat(value, PORT_RANGE)
    port = int(digits)
    low, high = PORT_RANGE
    if not low <= port <= high:
        raise PortOutOfRange(port, PORT_RANGE)
    return port


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Server configuration. Immutable after creation.

    Usage::

        config = ServerConfig(port=validate_port("3000"))
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    workers: int = 0  # 0 = let pounce pick from CPU count
    log_level: str = "info"

    # Templates
    template_dir: str | Path = "public/templates"
    template_extension: str = ".html"

    # Static mounts
    static_dir: str | Path = "public/static"
    static_url: str = "/static"
    images_dir: str | Path = "public/images"
    images_url: str = "/images"

    robots_file: str | Path = "public/robots.txt"

    def __post_init__(self) -> None:
        low, high = PORT_RANGE
        if not low <= self.port <= high:
            raise PortOutOfRange(self.port, PORT_RANGE)
