"""websurfx CLI: start the server.

Entry point registered as ``websurfx`` in ``pyproject.toml``::

    [project.scripts]
    websurfx = "websurfx.cli:main"
"""

import argparse

from websurfx import __version__
from websurfx.config import DEFAULT_PORT, PORT_RANGE, validate_port
from websurfx.errors import ConfigurationError


def _port(value: str) -> int:
    """argparse ``type=`` adapter for ``validate_port``."""
    try:
        return validate_port(value)
    except ConfigurationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="websurfx",
        description="Websurfx server application",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=_port,
        default=DEFAULT_PORT,
        help=(
            f"port number in range [{PORT_RANGE[0]}-{PORT_RANGE[1]}] "
            f"to launch the server on (default: {DEFAULT_PORT})"
        ),
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``websurfx`` command."""
    args = build_parser().parse_args(argv)

    from websurfx.cli._run import run_server

    run_server(args)
