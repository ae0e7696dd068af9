"""Listener: binds the address and runs the app under pounce.

pounce owns the accept loop, per-connection concurrency, signal handling
and graceful drain on shutdown.  This module only checks the address up
front, so a port already in use fails fast as a ``BindError`` instead of
surfacing from deep inside the server.
"""

from __future__ import annotations

import contextlib
import logging
import socket
from typing import TYPE_CHECKING

from websurfx.errors import BindError

if TYPE_CHECKING:
    from websurfx.app import App

logger = logging.getLogger("websurfx.server")


def ensure_bindable(host: str, port: int) -> None:
    """Raise ``BindError`` if ``host:port`` cannot be bound right now."""
    with contextlib.closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, port))
        except OSError as exc:
            raise BindError(host, port, exc.strerror or str(exc)) from exc


def run_server(
    app: App,
    host: str,
    port: int,
    *,
    workers: int = 0,
    log_level: str = "info",
) -> None:
    """Serve *app* on ``host:port`` until pounce is told to stop.

    Args:
        app: The assembled websurfx App (an ASGI callable).
        host: Bind address.
        port: Bind port.
        workers: Worker count (0 = auto-detect from CPU count).
        log_level: pounce's own log level.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        log_level=log_level,
    )
    server = Server(config, app)
    try:
        server.run()
    except OSError as exc:
        raise BindError(host, port, exc.strerror or str(exc)) from exc
