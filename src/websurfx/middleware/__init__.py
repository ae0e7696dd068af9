"""Middleware: protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    AccessLog -- one log line per request
    StaticFiles -- serve a directory under a URL prefix
"""

from websurfx.middleware.access_log import AccessLog
from websurfx.middleware.protocol import Middleware, Next
from websurfx.middleware.static import StaticFiles

__all__ = ["AccessLog", "Middleware", "Next", "StaticFiles"]
