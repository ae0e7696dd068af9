"""Request logging middleware.

One line per request on the ``websurfx.access`` logger::

    127.0.0.1:52044 "GET /search?q=rust HTTP/1.1" 200 5120 "-" "curl/8.5.0" 0.004213

Fields: client address, request line, status, body size, referer,
user agent, elapsed seconds.
"""

import logging
import time

from websurfx.errors import HTTPError
from websurfx.http.request import Request
from websurfx.http.response import Response
from websurfx.middleware.protocol import Next

logger = logging.getLogger("websurfx.access")


class AccessLog:
    """Log every request that passes through the pipeline.

    Register it first so it wraps the static mounts and the router.
    Failed requests are logged with the status the error pipeline will
    send (the HTTPError status, or 500) and the exception is re-raised.
    """

    __slots__ = ("_logger",)

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    async def __call__(self, request: Request, next: Next) -> Response:
        start = time.perf_counter()
        status = 500
        size = 0
        try:
            response = await next(request)
        except HTTPError as exc:
            status = exc.status
            raise
        else:
            status = response.status
            size = len(response.body_bytes)
            return response
        finally:
            self._log(request, status, size, time.perf_counter() - start)

    def _log(self, request: Request, status: int, size: int, elapsed: float) -> None:
        self._logger.info(
            '%s "%s %s HTTP/%s" %d %d "%s" "%s" %.6f',
            request.remote_addr,
            request.method,
            request.url,
            request.http_version,
            status,
            size,
            request.headers.get("referer", "-"),
            request.headers.get("user-agent", "-"),
            elapsed,
        )
