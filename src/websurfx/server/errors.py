"""Error handling pipeline for a single request.

Maps HTTPError exceptions and unexpected failures to Responses.  Nothing
here re-raises: a failing handler costs one request, never the server.
"""

import logging

from websurfx.errors import HTTPError
from websurfx.http.request import Request
from websurfx.http.response import Response

logger = logging.getLogger("websurfx.server")

_ERROR_PAGE = """\
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>{status} {title}</title></head>
<body><h1>{status} {title}</h1></body>
</html>
"""


def error_page(status: int, title: str) -> Response:
    """Minimal HTML error response."""
    return Response(body=_ERROR_PAGE.format(status=status, title=title), status=status)


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to its status response."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    response = error_page(exc.status, exc.detail or f"Error {exc.status}")
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Log an unexpected exception and answer 500."""
    logger.error(
        "500 %s %s: %s",
        request.method,
        request.path,
        exc,
        exc_info=exc,
    )
    return error_page(500, "Internal Server Error")
