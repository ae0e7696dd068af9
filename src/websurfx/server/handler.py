"""ASGI handler: translates ASGI scope/messages to websurfx types.

The only component that touches raw ASGI for HTTP.  Builds a Request,
runs it through the middleware chain into the route table, and sends
the Response back through ASGI send().  Every exception raised while
handling is converted into a response for that request alone.
"""

import inspect
from collections.abc import Callable
from typing import Any

from websurfx._internal.asgi import Receive, Scope, Send
from websurfx.errors import HTTPError
from websurfx.http.request import Request
from websurfx.http.response import Response
from websurfx.middleware.protocol import Next
from websurfx.routing.route import RouteMatch
from websurfx.routing.router import Router
from websurfx.server.errors import handle_http_error, handle_internal_error
from websurfx.server.negotiation import negotiate
from websurfx.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    middleware: tuple[Callable[..., Any], ...],
    providers: dict[type, Callable[[], Any]] | None = None,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] == "websocket":
        await _reject_websocket(receive, send)
        return
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    async def dispatch(req: Request) -> Response:
        match = router.match(req.method, req.path)
        return await _invoke_handler(match, req, providers=providers)

    handler: Next = dispatch
    for mw in reversed(middleware):
        outer = handler

        async def make_next(req: Request, _mw: Any = mw, _next: Next = outer) -> Response:
            return await _mw(req, _next)

        handler = make_next

    try:
        response = await handler(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send, head=request.method == "HEAD")


async def _reject_websocket(receive: Receive, send: Send) -> None:
    """Close a websocket handshake; no route speaks websocket.

    Closing before ``websocket.accept`` makes the server answer the
    upgrade with 403 instead of dropping the connection.
    """
    message = await receive()
    if message["type"] == "websocket.connect":
        await send({"type": "websocket.close", "code": 1000})


async def _invoke_handler(
    match: RouteMatch,
    request: Request,
    *,
    providers: dict[type, Callable[[], Any]] | None = None,
) -> Response:
    """Call the matched handler (sync or async) and convert its return value."""
    handler = match.route.handler
    result = handler(**_build_handler_kwargs(handler, request, providers))
    if inspect.isawaitable(result):
        result = await result
    return negotiate(result)


def _build_handler_kwargs(
    handler: Callable[..., Any],
    request: Request,
    providers: dict[type, Callable[[], Any]] | None = None,
) -> dict[str, Any]:
    """Inspect the handler signature and build its kwargs.

    Resolution order:
    1. ``request`` parameter (by name or ``Request`` annotation)
    2. Shared state registered with ``App.provide()`` (by annotation)
    """
    sig = inspect.signature(handler, eval_str=True)
    kwargs: dict[str, Any] = {}

    for name, param in sig.parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif (
            providers
            and param.annotation is not inspect.Parameter.empty
            and param.annotation in providers
        ):
            kwargs[name] = providers[param.annotation]()

    return kwargs
