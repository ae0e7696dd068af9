"""websurfx application class.

Mutable during assembly (routes, static mounts, middleware, providers).
Frozen on the first ASGI call; after that the route table, middleware
chain and provided state never change.
"""

import logging
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

from websurfx._internal.asgi import Receive, Scope, Send
from websurfx.config import ServerConfig
from websurfx.middleware.protocol import Middleware
from websurfx.middleware.static import StaticFiles
from websurfx.routing.route import Route
from websurfx.routing.router import Router
from websurfx.server.handler import handle_request

type Handler = Callable[..., Any]

logger = logging.getLogger("websurfx.server")


class App:
    """The websurfx ASGI application.

    Usage::

        app = App(config)
        app.provide(TemplateRegistry, lambda: templates)
        app.add_middleware(AccessLog())
        app.mount("/static", config.static_dir)
        app.add_route("/", index, name="index")
        app.set_fallback(not_found)

    Thread safety:
        Assembly is single-threaded.  The freeze transition uses a Lock
        with a double check so exactly one pounce worker compiles the
        app, even when several receive their first request at once.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_middleware",
        "_middleware_list",
        "_providers",
        "_router",
        "config",
    )

    def __init__(self, config: ServerConfig | None = None) -> None:
        self.config: ServerConfig = config or ServerConfig()
        self._router = Router()
        self._middleware_list: list[Middleware] = []
        self._middleware: tuple[Callable[..., Any], ...] = ()
        self._providers: dict[type, Callable[[], Any]] = {}
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Assembly --

    def add_route(
        self,
        path: str,
        handler: Handler,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> None:
        """Bind *path* to *handler*. Routes match in registration order."""
        self._check_not_frozen()
        route_methods = frozenset(m.upper() for m in (methods or ["GET"]))
        self._router.add(Route(path=path, handler=handler, methods=route_methods, name=name))

    def set_fallback(self, handler: Handler) -> None:
        """Register the handler for every request no route matched."""
        self._check_not_frozen()
        self._router.set_fallback(handler)

    def add_middleware(self, middleware: Middleware) -> None:
        """Append a middleware. The first one added is the outermost."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    def mount(self, prefix: str, directory: str | Path, *, listing: bool = True) -> None:
        """Serve *directory* under *prefix* (with directory listings)."""
        self.add_middleware(StaticFiles(directory, prefix, listing=listing))

    def provide(self, annotation: type, factory: Callable[[], Any]) -> None:
        """Register shared state for handler injection.

        Any handler parameter annotated with *annotation* receives
        ``factory()``::

            app.provide(TemplateRegistry, lambda: templates)

            def index(templates: TemplateRegistry) -> str: ...
        """
        self._check_not_frozen()
        self._providers[annotation] = factory

    @property
    def router(self) -> Router:
        return self._router

    @property
    def middleware(self) -> tuple[Callable[..., Any], ...]:
        """The middleware chain, outermost first."""
        return self._middleware if self._frozen else tuple(self._middleware_list)

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            middleware=self._middleware,
            providers=self._providers or None,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup so a broken route table fails before
        the first request instead of during it.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                logger.info("started server on port %d", self.config.port)
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                logger.info("server on port %d shutting down", self.config.port)
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        self._router.compile()
        self._middleware = tuple(self._middleware_list)
        self._frozen = True

    def freeze(self) -> None:
        """Compile the route table and middleware chain now."""
        self._ensure_frozen()

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, mounts and middleware before running it."
            )
            raise RuntimeError(msg)
