"""Ordered route table with one unconditional fallback.

Routes are registered during setup and compiled into an immutable tuple
when the app freezes.  Matching walks the tuple in declaration order and
compares paths exactly; anything unmatched goes to the fallback.
"""

from collections.abc import Callable
from typing import Any

from websurfx.errors import ConfigurationError
from websurfx.routing.route import ANY_METHOD, Route, RouteMatch


class Router:
    """Compiled route table.

    Usage::

        router = Router()
        router.add(Route("/", index, frozenset({"GET"}), name="index"))
        router.set_fallback(not_found)
        router.compile()
        match = router.match("GET", "/")
    """

    __slots__ = ("_compiled", "_fallback", "_pending", "_routes")

    def __init__(self) -> None:
        self._pending: list[Route] = []
        self._routes: tuple[Route, ...] = ()
        self._fallback: Route | None = None
        self._compiled = False

    def _check_not_compiled(self) -> None:
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

    def add(self, route: Route) -> None:
        """Append a route. Must be called before compile()."""
        self._check_not_compiled()
        if not route.path.startswith("/"):
            msg = f"Route path {route.path!r} must start with '/'."
            raise ConfigurationError(msg)
        self._pending.append(route)

    def set_fallback(self, handler: Callable[..., Any], *, name: str = "not_found") -> None:
        """Register the handler used when no route matches."""
        self._check_not_compiled()
        self._fallback = Route(path="*", handler=handler, methods=ANY_METHOD, name=name)

    @property
    def routes(self) -> tuple[Route, ...]:
        """Named routes in match order (fallback excluded)."""
        return self._routes if self._compiled else tuple(self._pending)

    @property
    def fallback(self) -> Route | None:
        return self._fallback

    def compile(self) -> None:
        """Freeze the table. No more routes can be added."""
        if self._fallback is None:
            msg = "A fallback route is required before compiling the route table."
            raise ConfigurationError(msg)
        self._routes = tuple(self._pending)
        self._pending = []
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Return the first route matching *method* and *path*, or the fallback."""
        if not self._compiled:
            msg = "Router.match() called before compile()."
            raise RuntimeError(msg)
        for route in self._routes:
            if route.path == path and route.accepts(method):
                return RouteMatch(route=route)
        assert self._fallback is not None
        return RouteMatch(route=self._fallback, fallback=True)
