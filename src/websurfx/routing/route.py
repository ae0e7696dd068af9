"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# Methods accepted by the fallback route
ANY_METHOD: frozenset[str] = frozenset()


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen (method, path) -> handler binding.

    An empty ``methods`` set means the route accepts every method; only
    the fallback route is declared that way.
    """

    path: str
    handler: Callable[..., Any]
    methods: frozenset[str]
    name: str | None = None

    def accepts(self, method: str) -> bool:
        """True if this route answers *method*."""
        return not self.methods or method in self.methods


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of routing one request."""

    route: Route
    fallback: bool = False
