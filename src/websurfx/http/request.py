"""Immutable HTTP request.

Metadata is frozen at creation. Page handlers only ever read the path,
the query string and a couple of headers, so the body is never consumed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from websurfx.http.headers import Headers
from websurfx.http.query import QueryParams


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request built from an ASGI scope."""

    method: str
    path: str
    headers: Headers
    query: QueryParams
    http_version: str
    client: tuple[str, int] | None

    @property
    def url(self) -> str:
        """Request path plus query string, as sent by the client."""
        qs = self.query.raw
        if qs:
            return f"{self.path}?{qs.decode('latin-1')}"
        return self.path

    @property
    def remote_addr(self) -> str:
        """Client address as ``host:port``, or ``-`` when unknown."""
        if self.client is None:
            return "-"
        host, port = self.client
        return f"{host}:{port}"

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI scope."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            query=QueryParams(scope.get("query_string", b"")),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
        )
