"""Static file mounts.

Serves files from a directory for one URL prefix, with an HTML listing
when the path names a directory.  Requests outside the prefix and
non-GET requests fall through to the next handler; anything missing
under the prefix is a 404 from the mount itself.
"""

import html
import mimetypes
from pathlib import Path
from urllib.parse import quote

import anyio

from websurfx.errors import NotFound
from websurfx.http.request import Request
from websurfx.http.response import Response
from websurfx.middleware.protocol import Next

_LISTING_PAGE = """\
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Index of {title}</title></head>
<body>
<h1>Index of {title}</h1>
<ul>
{items}
</ul>
</body>
</html>
"""


class StaticFiles:
    """Middleware that serves one directory under one URL prefix.

    Security: resolves symlinks and verifies the final path is within
    the configured directory.  Anything that escapes it is answered with
    ``403 Forbidden`` without touching the file.

    Usage::

        app.add_middleware(StaticFiles("./public/static", prefix="/static"))
    """

    __slots__ = ("_cache_control", "_directory", "_listing", "_prefix")

    def __init__(
        self,
        directory: str | Path,
        prefix: str = "/static",
        *,
        listing: bool = True,
        cache_control: str = "public, max-age=3600",
    ) -> None:
        self._directory = Path(directory).resolve()
        self._listing = listing
        self._cache_control = cache_control
        self._prefix = "/" + prefix.strip("/")
        if self._prefix == "/":
            msg = "StaticFiles needs a non-root prefix such as '/static'."
            raise ValueError(msg)

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def directory(self) -> Path:
        return self._directory

    def __repr__(self) -> str:
        return f"StaticFiles({self._prefix!r} -> {str(self._directory)!r})"

    async def __call__(self, request: Request, next: Next) -> Response:
        """Serve a file or directory listing.

        Raises ``NotFound`` for anything under the prefix that is not an
        existing file or listable directory.
        """
        if request.method not in ("GET", "HEAD"):
            return await next(request)

        path = request.path
        if path != self._prefix and not path.startswith(self._prefix + "/"):
            return await next(request)

        relative = path[len(self._prefix) :].lstrip("/")
        target = self.resolve(relative)
        if target is None:
            return Response(body="Forbidden", status=403, content_type="text/plain; charset=utf-8")

        if target.is_dir():
            if self._listing:
                return await self._serve_listing(target, path)
            raise NotFound()

        # A trailing slash names a directory, never a file
        if not target.is_file() or path.endswith("/"):
            raise NotFound()

        return await self._serve_file(target)

    def resolve(self, relative: str) -> Path | None:
        """Map a path suffix to a file under the mount root.

        Returns ``None`` when the suffix escapes the root (``..``,
        absolute symlinks) or cannot be resolved at all.
        """
        try:
            target = (self._directory / relative).resolve() if relative else self._directory
        except (OSError, ValueError):
            return None
        if not target.is_relative_to(self._directory):
            return None
        return target

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _serve_file(self, file_path: Path) -> Response:
        content_type, _ = mimetypes.guess_type(file_path.name)
        if content_type is None:
            content_type = "application/octet-stream"

        body = await anyio.to_thread.run_sync(file_path.read_bytes)

        return (
            Response(body=body, content_type=content_type)
            .with_header("Content-Length", str(len(body)))
            .with_header("Cache-Control", self._cache_control)
        )

    async def _serve_listing(self, directory: Path, request_path: str) -> Response:
        entries = await anyio.to_thread.run_sync(_list_directory, directory)
        base = request_path.rstrip("/")
        items = []
        for name, is_dir in entries:
            label = name + "/" if is_dir else name
            href = f"{base}/{quote(name)}" + ("/" if is_dir else "")
            items.append(f'<li><a href="{html.escape(href)}">{html.escape(label)}</a></li>')
        title = html.escape(base + "/")
        return Response(body=_LISTING_PAGE.format(title=title, items="\n".join(items)))


def _list_directory(directory: Path) -> list[tuple[str, bool]]:
    """``(name, is_dir)`` for each entry of *directory*, sorted by name."""
    return sorted((entry.name, entry.is_dir()) for entry in directory.iterdir())
