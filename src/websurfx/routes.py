"""Page handlers and the route table they are served from.

Each handler takes the request and/or the shared ``TemplateRegistry`` and
returns a rendered page.  Search-result aggregation lives upstream; the
search page renders the query and whatever results it is given.
"""

from urllib.parse import quote_plus

import anyio

from websurfx.app import App
from websurfx.config import ServerConfig
from websurfx.http.request import Request
from websurfx.http.response import Redirect, Response
from websurfx.templating.registry import TemplateRegistry

# Templates the page handlers render; checked before the server binds
PAGE_TEMPLATES: tuple[str, ...] = ("index", "search", "about", "settings", "404")


async def robots_data(config: ServerConfig) -> Response:
    """``/robots.txt``, read from disk on every request."""
    body = await anyio.Path(config.robots_file).read_text(encoding="utf-8")
    return Response(body=body, content_type="text/plain; charset=ascii")


def index(templates: TemplateRegistry) -> str:
    return templates.render("index")


def search(request: Request, templates: TemplateRegistry) -> str | Redirect:
    """Search page.  An empty query sends the user back to the landing page."""
    query = (request.query.get("q") or "").strip()
    if not query:
        return Redirect("/")
    page = max(request.query.get_int("page", 1) or 1, 1)
    return templates.render(
        "search",
        query=query,
        encoded_query=quote_plus(query),
        page=page,
        results=(),
    )


def about(templates: TemplateRegistry) -> str:
    return templates.render("about")


def settings(templates: TemplateRegistry) -> str:
    return templates.render("settings")


def not_found(templates: TemplateRegistry) -> str:
    """Fallback for every unmatched method and path.

    Rendered with status 200: an unknown page is content, not a failure.
    """
    return templates.render("404")


# (name, path, handler) in match order
ROUTES = (
    ("robots", "/robots.txt", robots_data),
    ("index", "/", index),
    ("search", "/search", search),
    ("about", "/about", about),
    ("settings", "/settings", settings),
)


def register_routes(app: App) -> None:
    """Bind the named pages and the fallback onto *app*."""
    for name, path, handler in ROUTES:
        app.add_route(path, handler, name=name)
    app.set_fallback(not_found)
