"""Shared fixtures: a throwaway ``public/`` tree and configs pointing at it."""

from pathlib import Path

import pytest

from websurfx.config import ServerConfig

BASE = """\
<html><head><title>{% block title %}Websurfx{% end %}</title></head>
<body>{% block content %}{% end %}</body></html>
"""

PAGES = {
    "index.html": '{% extends "base.html" %}{% block content %}<h1>Websurfx</h1>{% end %}',
    "search.html": (
        '{% extends "base.html" %}'
        "{% block title %}{{ query }} - Websurfx{% end %}"
        "{% block content %}<p>Results for {{ query }}, page {{ page }}</p>{% end %}"
    ),
    "about.html": '{% extends "base.html" %}{% block content %}<h1>About</h1>{% end %}',
    "settings.html": '{% extends "base.html" %}{% block content %}<h1>Settings</h1>{% end %}',
    "404.html": '{% extends "base.html" %}{% block content %}<h1>Page Not Found</h1>{% end %}',
}


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """A complete ``public/`` tree: templates, static files, images, robots.txt."""
    public = tmp_path / "public"

    templates = public / "templates"
    (templates / "partials").mkdir(parents=True)
    (templates / "base.html").write_text(BASE)
    for name, source in PAGES.items():
        (templates / name).write_text(source)
    (templates / "partials" / "footer.html").write_text("<footer>websurfx</footer>")

    static = public / "static"
    (static / "css").mkdir(parents=True)
    (static / "css" / "style.css").write_text("body { color: black; }")
    (static / "index.js").write_text("console.log('websurfx');")

    images = public / "images"
    images.mkdir()
    (images / "logo.svg").write_text('<svg xmlns="http://www.w3.org/2000/svg"/>')

    (public / "robots.txt").write_text("User-agent: *\nDisallow: /settings\n")
    (tmp_path / "secret.txt").write_text("do not serve")
    return public


@pytest.fixture
def server_config(public_dir: Path) -> ServerConfig:
    """Defaults with every path pointed at ``public_dir``."""
    return ServerConfig(
        template_dir=public_dir / "templates",
        static_dir=public_dir / "static",
        images_dir=public_dir / "images",
        robots_file=public_dir / "robots.txt",
    )
