"""The shipped ``public/`` tree, served by a fully bootstrapped app."""

from pathlib import Path

import pytest

from websurfx.app import App
from websurfx.bootstrap import Bootstrap, ServerState
from websurfx.config import ServerConfig
from websurfx.testing import TestClient

PUBLIC = Path(__file__).resolve().parent.parent / "public"


@pytest.fixture
def shipped_config() -> ServerConfig:
    return ServerConfig(
        template_dir=PUBLIC / "templates",
        static_dir=PUBLIC / "static",
        images_dir=PUBLIC / "images",
        robots_file=PUBLIC / "robots.txt",
    )


@pytest.fixture
def app(shipped_config: ServerConfig) -> App:
    boot = Bootstrap(shipped_config)
    boot.configure()
    boot.load_templates()
    app = boot.assemble()
    assert boot.state is ServerState.ASSEMBLED
    return app


class TestShippedSite:
    async def test_index(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.get("/")
            assert response.status == 200
            assert '<form class="search-bar" action="/search"' in response.text

    async def test_search_page(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.get("/search?q=rust+%26+python&page=2")
            assert response.status == 200
            assert "<title>rust &amp; python - Websurfx</title>" in response.text
            assert "/search?q=rust+%26+python" in response.text
            assert "Page 2" in response.text

    @pytest.mark.parametrize("path", ["/about", "/settings"])
    async def test_static_pages(self, app: App, path: str) -> None:
        async with TestClient(app) as client:
            response = await client.get(path)
            assert response.status == 200
            assert "<!doctype html>" in response.text

    async def test_not_found(self, app: App) -> None:
        async with TestClient(app) as client:
            response = await client.get("/does/not/exist")
            assert response.status == 200
            assert "404 Page Not Found!" in response.text

    async def test_assets(self, app: App) -> None:
        async with TestClient(app) as client:
            css = await client.get("/static/css/style.css")
            logo = await client.get("/images/websurfx_logo.svg")
            robots = await client.get("/robots.txt")

        assert "text/css" in css.content_type
        assert logo.content_type == "image/svg+xml"
        assert robots.text.startswith("User-agent: *")
