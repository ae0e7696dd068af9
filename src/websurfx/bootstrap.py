"""Bootstrap sequence: configure, load templates, assemble, bind, run.

Each stage either produces its value or raises a ``StartupError``; a
failed stage moves the sequence to ``TERMINATED`` and nothing after it
runs, so no listener is ever left bound with a half-built server::

    UNCONFIGURED -> CONFIGURED -> TEMPLATES_LOADED -> ASSEMBLED
                 -> LISTENING -> RUNNING -> TERMINATED

Usage::

    boot = Bootstrap()
    boot.configure("8080")
    boot.load_templates()
    app = boot.assemble()
    boot.listen()
    boot.run()          # blocks until shutdown

or simply ``Bootstrap().start("8080")``.
"""

import contextlib
import dataclasses
import logging
from collections.abc import Iterator
from enum import Enum

from websurfx.app import App
from websurfx.config import DEFAULT_PORT, ServerConfig, validate_port
from websurfx.errors import StartupError
from websurfx.middleware.access_log import AccessLog
from websurfx.routes import PAGE_TEMPLATES, register_routes
from websurfx.server.runner import ensure_bindable, run_server
from websurfx.templating.registry import TemplateRegistry, load_templates

logger = logging.getLogger("websurfx.bootstrap")


class ServerState(Enum):
    """Where the bootstrap sequence currently is."""

    UNCONFIGURED = "unconfigured"
    CONFIGURED = "configured"
    TEMPLATES_LOADED = "templates_loaded"
    ASSEMBLED = "assembled"
    LISTENING = "listening"
    RUNNING = "running"
    TERMINATED = "terminated"


class Bootstrap:
    """Drives one server from command-line input to a running listener.

    *defaults* supplies the file-system layout (template, static and
    image directories); only the port comes from ``configure()``.
    """

    __slots__ = ("_defaults", "app", "config", "state", "templates")

    def __init__(self, defaults: ServerConfig | None = None) -> None:
        self._defaults = defaults or ServerConfig()
        self.state = ServerState.UNCONFIGURED
        self.config: ServerConfig | None = None
        self.templates: TemplateRegistry | None = None
        self.app: App | None = None

    @contextlib.contextmanager
    def _stage(self, expected: ServerState, reached: ServerState) -> Iterator[None]:
        if self.state is not expected:
            msg = f"cannot enter {reached.value!r} from {self.state.value!r} (expected {expected.value!r})"
            raise RuntimeError(msg)
        try:
            yield
        except StartupError:
            self.state = ServerState.TERMINATED
            raise
        self.state = reached

    # -- Stages --

    def configure(self, port: str | int = DEFAULT_PORT) -> ServerConfig:
        """Validate *port* and build the immutable configuration."""
        with self._stage(ServerState.UNCONFIGURED, ServerState.CONFIGURED):
            value = validate_port(str(port))
            self.config = dataclasses.replace(self._defaults, port=value)
        return self.config

    def load_templates(self) -> TemplateRegistry:
        """Compile the template directory and check the page templates exist."""
        with self._stage(ServerState.CONFIGURED, ServerState.TEMPLATES_LOADED):
            assert self.config is not None
            templates = load_templates(self.config.template_dir, self.config.template_extension)
            templates.require(*PAGE_TEMPLATES)
            self.templates = templates
        logger.info("loaded %d templates from %s", len(templates), templates.directory)
        return templates

    def assemble(self) -> App:
        """Wire middleware, static mounts, routes and shared state into an App."""
        with self._stage(ServerState.TEMPLATES_LOADED, ServerState.ASSEMBLED):
            config, templates = self.config, self.templates
            assert config is not None
            assert templates is not None

            app = App(config)
            app.provide(TemplateRegistry, lambda: templates)
            app.provide(ServerConfig, lambda: config)
            app.add_middleware(AccessLog())
            app.mount(config.static_url, config.static_dir)
            app.mount(config.images_url, config.images_dir)
            register_routes(app)
            app.freeze()
            self.app = app
        return app

    def listen(self) -> None:
        """Check that the configured address can be bound."""
        with self._stage(ServerState.ASSEMBLED, ServerState.LISTENING):
            assert self.config is not None
            ensure_bindable(self.config.host, self.config.port)

    def run(self) -> None:
        """Serve until pounce shuts down (signal or fatal server error)."""
        with self._stage(ServerState.LISTENING, ServerState.RUNNING):
            pass
        assert self.app is not None
        assert self.config is not None
        logger.info("listening on http://%s:%d", self.config.host, self.config.port)
        try:
            run_server(
                self.app,
                self.config.host,
                self.config.port,
                workers=self.config.workers,
                log_level=self.config.log_level,
            )
        finally:
            self.state = ServerState.TERMINATED

    def start(self, port: str | int = DEFAULT_PORT) -> None:
        """Run every stage in order."""
        self.configure(port)
        self.load_templates()
        self.assemble()
        self.listen()
        self.run()
