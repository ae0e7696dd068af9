"""websurfx: server application for a privacy-respecting meta search engine.

Start it from the command line::

    websurfx --port 8080

or compose it yourself::

    from websurfx import Bootstrap

    boot = Bootstrap()
    boot.configure("8080")
    boot.load_templates()
    app = boot.assemble()   # ASGI callable
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "Bootstrap",
    "BindError",
    "ConfigurationError",
    "HTTPError",
    "NotFound",
    "Redirect",
    "Request",
    "Response",
    "ServerConfig",
    "ServerState",
    "StartupError",
    "TemplateInitializationError",
    "TemplateRegistry",
    "WebsurfxError",
    "load_templates",
    "validate_port",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import websurfx`` (and ``websurfx --help``) from pulling in
    kida and anyio.
    """
    if name == "App":
        from websurfx.app import App

        return App

    if name in ("Bootstrap", "ServerState"):
        from websurfx import bootstrap as _boot

        return getattr(_boot, name)

    if name in ("ServerConfig", "validate_port"):
        from websurfx import config as _config

        return getattr(_config, name)

    if name == "Request":
        from websurfx.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from websurfx.http import response as _resp

        return getattr(_resp, name)

    if name in ("TemplateRegistry", "load_templates"):
        from websurfx.templating import registry as _registry

        return getattr(_registry, name)

    if name in (
        "BindError",
        "ConfigurationError",
        "HTTPError",
        "NotFound",
        "StartupError",
        "TemplateInitializationError",
        "WebsurfxError",
    ):
        from websurfx import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
