"""Template registry: every template compiled once, at startup.

``load_templates`` walks the template directory, compiles each matching
file through one kida environment and returns an immutable mapping keyed
by the file's path with the extension stripped::

    public/templates/index.html          -> "index"
    public/templates/partials/navbar.html -> "partials/navbar"

Loading is all-or-nothing. An unreadable directory, an unreadable file,
a syntax error, or an empty directory raises
``TemplateInitializationError`` and no registry is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from kida import Environment

from websurfx.errors import TemplateInitializationError
from websurfx.templating.integration import create_environment

if TYPE_CHECKING:
    from kida.template import Template

logger = logging.getLogger("websurfx.templating")


class TemplateRegistry(Mapping[str, Any]):
    """Immutable mapping of template name to compiled kida template.

    Shared read-only by every request; there is no writer after
    construction, so no locking is needed.
    """

    __slots__ = ("_env", "_templates", "directory")

    def __init__(
        self,
        env: Environment,
        templates: Mapping[str, Template],
        directory: Path,
    ) -> None:
        self._env = env
        self._templates = MappingProxyType(dict(templates))
        self.directory = directory

    def __getitem__(self, name: str) -> Template:
        return self._templates[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"TemplateRegistry({self.directory!s}, {sorted(self._templates)})"

    @property
    def environment(self) -> Environment:
        """The kida environment the templates were compiled with."""
        return self._env

    def render(self, name: str, /, **context: Any) -> str:
        """Render template *name* with *context*.

        Raises ``KeyError`` if no template with that name was loaded.
        """
        return self._templates[name].render(context)

    def require(self, *names: str) -> None:
        """Fail unless every template in *names* was loaded."""
        missing = [name for name in names if name not in self._templates]
        if missing:
            msg = f"missing required templates in {self.directory}: {', '.join(missing)}"
            raise TemplateInitializationError(msg, path=str(self.directory))


def _discover(directory: Path, extension: str) -> list[Path]:
    """Every file under *directory* ending in *extension*, in sorted order."""
    try:
        return sorted(
            path
            for path in directory.rglob(f"*{extension}")
            if path.is_file()
        )
    except OSError as exc:
        msg = f"cannot read template directory {directory}: {exc}"
        raise TemplateInitializationError(msg, path=str(directory)) from exc


def load_templates(directory: str | Path, extension: str = ".html") -> TemplateRegistry:
    """Compile every *extension* file under *directory* into a registry."""
    root = Path(directory)
    if not root.is_dir():
        msg = f"template directory {root} does not exist or is not a directory"
        raise TemplateInitializationError(msg, path=str(root))

    paths = _discover(root, extension)
    if not paths:
        msg = f"no {extension} templates found in {root}"
        raise TemplateInitializationError(msg, path=str(root))

    env = create_environment(root)
    compiled: dict[str, Template] = {}
    for path in paths:
        relative = path.relative_to(root).as_posix()
        name = relative.removesuffix(extension)
        try:
            compiled[name] = env.get_template(relative)
        except Exception as exc:
            msg = f"failed to load template {relative!r}: {exc}"
            raise TemplateInitializationError(msg, path=str(path)) from exc

    logger.debug("compiled %d templates from %s", len(compiled), root)
    return TemplateRegistry(env, compiled, root)
