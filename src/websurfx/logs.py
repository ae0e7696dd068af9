"""Logging setup for the ``websurfx`` command.

Library modules only create named loggers (``websurfx.server``,
``websurfx.access``, ...).  The CLI installs the handler, once.
"""

import logging
import os

LOG_ENV_VAR = "WEBSURFX_LOG"
DEFAULT_LEVEL = "info"
LOG_FORMAT = "[%(asctime)s %(levelname)-5s %(name)s] %(message)s"


def configure_logging(level: str | None = None) -> str:
    """Send ``websurfx`` log records to stderr.

    The level is taken from *level*, then ``$WEBSURFX_LOG``, then
    ``info``.  Returns the level name actually used.
    """
    name = (level or os.environ.get(LOG_ENV_VAR) or DEFAULT_LEVEL).lower()
    numeric = logging.getLevelNamesMapping().get(name.upper())
    if numeric is None:
        name, numeric = DEFAULT_LEVEL, logging.INFO

    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        level=numeric,
        force=True,
    )
    return name
