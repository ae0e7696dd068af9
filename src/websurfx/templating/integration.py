"""Kida environment setup.

The environment is created once per registry and never reconfigured:
``auto_reload`` is off, so template edits need a restart.
"""

from pathlib import Path

from kida import Environment, FileSystemLoader


def create_environment(directory: str | Path) -> Environment:
    """Create a kida Environment that loads templates from *directory*."""
    return Environment(
        loader=FileSystemLoader(str(directory)),
        autoescape=True,
        auto_reload=False,
        trim_blocks=True,
        lstrip_blocks=True,
    )
