"""Run the bootstrap sequence for the ``websurfx`` command.

Maps startup failures to ``Error: ...`` on stderr and exit status 1.
Ctrl-C before pounce installs its own signal handling exits quietly.
"""

import argparse
import sys

from websurfx.bootstrap import Bootstrap
from websurfx.errors import StartupError
from websurfx.logs import configure_logging


def run_server(args: argparse.Namespace) -> None:
    """Configure logging, then bring the server up on ``args.port``."""
    configure_logging()

    boot = Bootstrap()
    try:
        boot.start(args.port)
    except StartupError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        raise SystemExit(0) from None
