"""``python -m websurfx``."""

from websurfx.cli import main

main()
