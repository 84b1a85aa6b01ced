"""Allow running as ``python -m feedtext``."""

from feedtext.cli import main

main()
