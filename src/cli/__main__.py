# =============================================================================
# src/cli/__main__.py - Package Entry Point
# =============================================================================
#
# Enables `python -m src.cli <command>` as a shortcut for the status lookup
# CLI in status.py.
# =============================================================================

"""Allow ``python -m src.cli`` execution."""

from src.cli.status import main

main()
