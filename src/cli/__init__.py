"""Command-line tools for the world-status library.

- ``python -m src.cli`` / ``world-status``: look up worlds, data centers and
  regions from the Lodestone status page (see ``status.py``).
"""
