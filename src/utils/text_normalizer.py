"""Name normalization and validation for worlds and data centers.

Two concerns live here:

1. **Lookup normalization** -- ``normalize_name`` trims and case-folds so
   that "Excalibur", "EXCALIBUR" and "  excalibur " compare equal.

2. **Allow-list validation** -- ``validate_name`` is the smart constructor
   behind every world/group name stored in a model.  It returns the trimmed
   name or raises :class:`InvalidNameError`; it never coerces.
"""

import re

from src.utils.errors import InvalidNameError

# Letters, digits, spaces, hyphens and apostrophes (straight or typographic).
_NAME_RE = re.compile(r"^[A-Za-z0-9 '’-]+$")


def normalize_name(name: str) -> str:
    """Return *name* trimmed and case-folded for comparison."""
    return name.strip().casefold()


def is_valid_name(name: str) -> bool:
    """Return ``True`` if *name* passes the allow-list after trimming."""
    trimmed = name.strip()
    return bool(trimmed) and _NAME_RE.match(trimmed) is not None


def validate_name(name: str) -> str:
    """Validate *name* and return it trimmed.

    Raises:
        InvalidNameError: If the name is empty after trimming or contains
            characters outside the allow-list.
    """
    if not isinstance(name, str):
        raise InvalidNameError(f"Name must be a string, got {type(name).__name__}")
    trimmed = name.strip()
    if not trimmed:
        raise InvalidNameError("Name must not be empty")
    if _NAME_RE.match(trimmed) is None:
        raise InvalidNameError(f"Name contains invalid characters: {trimmed!r}")
    return trimmed
