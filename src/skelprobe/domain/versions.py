"""Dotted numeric version grammar.

Accepts two to four non-negative integer components separated by dots
(``2.1``, ``2.1.27``, ``4.1.24.0``). Each component must fit a signed 32-bit
integer. Shared by the detector and the binary reader's plausibility gate.
"""

from __future__ import annotations

import re

VERSION_PATTERN: re.Pattern[str] = re.compile(r"[0-9]{1,10}(?:\.[0-9]{1,10}){1,3}")
MAX_COMPONENT = 2**31 - 1


def parse_version(text: str | None) -> tuple[int, ...] | None:
    """Split *text* into integer components, or None if it is not a version."""
    if not text or VERSION_PATTERN.fullmatch(text) is None:
        return None
    parts = tuple(int(part) for part in text.split("."))
    if any(part > MAX_COMPONENT for part in parts):
        return None
    return parts


def is_version_string(text: str) -> bool:
    """Check that *text* is printable and matches the version grammar."""
    return text.isprintable() and parse_version(text) is not None
