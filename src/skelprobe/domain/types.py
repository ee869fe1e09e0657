"""Classification enums for skeleton detection.

A skeleton is classified along two axes: how it is serialized
(:class:`LoadType`) and which major schema it follows (:class:`SchemaVersion`).
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class LoadType(StrEnum):
    """Serialization encoding of a skeleton companion."""

    JSON = "json"
    BINARY = "binary"


class SchemaVersion(IntEnum):
    """Supported Spine major versions. Values equal the major number."""

    V2 = 2
    V4 = 4

    @classmethod
    def from_major(cls, major: int) -> SchemaVersion | None:
        """Return the member for *major*, or None if the major is unsupported."""
        try:
            return cls(major)
        except ValueError:
            return None
