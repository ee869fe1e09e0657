"""Asset-tree node capability and its tagged value union.

The detector never walks a concrete tree. It consumes :class:`AssetNode`,
which adapters implement for their storage (an archive index, an in-memory
tree, ...). A node's value is one of three frozen variants:

- :class:`TextValue` — decoded text (atlas manifests, JSON skeletons).
- :class:`BlobValue` — a byte range inside a shared backing stream.
- :class:`OtherValue` — anything else (images, numbers, containers).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, BinaryIO


class BlobKind(StrEnum):
    """Origin of a blob reference inside the asset container."""

    RAW = "raw"
    BINARY_SOUND = "binary_sound"
    AUDIO = "audio"

    @property
    def carries_skeleton(self) -> bool:
        """Whether blobs of this kind may hold a binary skeleton."""
        return self is not BlobKind.AUDIO


@dataclass(frozen=True)
class BlobRef:
    """A byte range ``[offset, offset + length)`` inside *stream*.

    The stream is shared with other readers; consumers must leave its
    position as they found it.
    """

    stream: BinaryIO
    offset: int
    length: int
    kind: BlobKind = BlobKind.RAW


@dataclass(frozen=True)
class TextValue:
    text: str


@dataclass(frozen=True)
class BlobValue:
    blob: BlobRef


@dataclass(frozen=True)
class OtherValue:
    payload: Any = None


NodeValue = TextValue | BlobValue | OtherValue


class AssetNode(ABC):
    """Named entry of an asset tree.

    Subclasses provide naming, parent and child lookup, value access and
    alias resolution. Sibling lookup is derived from the parent.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def parent(self) -> AssetNode | None: ...

    @property
    @abstractmethod
    def value(self) -> NodeValue: ...

    @abstractmethod
    def child(self, name: str) -> AssetNode | None:
        """Return the direct child called *name*, or None."""

    @abstractmethod
    def resolve_alias(self) -> AssetNode | None:
        """Return the concrete node this one stands for.

        A node that is not an alias returns itself. An alias whose target
        cannot be found returns None.
        """

    def sibling(self, name: str) -> AssetNode | None:
        """Return the sibling called *name*, or None when detached."""
        parent = self.parent
        if parent is None:
            return None
        return parent.child(name)
