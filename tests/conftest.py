"""Shared pytest fixtures and test helpers for skelprobe tests."""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest

from skelprobe.domain.nodes import BlobKind, BlobRef, BlobValue, TextValue
from skelprobe.infrastructure.memory_tree import MemoryNode

ATLAS_TEXT = """\
hero.png
size: 512,256
format: RGBA8888
filter: Linear,Linear
repeat: none
head
  rotate: false
  xy: 2, 2
  size: 120, 140
"""

LAYOUT_A_HASH = b"\x9a\x1f\x03\x7e\x55\xc2\x10\x08"
LAYOUT_B_HASH = b"h3Kx9QpLmZ2vT8sWbYd"


class SkelBytes:
    """Builders for binary skeleton headers in both layouts."""

    @staticmethod
    def string(value: bytes) -> bytes:
        return bytes([len(value) + 1]) + value

    @classmethod
    def layout_a(cls, version: str, hash_bytes: bytes = LAYOUT_A_HASH) -> bytes:
        assert len(hash_bytes) == 8
        return hash_bytes + cls.string(version.encode()) + b"\x00\x01\x02bones"

    @classmethod
    def layout_b(cls, version: str, hash_bytes: bytes = LAYOUT_B_HASH) -> bytes:
        return cls.string(hash_bytes) + cls.string(version.encode()) + b"\x00\x01\x02bones"

    @staticmethod
    def json(version: str) -> str:
        return '{"skeleton":{"hash":"x1","spine":"%s","width":120},"bones":[]}' % version


@pytest.fixture
def skel_bytes() -> type[SkelBytes]:
    return SkelBytes


@pytest.fixture
def atlas_text() -> str:
    return ATLAS_TEXT


@pytest.fixture
def tree() -> MemoryNode:
    """Asset tree root with an empty ``hero`` directory."""
    root = MemoryNode("root")
    root.add("hero")
    return root


@pytest.fixture
def hero(tree: MemoryNode) -> MemoryNode:
    node = tree.child("hero")
    assert node is not None
    return node


@pytest.fixture
def container() -> io.BytesIO:
    """Shared backing stream that blobs are appended to."""
    return io.BytesIO(b"WZ-HEADER-PADDING")


@pytest.fixture
def add_blob(container: io.BytesIO) -> Callable[..., BlobValue]:
    """Append a payload to the shared container and return a BlobValue for it."""

    def _add(payload: bytes, kind: BlobKind = BlobKind.RAW) -> BlobValue:
        container.seek(0, io.SEEK_END)
        offset = container.tell()
        container.write(payload)
        container.seek(0)
        return BlobValue(BlobRef(container, offset, len(payload), kind))

    return _add


@pytest.fixture
def json_atlas(hero: MemoryNode) -> MemoryNode:
    """``hero/hero.atlas`` next to a v2 ``hero/hero.json``; returns the atlas node."""
    atlas = hero.add("hero.atlas", TextValue(ATLAS_TEXT))
    hero.add("hero.json", TextValue(SkelBytes.json("2.1.27")))
    return atlas
