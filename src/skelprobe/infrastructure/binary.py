"""Version sniffing for binary Spine skeletons.

Two header layouts exist and nothing in the bytes says which one a blob uses::

    Layout A (4.x)                 Layout B (2.x / 3.x)
    00-07     hash (8 bytes)       00        hash length H
    08        version length L     01-XX     hash (H-1 bytes)
    09-..     version (L-1 bytes)  XX+1      version length L
                                   XX+2-..   version (L-1 bytes)

A length byte counts one more than the string it prefixes: ``0`` is a null
string, ``1`` an empty one. Layout A is tried first; a candidate is accepted
only if it decodes as UTF-8, is printable, and matches the version grammar.

INVARIANT: The stream position on return equals the position on entry.
INVARIANT: No exception escapes :func:`read_binary_version`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from contextlib import contextmanager
from typing import BinaryIO

from skelprobe.domain.versions import is_version_string

logger = logging.getLogger(__name__)

HASH_SIZE = 8


class _OutOfBounds(Exception):
    """A read would cross the blob bound or the stream ran short."""


@contextmanager
def preserved_position(stream: BinaryIO) -> Generator[BinaryIO]:
    """Restore *stream*'s read position when the block exits, however it exits."""
    saved = stream.tell()
    try:
        yield stream
    finally:
        stream.seek(saved)


class _BoundedReader:
    """Sequential reader confined to ``[offset, offset + length)``."""

    def __init__(self, stream: BinaryIO, offset: int, length: int) -> None:
        self._stream = stream
        self._start = offset
        self._end = offset + length
        self._pos = offset

    def rewind(self) -> None:
        self._pos = self._start
        self._stream.seek(self._start)

    def read(self, size: int) -> bytes:
        if size < 0 or self._pos + size > self._end:
            raise _OutOfBounds
        data = self._stream.read(size)
        if len(data) != size:
            raise _OutOfBounds
        self._pos += size
        return data

    def skip(self, size: int) -> None:
        if size < 0 or self._pos + size > self._end:
            raise _OutOfBounds
        self._pos += size
        self._stream.seek(self._pos)

    def read_byte(self) -> int:
        return self.read(1)[0]

    def read_string(self) -> str | None:
        """Read a length-prefixed UTF-8 string. Null strings return None."""
        size = self.read_byte()
        if size == 0:
            return None
        return self.read(size - 1).decode("utf-8")

    def skip_string(self) -> None:
        size = self.read_byte()
        if size > 1:
            self.skip(size - 1)


def _read_layout_a(reader: _BoundedReader) -> str | None:
    reader.skip(HASH_SIZE)
    return reader.read_string()


def _read_layout_b(reader: _BoundedReader) -> str | None:
    reader.skip_string()
    return reader.read_string()


_LAYOUTS: tuple[tuple[str, Callable[[_BoundedReader], str | None]], ...] = (
    ("A", _read_layout_a),
    ("B", _read_layout_b),
)


def _probe(reader: _BoundedReader) -> str | None:
    for layout, read_version in _LAYOUTS:
        reader.rewind()
        try:
            candidate = read_version(reader)
        except (_OutOfBounds, UnicodeDecodeError):
            logger.debug("Layout %s header is truncated or undecodable", layout)
            continue
        if candidate and is_version_string(candidate):
            logger.debug("Layout %s yielded version %s", layout, candidate)
            return candidate
        logger.debug("Layout %s candidate %r rejected", layout, candidate)
    return None


def read_binary_version(stream: BinaryIO, offset: int, length: int) -> str | None:
    """Extract the version string of a binary skeleton stored in *stream*.

    Args:
        stream: Seekable backing stream shared with other readers.
        offset: Absolute offset of the skeleton blob.
        length: Byte length of the blob; no byte past it is read.

    Returns:
        The version string, or None when neither layout yields a plausible
        version or the stream fails.
    """
    if offset < 0 or length <= 0:
        return None
    try:
        with preserved_position(stream):
            return _probe(_BoundedReader(stream, offset, length))
    except Exception:
        logger.debug("Binary version probe failed at offset %d", offset, exc_info=True)
        return None
