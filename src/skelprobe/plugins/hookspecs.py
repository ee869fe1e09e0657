"""Pluggy hook specifications for Spine runtime providers.

A provider exposes one :class:`SpineRuntime` per major version it supports.
The runtimes for different majors share method names but not object
types; an atlas built by one must only be handed back to the same runtime.
"""

from __future__ import annotations

from typing import Any, BinaryIO, Protocol

import pluggy

from skelprobe.domain.types import SchemaVersion

PROJECT_NAME = "skelprobe"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class SpineRuntime(Protocol):
    """Construction API of one Spine runtime major version."""

    version: SchemaVersion

    def build_atlas(self, text: str, base_path: str, texture_loader: Any) -> Any:
        """Parse atlas *text*, loading pages through *texture_loader*."""
        ...

    def build_skeleton_from_text(self, atlas: Any, text: str) -> Any:
        """Build skeleton data from a JSON document."""
        ...

    def build_skeleton_from_binary(self, atlas: Any, stream: BinaryIO) -> Any:
        """Build skeleton data from *stream*, positioned at the blob start."""
        ...


class SkelprobeHookSpec:
    """Hook specifications for the skelprobe runtime registry."""

    @hookspec(firstresult=True)
    def skelprobe_runtime(self, version: SchemaVersion) -> SpineRuntime | None:
        """Return the runtime for *version*, or None if not provided."""
