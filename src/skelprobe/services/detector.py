"""SkeletonDetector — classify an atlas node and its skeleton companion.

Checks run in a fixed order and the first failure ends detection:

1. atlas node and its parent exist
2. atlas name carries the atlas suffix
3. a companion sibling exists (JSON before binary)
4. both nodes resolve through aliases
5. the atlas holds text
6. a version string can be read from the companion
7. the version string parses
8. the major version is supported

INVARIANT: detect() never raises for malformed input; every failure is a
DetectionResult with an ErrorCode.
"""

from __future__ import annotations

import logging

from skelprobe.config.models import NamingConfig
from skelprobe.domain.nodes import AssetNode, BlobValue, TextValue
from skelprobe.domain.types import LoadType, SchemaVersion
from skelprobe.domain.versions import parse_version
from skelprobe.infrastructure.binary import read_binary_version
from skelprobe.infrastructure.text import read_json_version
from skelprobe.services.result import DetectionResult, ErrorCode

logger = logging.getLogger(__name__)


class SkeletonDetector:
    """Infers load type and schema version for atlas/skeleton pairs.

    Usage::

        detector = SkeletonDetector()
        result = detector.detect(atlas_node)
        if result.success:
            ...
    """

    def __init__(self, naming: NamingConfig | None = None) -> None:
        self._naming = naming or NamingConfig()

    def detect(self, atlas_node: AssetNode | None) -> DetectionResult:
        result = self._detect(atlas_node)
        atlas = atlas_node.name if atlas_node is not None else None
        if result.error is not None:
            logger.debug(
                "Skeleton detection failed: %s",
                result.error.message,
                extra={"code": result.error.code.value, "atlas": atlas},
            )
        else:
            logger.debug(
                "Skeleton detected",
                extra={
                    "atlas": atlas,
                    "load_type": result.load_type.value if result.load_type else None,
                    "version": int(result.version) if result.version else None,
                },
            )
        return result

    def _detect(self, atlas_node: AssetNode | None) -> DetectionResult:
        naming = self._naming
        if atlas_node is None or atlas_node.parent is None:
            return DetectionResult.failed(
                ErrorCode.MISSING_NODE, "Atlas node or its parent is missing."
            )

        name = atlas_node.name
        if not name.endswith(naming.atlas_suffix):
            return DetectionResult.failed(
                ErrorCode.MISSING_SUFFIX,
                f"Atlas node name has no suffix {naming.atlas_suffix}.",
                name=name,
            )
        base = name[: len(name) - len(naming.atlas_suffix)]

        found = self._find_companion(atlas_node, base)
        if found is None:
            return DetectionResult.failed(
                ErrorCode.MISSING_COMPANION,
                f"No skeleton node found next to {name}.",
                base_name=base,
            )
        skeleton_node, load_type = found

        resolved_atlas = atlas_node.resolve_alias()
        if resolved_atlas is None:
            return DetectionResult.failed(
                ErrorCode.ALIAS_UNRESOLVED,
                "Failed to resolve alias for atlas node.",
                node="atlas",
            )
        resolved_skeleton = skeleton_node.resolve_alias()
        if resolved_skeleton is None:
            return DetectionResult.failed(
                ErrorCode.ALIAS_UNRESOLVED,
                "Failed to resolve alias for skeleton node.",
                node="skeleton",
            )

        if not isinstance(resolved_atlas.value, TextValue):
            return DetectionResult.failed(
                ErrorCode.WRONG_VALUE_KIND,
                "Atlas node does not contain a text value.",
                value_kind=type(resolved_atlas.value).__name__,
            )

        raw = _read_version(resolved_skeleton, load_type)
        if raw is None:
            return DetectionResult.failed(
                ErrorCode.VERSION_NOT_FOUND,
                f"Failed to read version string from {load_type} skeleton.",
                load_type=load_type,
            )

        parts = parse_version(raw)
        if parts is None:
            return DetectionResult.failed(
                ErrorCode.VERSION_UNPARSEABLE,
                f"Failed to parse version '{raw}'.",
                version=raw,
            )

        version = SchemaVersion.from_major(parts[0])
        if version is None:
            return DetectionResult.failed(
                ErrorCode.VERSION_UNSUPPORTED,
                f"Spine version '{raw}' is not supported.",
                version=raw,
            )

        return DetectionResult.succeeded(
            atlas_node=resolved_atlas,
            skeleton_node=resolved_skeleton,
            load_type=load_type,
            version=version,
        )

    def _find_companion(
        self, atlas_node: AssetNode, base: str
    ) -> tuple[AssetNode, LoadType] | None:
        naming = self._naming
        node = atlas_node.sibling(base + naming.json_suffix)
        if node is not None:
            return node, LoadType.JSON
        for candidate in (base, base + naming.binary_suffix):
            node = atlas_node.sibling(candidate)
            if node is not None:
                return node, LoadType.BINARY
        return None


def _read_version(skeleton_node: AssetNode, load_type: LoadType) -> str | None:
    """Dispatch to the extractor matching *load_type*.

    A value that does not fit the load type yields None.
    """
    value = skeleton_node.value
    if load_type is LoadType.JSON and isinstance(value, TextValue):
        return read_json_version(value.text)
    if load_type is LoadType.BINARY and isinstance(value, BlobValue):
        blob = value.blob
        if blob.kind.carries_skeleton:
            return read_binary_version(blob.stream, blob.offset, blob.length)
    return None
