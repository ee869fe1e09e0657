"""SkeletonLoader — hand a detection result to the matching Spine runtime.

The loader holds no classification logic. It picks the runtime registered
for the detected version and lets it build the atlas, then the skeleton.
Structural mismatches produce None rather than an exception.
"""

from __future__ import annotations

import logging
from typing import Any

from skelprobe.config.models import LoaderConfig
from skelprobe.config.settings import SkelprobeSettings
from skelprobe.domain.nodes import AssetNode, BlobValue, TextValue
from skelprobe.domain.types import LoadType, SchemaVersion
from skelprobe.infrastructure.binary import preserved_position
from skelprobe.plugins.hookspecs import SpineRuntime
from skelprobe.plugins.manager import RuntimeRegistry
from skelprobe.services.detector import SkeletonDetector
from skelprobe.services.result import DetectionResult

logger = logging.getLogger(__name__)


class SkeletonLoader:
    """Builds runtime skeleton data from detection results.

    Usage::

        registry = RuntimeRegistry()
        registry.discover()
        loader = SkeletonLoader(registry)
        skeleton = loader.load_node(atlas_node, SchemaVersion.V4, textures)
    """

    def __init__(
        self,
        registry: RuntimeRegistry,
        *,
        detector: SkeletonDetector | None = None,
        config: LoaderConfig | None = None,
    ) -> None:
        self._registry = registry
        self._detector = detector or SkeletonDetector()
        self._config = config or LoaderConfig()

    @classmethod
    def from_settings(cls, settings: SkelprobeSettings) -> SkeletonLoader:
        """Wire a loader with discovered runtimes and the configured naming."""
        registry = RuntimeRegistry()
        registry.discover(settings.loader.runtime_entry_point_group)
        return cls(
            registry,
            detector=SkeletonDetector(settings.naming),
            config=settings.loader,
        )

    def load_node(
        self, atlas_node: AssetNode, version: SchemaVersion | int, texture_loader: Any
    ) -> Any | None:
        """Detect *atlas_node* and load it only if it is a *version* skeleton."""
        result = self._detector.detect(atlas_node)
        if not result.success or result.version != version:
            return None
        return self.load(result, texture_loader)

    def load(self, result: DetectionResult, texture_loader: Any) -> Any | None:
        """Build skeleton data for a successful *result*, or return None."""
        if not result.success or result.version is None:
            return None
        runtime = self._registry.runtime_for(result.version)
        if runtime is None:
            logger.warning("No Spine runtime registered for v%d", result.version)
            return None

        atlas_value = result.atlas_node.value if result.atlas_node is not None else None
        if not isinstance(atlas_value, TextValue):
            return None
        atlas = runtime.build_atlas(
            atlas_value.text, self._config.atlas_base_path, texture_loader
        )

        skeleton_value = result.skeleton_node.value if result.skeleton_node is not None else None
        if result.load_type is LoadType.JSON:
            if not isinstance(skeleton_value, TextValue):
                return None
            return runtime.build_skeleton_from_text(atlas, skeleton_value.text)
        if result.load_type is LoadType.BINARY:
            if not isinstance(skeleton_value, BlobValue):
                return None
            return _load_binary(runtime, atlas, skeleton_value)
        return None


def _load_binary(runtime: SpineRuntime, atlas: Any, value: BlobValue) -> Any | None:
    blob = value.blob
    if not blob.kind.carries_skeleton:
        return None
    with preserved_position(blob.stream) as stream:
        stream.seek(blob.offset)
        return runtime.build_skeleton_from_binary(atlas, stream)
