"""skelprobe — Spine skeleton encoding and version detection for asset trees."""

from skelprobe.domain.types import LoadType, SchemaVersion
from skelprobe.infrastructure.binary import read_binary_version
from skelprobe.infrastructure.text import read_json_version
from skelprobe.services.detector import SkeletonDetector
from skelprobe.services.loader import SkeletonLoader
from skelprobe.services.result import DetectionResult, ErrorCode

__version__ = "0.1.0"

__all__ = [
    "DetectionResult",
    "ErrorCode",
    "LoadType",
    "SchemaVersion",
    "SkeletonDetector",
    "SkeletonLoader",
    "__version__",
    "read_binary_version",
    "read_json_version",
]
