"""Service layer — detection and loading.

Detection results are data: every failure is reported as a DetectionResult,
never raised.
"""

from skelprobe.services.detector import SkeletonDetector
from skelprobe.services.loader import SkeletonLoader
from skelprobe.services.result import DetectionError, DetectionResult, ErrorCode

__all__ = [
    "DetectionError",
    "DetectionResult",
    "ErrorCode",
    "SkeletonDetector",
    "SkeletonLoader",
]
