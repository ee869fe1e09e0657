"""DetectionResult and DetectionError — the detection handoff contract.

INVARIANT: ``success`` is True iff both resolved nodes, the load type and
the schema version are set and no error is attached. A failed result always
carries an error; its other fields hold no meaning.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from skelprobe.domain.nodes import AssetNode
from skelprobe.domain.types import LoadType, SchemaVersion


class ErrorCode(StrEnum):
    """Terminal detection failure categories."""

    MISSING_NODE = "missing_node"
    MISSING_SUFFIX = "missing_suffix"
    MISSING_COMPANION = "missing_companion"
    ALIAS_UNRESOLVED = "alias_unresolved"
    WRONG_VALUE_KIND = "wrong_value_kind"
    VERSION_NOT_FOUND = "version_not_found"
    VERSION_UNPARSEABLE = "version_unparseable"
    VERSION_UNSUPPORTED = "version_unsupported"


class DetectionError(BaseModel):
    """Structured failure payload within a DetectionResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class DetectionResult(BaseModel):
    """Outcome of classifying one atlas/skeleton pair.

    Attributes:
        success: Whether detection succeeded.
        error: Structured error if ``success`` is False.
        atlas_node: Atlas node after alias resolution.
        skeleton_node: Companion skeleton node after alias resolution.
        load_type: Serialization encoding of the skeleton.
        version: Major schema version of the skeleton.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    success: bool
    error: DetectionError | None = None
    atlas_node: AssetNode | None = None
    skeleton_node: AssetNode | None = None
    load_type: LoadType | None = None
    version: SchemaVersion | None = None

    @model_validator(mode="after")
    def _check_consistency(self) -> DetectionResult:
        resolved = (self.atlas_node, self.skeleton_node, self.load_type, self.version)
        if self.success:
            if self.error is not None or any(field is None for field in resolved):
                msg = "A successful result needs both nodes, a load type and a version"
                raise ValueError(msg)
        elif self.error is None:
            msg = "A failed result needs an error"
            raise ValueError(msg)
        return self

    @property
    def error_detail(self) -> str | None:
        """Human-readable diagnostic, or None on success."""
        return self.error.message if self.error is not None else None

    @classmethod
    def failed(cls, code: ErrorCode, message: str, **detail: Any) -> DetectionResult:
        return cls(success=False, error=DetectionError(code=code, message=message, detail=detail))

    @classmethod
    def succeeded(
        cls,
        *,
        atlas_node: AssetNode,
        skeleton_node: AssetNode,
        load_type: LoadType,
        version: SchemaVersion,
    ) -> DetectionResult:
        return cls(
            success=True,
            atlas_node=atlas_node,
            skeleton_node=skeleton_node,
            load_type=load_type,
            version=version,
        )
