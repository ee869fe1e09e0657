"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, skelprobe.toml only contains
overrides. An empty file (or no file) yields the stock Spine naming.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class NamingConfig(BaseModel):
    """[naming] section — suffixes pairing an atlas with its skeleton."""

    model_config = {"frozen": True}

    atlas_suffix: str = ".atlas"
    json_suffix: str = ".json"
    binary_suffix: str = ".skel"

    @field_validator("atlas_suffix")
    @classmethod
    def _atlas_suffix_not_empty(cls, value: str) -> str:
        if not value:
            msg = "atlas_suffix must not be empty"
            raise ValueError(msg)
        return value


class LoaderConfig(BaseModel):
    """[loader] section."""

    model_config = {"frozen": True}

    atlas_base_path: str = ""
    runtime_entry_point_group: str = "skelprobe.runtimes"
