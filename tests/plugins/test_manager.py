"""Tests for RuntimeRegistry — provider registration and runtime lookup."""

from __future__ import annotations

import pytest

from skelprobe.domain.types import SchemaVersion
from skelprobe.plugins import RuntimeRegistry, hookimpl


class _Runtime:
    def __init__(self, version: SchemaVersion) -> None:
        self.version = version


class _V2Provider:
    runtime = _Runtime(SchemaVersion.V2)

    @hookimpl
    def skelprobe_runtime(self, version: SchemaVersion) -> _Runtime | None:
        return self.runtime if version is SchemaVersion.V2 else None


class _V4Provider:
    runtime = _Runtime(SchemaVersion.V4)

    @hookimpl
    def skelprobe_runtime(self, version: SchemaVersion) -> _Runtime | None:
        return self.runtime if version is SchemaVersion.V4 else None


class _BrokenProvider:
    @hookimpl
    def skelprobe_runtime(self, version: SchemaVersion) -> _Runtime | None:
        raise RuntimeError("native library missing")


class TestRuntimeRegistry:
    def test_empty_registry(self) -> None:
        registry = RuntimeRegistry()
        assert registry.list_provider_names() == []
        assert registry.runtime_for(SchemaVersion.V2) is None

    def test_register_named(self) -> None:
        registry = RuntimeRegistry()
        registry.register(_V2Provider(), name="spine-v2")
        assert registry.list_provider_names() == ["spine-v2"]

    def test_register_default_name(self) -> None:
        registry = RuntimeRegistry()
        registry.register(_V4Provider())
        assert "_V4Provider" in registry.list_provider_names()

    def test_lookup_per_version(self) -> None:
        registry = RuntimeRegistry()
        registry.register(_V2Provider())
        registry.register(_V4Provider())
        assert registry.runtime_for(SchemaVersion.V2) is _V2Provider.runtime
        assert registry.runtime_for(SchemaVersion.V4) is _V4Provider.runtime

    def test_missing_version(self) -> None:
        registry = RuntimeRegistry()
        registry.register(_V2Provider())
        assert registry.runtime_for(SchemaVersion.V4) is None

    def test_unregister(self) -> None:
        registry = RuntimeRegistry()
        provider = _V2Provider()
        registry.register(provider)
        registry.unregister(provider)
        assert registry.runtime_for(SchemaVersion.V2) is None

    def test_broken_provider_is_a_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = RuntimeRegistry()
        registry.register(_BrokenProvider())
        assert registry.runtime_for(SchemaVersion.V4) is None
        assert "Runtime lookup failed for Spine v4" in caplog.text

    def test_discover_unknown_group(self) -> None:
        registry = RuntimeRegistry()
        assert registry.discover("skelprobe.tests.no-such-group") == []
