"""Runtime discovery and lookup.

Discovery: setuptools entry points (pip-installed runtime bindings) via
pluggy, plus direct registration for embedding applications and tests.
"""

from __future__ import annotations

import logging

import pluggy

from skelprobe.domain.types import SchemaVersion
from skelprobe.plugins.hookspecs import PROJECT_NAME, SkelprobeHookSpec, SpineRuntime

DEFAULT_ENTRY_POINT_GROUP = "skelprobe.runtimes"

logger = logging.getLogger(__name__)


class RuntimeRegistry:
    """Resolves a :class:`SpineRuntime` for each schema version."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(SkelprobeHookSpec)

    def discover(self, group: str = DEFAULT_ENTRY_POINT_GROUP) -> list[str]:
        """Load runtime providers from the *group* entry points.

        Returns the names of all registered providers.
        """
        count = self._pm.load_setuptools_entrypoints(group)
        logger.debug("Loaded %d runtime provider(s) from %s", count, group)
        return self.list_provider_names()

    def register(self, provider: object, name: str | None = None) -> None:
        """Register a provider instance directly."""
        resolved_name = name or provider.__class__.__name__
        self._pm.register(provider, name=resolved_name)
        logger.debug("Registered runtime provider: %s", resolved_name)

    def unregister(self, provider: object) -> None:
        self._pm.unregister(provider)

    def list_provider_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def runtime_for(self, version: SchemaVersion) -> SpineRuntime | None:
        """Return the first runtime offered for *version*.

        INVARIANT: A failing provider is a warning, never an error.
        """
        try:
            return self._pm.hook.skelprobe_runtime(version=version)
        except Exception:
            logger.warning("Runtime lookup failed for Spine v%d", version, exc_info=True)
            return None
