"""Extension layer — Spine runtime providers via pluggy.

INVARIANT: Provider failures are warnings, never errors.
"""

from skelprobe.plugins.hookspecs import SpineRuntime, hookimpl
from skelprobe.plugins.manager import RuntimeRegistry

__all__ = ["RuntimeRegistry", "SpineRuntime", "hookimpl"]
