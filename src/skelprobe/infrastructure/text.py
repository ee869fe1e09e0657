"""Version extraction for JSON skeletons.

A JSON skeleton records its editor version under ``skeleton.spine``::

    { "skeleton": { "spine": "2.1.27", ... }, "bones": [ ... ] }
"""

from __future__ import annotations

import json
import logging

logger = logging.getLogger(__name__)

SKELETON_KEY = "skeleton"
VERSION_KEY = "spine"


def read_json_version(text: str) -> str | None:
    """Return the ``skeleton.spine`` string of a JSON document, or None.

    Parse failures and structural mismatches yield None. The value is not
    checked against the version grammar.
    """
    try:
        root = json.loads(text.lstrip("\ufeff"))
    except (TypeError, ValueError, RecursionError):
        logger.debug("Skeleton text is not valid JSON")
        return None
    if not isinstance(root, dict):
        return None
    section = root.get(SKELETON_KEY)
    if not isinstance(section, dict):
        return None
    version = section.get(VERSION_KEY)
    if not isinstance(version, str) or not version:
        return None
    return version
