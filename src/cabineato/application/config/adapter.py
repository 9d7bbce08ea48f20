"""Migration of historical configuration shapes to the current schema.

Older configurations described shelves with a single flat object
(``{"enabled": true, "count": 3, "frontSetback": 37, "rearSetback": 37}``)
that only covered adjustable shelves. The current schema nests it under
``adjustable`` next to ``fixed`` and ``runners``. Migration runs once, on
the raw mapping, before the schema sees it, so nothing downstream ever has
to detect which shape it was given.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

logger = logging.getLogger(__name__)

SHELF_SYSTEMS = frozenset({"adjustable", "fixed", "runners"})
LEGACY_SHELF_KEYS = frozenset({"enabled", "count", "frontSetback", "rearSetback"})


def is_legacy_shelf_config(shelves: Any) -> bool:
    """True for a flat shelf object from before shelf systems were split."""
    if not isinstance(shelves, dict) or not shelves:
        return False
    keys = set(shelves)
    return not keys & SHELF_SYSTEMS and keys <= LEGACY_SHELF_KEYS


def migrate_legacy_shelves(data: dict[str, Any]) -> dict[str, Any]:
    """Rewrite a legacy flat shelf configuration into the nested shape.

    Args:
        data: Raw configuration mapping (camelCase keys).

    Returns:
        The migrated mapping. The input is never modified; it is returned
        as-is when no migration applies.
    """
    features = data.get("features")
    if not isinstance(features, dict):
        return data
    shelves = features.get("shelves")
    if not is_legacy_shelf_config(shelves):
        return data

    logger.info("Migrating legacy flat shelf configuration to features.shelves.adjustable")
    migrated = copy.deepcopy(data)
    migrated["features"]["shelves"] = {"adjustable": dict(shelves)}
    return migrated
