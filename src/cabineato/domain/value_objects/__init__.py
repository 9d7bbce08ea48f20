"""Value objects for the cabinet domain.

This module provides the immutable data types produced by the geometry
pipeline. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Machining features
from ._features import (
    CountersinkFeature,
    Feature,
    HoleFeature,
    HolePurpose,
    NotchCorner,
    NotchFeature,
    SlotFeature,
    SlotPurpose,
    Vector2,
    Vector3,
)

# Components
from ._components import (
    IDENTITY_ROTATION,
    CNCLayer,
    Component,
    ComponentRole,
)

# Configuration choices
from ._options import (
    BackPanelType,
    Compensation,
    PullType,
    RunnerMode,
)

# Assembly output
from ._assembly import (
    Assembly,
    Bounds,
    BuildMetadata,
)

__all__ = [
    "Assembly",
    "BackPanelType",
    "Bounds",
    "BuildMetadata",
    "CNCLayer",
    "Component",
    "ComponentRole",
    "Compensation",
    "CountersinkFeature",
    "Feature",
    "HoleFeature",
    "HolePurpose",
    "IDENTITY_ROTATION",
    "NotchCorner",
    "NotchFeature",
    "PullType",
    "RunnerMode",
    "SlotFeature",
    "SlotPurpose",
    "Vector2",
    "Vector3",
]
