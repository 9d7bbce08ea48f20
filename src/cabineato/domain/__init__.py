"""Domain layer - cabinet geometry and machining features."""

from .geometry import CabinetGeometry
from .value_objects import (
    Assembly,
    Bounds,
    BuildMetadata,
    CNCLayer,
    Component,
    ComponentRole,
    Feature,
)

__all__ = [
    "Assembly",
    "Bounds",
    "BuildMetadata",
    "CNCLayer",
    "CabinetGeometry",
    "Component",
    "ComponentRole",
    "Feature",
]
