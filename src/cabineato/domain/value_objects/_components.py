"""Component value objects: the individual panels of an assembly."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from ._features import Feature, Vector3

IDENTITY_ROTATION: Vector3 = (0.0, 0.0, 0.0)


class CNCLayer(str, Enum):
    """CNC export layers, one per machining operation."""

    OUTSIDE_CUT = "OUTSIDE_CUT"
    DRILL_5MM = "DRILL_5MM"
    DRILL_3MM = "DRILL_3MM"
    DRILL_8MM = "DRILL_8MM"
    DRILL_35MM = "DRILL_35MM"
    COUNTERSINK = "COUNTERSINK"
    POCKET_DADO = "POCKET_DADO"


class ComponentRole(str, Enum):
    """Role of a component within the cabinet."""

    SIDE_PANEL_LEFT = "side_panel_left"
    SIDE_PANEL_RIGHT = "side_panel_right"
    TOP_PANEL = "top_panel"
    BOTTOM_PANEL = "bottom_panel"
    BACK_PANEL = "back_panel"
    FIXED_SHELF = "fixed_shelf"
    ADJUSTABLE_SHELF = "adjustable_shelf"
    RUNNER_SHELF = "runner_shelf"
    DRAWER_FRONT = "drawer_front"
    DRAWER_SIDE = "drawer_side"
    DRAWER_BACK = "drawer_back"
    DRAWER_BOTTOM = "drawer_bottom"
    TOE_KICK_PANEL = "toe_kick_panel"
    RUNNER_STRIP = "runner_strip"


@dataclass(frozen=True)
class Component:
    """A single physical part of the cabinet.

    Dimensions are (width, height, depth) along the assembly axes and the
    position is the part's minimum corner in assembly space, measured from
    the bottom-front-left corner of the cabinet. Feature coordinates are
    local to the part's cutting face.

    Attributes:
        id: Stable identifier, unique within an assembly.
        label: Human-readable name.
        role: What the part is.
        dimensions: (w, h, d) in mm.
        position: (x, y, z) in mm.
        features: Holes, slots and notches cut into the part.
        layer: CNC layer of the part outline.
        material_thickness: Sheet thickness the part is cut from.
        rotation: Reserved, always identity.
    """

    id: str
    label: str
    role: ComponentRole
    dimensions: Vector3
    position: Vector3
    material_thickness: float
    features: tuple[Feature, ...] = ()
    layer: CNCLayer = CNCLayer.OUTSIDE_CUT
    rotation: Vector3 = IDENTITY_ROTATION

    @property
    def width(self) -> float:
        return self.dimensions[0]

    @property
    def height(self) -> float:
        return self.dimensions[1]

    @property
    def depth(self) -> float:
        return self.dimensions[2]

    def with_features(self, *features: Feature) -> Component:
        """Return a copy with features appended after the existing ones."""
        if not features:
            return self
        return replace(self, features=self.features + tuple(features))
