"""Subtractive machining features attached to components.

Features form a closed union: every consumer dispatches on the ``kind``
discriminant, so adding a feature type means extending ``Feature`` and every
``match`` statement that handles it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

Vector2 = tuple[float, float]
Vector3 = tuple[float, float, float]


class HolePurpose(str, Enum):
    """Why a hole is drilled; drives layer assignment downstream."""

    SHELF_PIN = "shelf_pin"
    ASSEMBLY = "assembly"
    HARDWARE = "hardware"
    DRAWER_PULL = "drawer_pull"
    SHELF_RUNNER = "shelf_runner"
    SLIDE_MOUNT = "slide_mount"


class SlotPurpose(str, Enum):
    """Which panel a dado slot receives."""

    BACK_PANEL = "back_panel"
    FIXED_SHELF = "fixed_shelf"
    DRAWER_BOTTOM = "drawer_bottom"


class NotchCorner(str, Enum):
    """Panel corner a rectangular notch is cut from."""

    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"


@dataclass(frozen=True)
class HoleFeature:
    """A drilled hole.

    Attributes:
        diameter: Hole diameter in mm.
        depth: Hole depth in mm, 0 for a through hole.
        pos: Hole center on the component's cutting face.
        purpose: What the hole is for.
    """

    diameter: float
    depth: float
    pos: Vector2
    purpose: HolePurpose
    kind: Literal["hole"] = field(default="hole", init=False)

    @property
    def is_through(self) -> bool:
        return self.depth == 0


@dataclass(frozen=True)
class CountersinkFeature:
    """A pilot hole with a countersunk screw head recess.

    Attributes:
        pilot_diameter: Pilot hole diameter in mm.
        countersink_diameter: Diameter of the countersink at the surface.
        pilot_depth: Pilot depth in mm, 0 for through.
        countersink_depth: Depth of the countersink cone.
        pos: Hole center on the component's cutting face.
        purpose: What the hole is for.
    """

    pilot_diameter: float
    countersink_diameter: float
    pilot_depth: float
    countersink_depth: float
    pos: Vector2
    purpose: HolePurpose = HolePurpose.ASSEMBLY
    kind: Literal["countersink"] = field(default="countersink", init=False)


@dataclass(frozen=True)
class SlotFeature:
    """A dado slot along a centerline path.

    The slot width always matches the thickness of the panel seated in it.

    Attributes:
        width: Slot width in mm.
        depth: Slot depth in mm.
        path: Centerline points on the component's cutting face.
        purpose: Which panel the slot receives.
    """

    width: float
    depth: float
    path: tuple[Vector2, ...]
    purpose: SlotPurpose
    kind: Literal["slot"] = field(default="slot", init=False)


@dataclass(frozen=True)
class NotchFeature:
    """A rectangular notch removed from a panel corner.

    Attributes:
        width: Notch extent along local x in mm.
        height: Notch extent along local y in mm.
        pos: Lower-left corner of the notch rectangle.
        corner: Panel corner the notch opens onto.
    """

    width: float
    height: float
    pos: Vector2
    corner: NotchCorner
    kind: Literal["notch"] = field(default="notch", init=False)


Feature = HoleFeature | CountersinkFeature | SlotFeature | NotchFeature
