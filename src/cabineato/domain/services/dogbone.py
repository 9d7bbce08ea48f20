"""Dogbone corner reliefs for internal corners.

A round router bit cannot cut a sharp internal corner. A dogbone is an extra
circular plunge at the corner so the mating panel can seat fully. This
module only computes where the circles go; emitting them as geometry is up
to the export consumer.

Paths are expected in counter-clockwise winding. With that winding a
corner is internal when the cross product of the vectors to its previous
and next points is positive.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from cabineato.domain.value_objects import (
    Component,
    Feature,
    NotchCorner,
    NotchFeature,
    SlotFeature,
    Vector2,
)

# Vectors shorter than this are treated as zero
_TOLERANCE = 1e-10


class DogboneDirection(str, Enum):
    """How the relief circle is offset from the corner.

    DIAGONAL moves the center along the corner bisector. HORIZONTAL and
    VERTICAL (T-bones) move it along one edge, which keeps the corner on
    the circle and hides the relief behind the mating panel.
    """

    DIAGONAL = "diagonal"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class DogboneFillet:
    """A relief circle for one corner.

    Attributes:
        center: Circle center.
        radius: Circle radius, half the bit diameter.
        corner_index: Index of the corner in the source boundary.
    """

    center: Vector2
    radius: float
    corner_index: int


def _unit(dx: float, dy: float) -> Vector2 | None:
    length = math.hypot(dx, dy)
    if length < _TOLERANCE:
        return None
    return (dx / length, dy / length)


def dogbone_center(
    corner: Vector2,
    bit_radius: float,
    prev_point: Vector2,
    next_point: Vector2,
    direction: DogboneDirection = DogboneDirection.DIAGONAL,
) -> Vector2:
    """Center of the relief circle for a corner.

    For DIAGONAL placement the unit vectors towards both neighbours are
    summed and normalized to give the bisector, and the center is placed at
    ``bit_radius * sqrt(2)`` along it. That distance keeps the circle
    tangent to both edges of a right-angle corner.

    Degenerate corners (a neighbour coincides with the corner, or the two
    edges are collinear so the bisector cancels out) return the corner
    itself.

    Args:
        corner: The corner point.
        bit_radius: Half the bit diameter.
        prev_point: Previous point along the boundary.
        next_point: Next point along the boundary.
        direction: Placement strategy.

    Returns:
        The relief circle center.
    """
    to_prev = _unit(prev_point[0] - corner[0], prev_point[1] - corner[1])
    to_next = _unit(next_point[0] - corner[0], next_point[1] - corner[1])
    if to_prev is None or to_next is None:
        return corner

    match direction:
        case DogboneDirection.DIAGONAL:
            bisector = _unit(to_prev[0] + to_next[0], to_prev[1] + to_next[1])
            if bisector is None:
                return corner
            offset = bit_radius * math.sqrt(2)
            return (corner[0] + bisector[0] * offset, corner[1] + bisector[1] * offset)
        case DogboneDirection.HORIZONTAL:
            # Along whichever edge runs more nearly along x
            edge = to_prev if abs(to_prev[0]) >= abs(to_next[0]) else to_next
            step = math.copysign(bit_radius, edge[0])
            return (corner[0] + step, corner[1])
        case DogboneDirection.VERTICAL:
            edge = to_prev if abs(to_prev[1]) >= abs(to_next[1]) else to_next
            step = math.copysign(bit_radius, edge[1])
            return (corner[0], corner[1] + step)


def is_internal_corner(prev_point: Vector2, corner: Vector2, next_point: Vector2) -> bool:
    """True when the corner is concave on a counter-clockwise path."""
    v1 = (prev_point[0] - corner[0], prev_point[1] - corner[1])
    v2 = (next_point[0] - corner[0], next_point[1] - corner[1])
    return v1[0] * v2[1] - v1[1] * v2[0] > 0


def _fillets(
    corners: list[tuple[Vector2, Vector2, Vector2]],
    bit_diameter: float,
    direction: DogboneDirection,
) -> list[DogboneFillet]:
    radius = bit_diameter / 2
    return [
        DogboneFillet(
            center=dogbone_center(corner, radius, prev_point, next_point, direction),
            radius=radius,
            corner_index=i,
        )
        for i, (corner, prev_point, next_point) in enumerate(corners)
    ]


def rectangle_dogbones(
    x: float,
    y: float,
    width: float,
    height: float,
    bit_diameter: float,
    direction: DogboneDirection = DogboneDirection.DIAGONAL,
) -> list[DogboneFillet]:
    """Reliefs for all four corners of a rectangular pocket.

    Corners are listed counter-clockwise from the lower-left, each paired
    with its neighbours along the pocket boundary.
    """
    bl = (x, y)
    br = (x + width, y)
    tr = (x + width, y + height)
    tl = (x, y + height)
    corners = [
        (bl, tl, br),
        (br, bl, tr),
        (tr, br, tl),
        (tl, tr, bl),
    ]
    return _fillets(corners, bit_diameter, direction)


def notch_dogbones(
    x: float,
    y: float,
    width: float,
    height: float,
    corner: NotchCorner,
    bit_diameter: float,
    direction: DogboneDirection = DogboneDirection.DIAGONAL,
) -> list[DogboneFillet]:
    """Reliefs for the two corners a corner notch creates.

    The notch rectangle opens onto the given panel corner. Its two corners
    that meet the panel edges are the ones the cut creates; each is paired
    with a point just outside the panel edge and with the corner the notch
    opens onto.

    Args:
        x: Notch rectangle left.
        y: Notch rectangle bottom.
        width: Notch width.
        height: Notch height.
        corner: Panel corner the notch opens onto.
        bit_diameter: Router bit diameter.
        direction: Placement strategy.

    Returns:
        Two fillets.
    """
    match corner:
        case NotchCorner.BOTTOM_LEFT:
            corners = [
                ((x + width, y), (x + width, y - 1), (x, y)),
                ((x, y + height), (x, y), (x - 1, y + height)),
            ]
        case NotchCorner.BOTTOM_RIGHT:
            corners = [
                ((x, y), (x + width, y), (x, y - 1)),
                ((x + width, y + height), (x + width + 1, y + height), (x + width, y)),
            ]
        case NotchCorner.TOP_LEFT:
            corners = [
                ((x, y), (x - 1, y), (x, y + height)),
                ((x + width, y + height), (x, y + height), (x + width, y + height + 1)),
            ]
        case NotchCorner.TOP_RIGHT:
            corners = [
                ((x + width, y), (x + width, y + height), (x + width + 1, y)),
                ((x, y + height), (x, y + height + 1), (x + width, y + height)),
            ]
    return _fillets(corners, bit_diameter, direction)


def apply_dogbones_to_path(
    path: list[Vector2],
    bit_diameter: float,
    direction: DogboneDirection = DogboneDirection.DIAGONAL,
) -> tuple[list[Vector2], list[DogboneFillet]]:
    """Reliefs for every internal corner of a closed counter-clockwise path.

    Args:
        path: Closed polygon vertices, without repeating the first point.
        bit_diameter: Router bit diameter.
        direction: Placement strategy.

    Returns:
        The unchanged path and one fillet per internal corner, indexed by
        vertex position in the path.
    """
    if len(path) < 3:
        return list(path), []

    radius = bit_diameter / 2
    fillets = []
    for i, corner in enumerate(path):
        prev_point = path[i - 1]
        next_point = path[(i + 1) % len(path)]
        if is_internal_corner(prev_point, corner, next_point):
            fillets.append(
                DogboneFillet(
                    center=dogbone_center(corner, radius, prev_point, next_point, direction),
                    radius=radius,
                    corner_index=i,
                )
            )
    return list(path), fillets


def slot_rectangle(slot: SlotFeature) -> tuple[float, float, float, float] | None:
    """Axis-aligned pocket (x, y, width, height) swept by a straight slot.

    Returns:
        The pocket, or None for slots that are not a single horizontal or
        vertical segment.
    """
    if len(slot.path) != 2:
        return None
    (x1, y1), (x2, y2) = slot.path
    half = slot.width / 2
    if abs(y1 - y2) < _TOLERANCE:
        return (min(x1, x2), y1 - half, abs(x2 - x1), slot.width)
    if abs(x1 - x2) < _TOLERANCE:
        return (x1 - half, min(y1, y2), slot.width, abs(y2 - y1))
    return None


def feature_dogbones(
    feature: Feature,
    bit_diameter: float,
    direction: DogboneDirection = DogboneDirection.DIAGONAL,
) -> list[DogboneFillet]:
    """Reliefs needed by a single feature; holes need none."""
    match feature:
        case SlotFeature():
            rect = slot_rectangle(feature)
            if rect is None:
                return []
            return rectangle_dogbones(*rect, bit_diameter, direction)
        case NotchFeature():
            return notch_dogbones(
                feature.pos[0],
                feature.pos[1],
                feature.width,
                feature.height,
                feature.corner,
                bit_diameter,
                direction,
            )
        case _:
            return []


def component_dogbones(
    component: Component,
    bit_diameter: float,
    direction: DogboneDirection = DogboneDirection.DIAGONAL,
) -> list[tuple[int, list[DogboneFillet]]]:
    """Reliefs for every slot and notch of a component.

    Returns:
        (feature index, fillets) pairs for features that need reliefs.
    """
    result = []
    for i, feature in enumerate(component.features):
        fillets = feature_dogbones(feature, bit_diameter, direction)
        if fillets:
            result.append((i, fillets))
    return result
