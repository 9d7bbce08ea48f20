"""Drawer generation.

Drawers stack evenly in the carcass interior. Each drawer is a box of two
sides, a back and a bottom behind an overlay front. Positions depend only on
the configuration and the drawer index, so drawers can be generated in any
order.

Drawer side cutting faces use local x along the box depth (0 at the front)
and local y up from the bottom edge of the side.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cabineato.domain import constants as c
from cabineato.domain.geometry import CabinetGeometry
from cabineato.domain.value_objects import (
    Component,
    ComponentRole,
    HoleFeature,
    HolePurpose,
    PullType,
    SlotFeature,
    SlotPurpose,
)

if TYPE_CHECKING:
    from cabineato.application.config.schema import AssemblyConfig, DrawerPullConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrawerBoxDimensions:
    """Dimensions shared by every drawer in the stack.

    Attributes:
        exterior_width: Outside width of the box between the slides.
        interior_width: Clear width between the box sides.
        depth: Front-to-back length of the box.
        height: Height of the box sides.
        front_width: Width of the overlay front.
        front_height: Height of each overlay front.
        bottom_thickness: Drawer bottom stock, and so the bottom dado width.
    """

    exterior_width: float
    interior_width: float
    depth: float
    height: float
    front_width: float
    front_height: float
    bottom_thickness: float

    @classmethod
    def from_config(cls, config: AssemblyConfig, geometry: CabinetGeometry) -> DrawerBoxDimensions:
        """Compute the shared drawer dimensions for a configuration."""
        drawers = config.features.drawers
        n = max(geometry.drawer_count, 1)
        exterior = geometry.interior.w - 2 * drawers.slide_width

        if geometry.is_back_inset:
            depth = geometry.inset_back_front_face - c.DRAWER_INSET_BACK_CLEARANCE
        else:
            depth = geometry.depth - c.DRAWER_REAR_CLEARANCE

        # The fronts cover the whole opening stack plus the overlay above and below
        overlay = drawers.overlay_amount
        front_height = (geometry.interior.h + 2 * overlay - (n - 1) * c.DRAWER_GAP) / n

        secondary = config.secondary_material.drawer_bottom_thickness
        return cls(
            exterior_width=exterior,
            interior_width=exterior - 2 * c.DRAWER_BOX_THICKNESS,
            depth=depth,
            height=geometry.drawer_opening_height - c.DRAWER_TOP_CLEARANCE,
            front_width=geometry.interior.w + 2 * overlay,
            front_height=front_height,
            bottom_thickness=secondary if secondary is not None else c.DRAWER_BOTTOM_THICKNESS,
        )


def pull_holes(pull: DrawerPullConfig, front_width: float, front_height: float) -> list[HoleFeature]:
    """Pull pre-drills on a drawer front's cutting face.

    Args:
        pull: Pull hole configuration.
        front_width: Width of the drawer front.
        front_height: Height of the drawer front.

    Returns:
        No holes, one centered hole, or two holes straddling the center.
    """
    y = front_height - pull.vertical_offset
    center_x = front_width / 2
    if pull.horizontal_position != "center":
        center_x += pull.horizontal_position

    match pull.type:
        case PullType.NONE:
            xs: tuple[float, ...] = ()
        case PullType.SINGLE:
            xs = (center_x,)
        case PullType.DOUBLE:
            half = pull.hole_spacing / 2
            xs = (center_x - half, center_x + half)

    return [
        HoleFeature(diameter=pull.hole_diameter, depth=0.0, pos=(x, y), purpose=HolePurpose.DRAWER_PULL)
        for x in xs
    ]


def generate_drawer(
    config: AssemblyConfig,
    geometry: CabinetGeometry,
    box: DrawerBoxDimensions,
    index: int,
) -> list[Component]:
    """Generate the five parts of drawer ``index`` (0 is the lowest drawer).

    Returns:
        Front, left side, right side, back and bottom.
    """
    drawers = config.features.drawers
    t = geometry.thickness
    n = index + 1
    bt = box.bottom_thickness
    side_t = c.DRAWER_BOX_THICKNESS
    dado_y = c.DRAWER_BOTTOM_DADO_OFFSET
    dado_depth = c.DRAWER_BOTTOM_DADO_DEPTH

    opening_bottom = geometry.drawer_opening_bottom(index)
    box_y = opening_bottom + (geometry.drawer_opening_height - box.height) / 2
    box_x = t + drawers.slide_width
    front_y = geometry.bottom_panel_top - drawers.overlay_amount + index * (
        box.front_height + c.DRAWER_GAP
    )

    front = Component(
        id=f"drawer_front_{n}",
        label=f"Drawer Front {n}",
        role=ComponentRole.DRAWER_FRONT,
        dimensions=(box.front_width, box.front_height, t),
        position=(t - drawers.overlay_amount, front_y, -t),
        material_thickness=t,
        features=tuple(pull_holes(drawers.pull_holes, box.front_width, box.front_height)),
    )

    bottom_dado = SlotFeature(
        width=bt,
        depth=dado_depth,
        path=((0.0, dado_y), (box.depth, dado_y)),
        purpose=SlotPurpose.DRAWER_BOTTOM,
    )
    left = Component(
        id=f"drawer_side_left_{n}",
        label=f"Drawer {n} Left Side",
        role=ComponentRole.DRAWER_SIDE,
        dimensions=(side_t, box.height, box.depth),
        position=(box_x, box_y, 0.0),
        material_thickness=side_t,
        features=(bottom_dado,),
    )
    right = Component(
        id=f"drawer_side_right_{n}",
        label=f"Drawer {n} Right Side",
        role=ComponentRole.DRAWER_SIDE,
        dimensions=(side_t, box.height, box.depth),
        position=(box_x + box.exterior_width - side_t, box_y, 0.0),
        material_thickness=side_t,
        features=(bottom_dado,),
    )

    # The back stands on the bottom, which runs the full box depth under it
    bottom_top = dado_y + bt / 2
    back = Component(
        id=f"drawer_back_{n}",
        label=f"Drawer {n} Back",
        role=ComponentRole.DRAWER_BACK,
        dimensions=(box.interior_width, box.height - bottom_top, side_t),
        position=(box_x + side_t, box_y + bottom_top, box.depth - side_t),
        material_thickness=side_t,
    )
    bottom = Component(
        id=f"drawer_bottom_{n}",
        label=f"Drawer {n} Bottom",
        role=ComponentRole.DRAWER_BOTTOM,
        dimensions=(box.interior_width + 2 * dado_depth, bt, box.depth),
        position=(box_x + side_t - dado_depth, box_y + dado_y - bt / 2, 0.0),
        material_thickness=bt,
    )
    return [front, left, right, back, bottom]


def generate_drawers(config: AssemblyConfig, geometry: CabinetGeometry) -> list[Component]:
    """Generate every drawer, lowest first.

    Returns:
        Five components per drawer. Empty when drawers are disabled.
    """
    if geometry.drawer_count == 0:
        return []
    box = DrawerBoxDimensions.from_config(config, geometry)
    components: list[Component] = []
    for i in range(geometry.drawer_count):
        components.extend(generate_drawer(config, geometry, box, i))
    logger.debug(
        f"Generated {geometry.drawer_count} drawers, box "
        f"{box.exterior_width:.1f} x {box.height:.1f} x {box.depth:.1f}"
    )
    return components
