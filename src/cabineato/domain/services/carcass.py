"""Carcass panel generation.

Builds the four structural panels (two sides, top, bottom), the toe-kick
notches and kick board, and the assembly and drawer slide pre-drills on the
side panels.

Side panel cutting faces use local x along the cabinet depth (0 at the
front edge) and local y up from the floor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cabineato.domain import constants as c
from cabineato.domain.geometry import CabinetGeometry, evenly_spaced
from cabineato.domain.value_objects import (
    Component,
    ComponentRole,
    CountersinkFeature,
    Feature,
    HoleFeature,
    HolePurpose,
    NotchCorner,
    NotchFeature,
)

if TYPE_CHECKING:
    from cabineato.application.config.schema import AssemblyConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CarcassPanels:
    """The four structural panels of the carcass."""

    left: Component
    right: Component
    top: Component
    bottom: Component

    def as_tuple(self) -> tuple[Component, ...]:
        """Panels in assembly order: left, right, top, bottom."""
        return (self.left, self.right, self.top, self.bottom)


def generate_carcass(config: AssemblyConfig, geometry: CabinetGeometry) -> CarcassPanels:
    """Generate the side, top and bottom panels.

    Side panels carry their toe-kick notch and any assembly pre-drills.
    Shelf, back panel and slide features are added by the builder.

    Args:
        config: The assembly configuration.
        geometry: Derived geometry for the configuration.

    Returns:
        CarcassPanels with all four panels.
    """
    return CarcassPanels(
        left=generate_side_panel(config, geometry, ComponentRole.SIDE_PANEL_LEFT),
        right=generate_side_panel(config, geometry, ComponentRole.SIDE_PANEL_RIGHT),
        top=generate_top_panel(config, geometry),
        bottom=generate_bottom_panel(config, geometry),
    )


def generate_side_panel(
    config: AssemblyConfig, geometry: CabinetGeometry, role: ComponentRole
) -> Component:
    """Generate a full-height side panel.

    Args:
        config: The assembly configuration.
        geometry: Derived geometry for the configuration.
        role: SIDE_PANEL_LEFT or SIDE_PANEL_RIGHT.

    Returns:
        The side panel with its notch and assembly pre-drills.

    Raises:
        ValueError: If role is not a side panel role.
    """
    t = geometry.thickness
    match role:
        case ComponentRole.SIDE_PANEL_LEFT:
            component_id, label, x = "side_panel_left", "Left Side Panel", 0.0
        case ComponentRole.SIDE_PANEL_RIGHT:
            component_id, label, x = "side_panel_right", "Right Side Panel", geometry.width - t
        case _:
            raise ValueError(f"Not a side panel role: {role.value}")

    features: list[Feature] = []
    notch = toe_kick_notch(geometry, role)
    if notch is not None:
        features.append(notch)
    features.extend(assembly_predrills(config, geometry))

    return Component(
        id=component_id,
        label=label,
        role=role,
        dimensions=(t, geometry.height, geometry.depth),
        position=(x, 0.0, 0.0),
        material_thickness=t,
        features=tuple(features),
    )


def generate_top_panel(config: AssemblyConfig, geometry: CabinetGeometry) -> Component:
    """Generate the top panel, captured between the side panels."""
    t = geometry.thickness
    return Component(
        id="top_panel",
        label="Top Panel",
        role=ComponentRole.TOP_PANEL,
        dimensions=(geometry.width - 2 * t, t, geometry.depth),
        position=(t, geometry.height - t, 0.0),
        material_thickness=t,
    )


def generate_bottom_panel(config: AssemblyConfig, geometry: CabinetGeometry) -> Component:
    """Generate the bottom panel, raised by the toe-kick height."""
    t = geometry.thickness
    return Component(
        id="bottom_panel",
        label="Bottom Panel",
        role=ComponentRole.BOTTOM_PANEL,
        dimensions=(geometry.width - 2 * t, t, geometry.depth),
        position=(t, geometry.toe_kick_height, 0.0),
        material_thickness=t,
    )


def generate_toe_kick_panel(
    config: AssemblyConfig, geometry: CabinetGeometry
) -> Component | None:
    """Generate the kick board closing the toe-kick recess.

    The board spans between the side panels with its front face flush with
    the back of the toe-kick notches.

    Returns:
        The kick board, or None when the toe kick or its panel is disabled.
    """
    toe_kick = config.features.toe_kick
    if not (toe_kick.enabled and toe_kick.generate_panel):
        return None
    t = geometry.thickness
    return Component(
        id="toe_kick_panel",
        label="Toe Kick Panel",
        role=ComponentRole.TOE_KICK_PANEL,
        dimensions=(geometry.width - 2 * t, geometry.toe_kick_height, t),
        position=(t, 0.0, geometry.toe_kick_depth),
        material_thickness=t,
    )


def toe_kick_notch(geometry: CabinetGeometry, role: ComponentRole) -> NotchFeature | None:
    """Toe-kick notch for a side panel, mirrored between left and right."""
    if geometry.toe_kick_height <= 0:
        return None
    if role == ComponentRole.SIDE_PANEL_LEFT:
        pos, corner = (0.0, 0.0), NotchCorner.BOTTOM_LEFT
    else:
        pos, corner = (geometry.thickness - geometry.toe_kick_depth, 0.0), NotchCorner.BOTTOM_RIGHT
    return NotchFeature(
        width=geometry.toe_kick_depth,
        height=geometry.toe_kick_height,
        pos=pos,
        corner=corner,
    )


def assembly_predrills(
    config: AssemblyConfig, geometry: CabinetGeometry
) -> list[HoleFeature | CountersinkFeature]:
    """Screw holes joining a side panel to the top and bottom panels.

    Holes run along the centerline of each butt joint, from the edge
    distance at the front to the edge distance at the rear.

    Returns:
        Bottom-edge holes front to back, then top-edge holes front to back.
        Empty when assembly pre-drills are disabled.
    """
    predrill = config.predrills.assembly
    if not predrill.enabled:
        return []

    t = geometry.thickness
    xs = evenly_spaced(
        predrill.edge_distance,
        geometry.depth - predrill.edge_distance,
        predrill.screw_spacing,
    )
    edge_lines = (geometry.toe_kick_height + t / 2, geometry.height - t / 2)

    holes: list[HoleFeature | CountersinkFeature] = []
    for y in edge_lines:
        for x in xs:
            if predrill.countersink:
                holes.append(
                    CountersinkFeature(
                        pilot_diameter=predrill.pilot_diameter,
                        countersink_diameter=predrill.countersink_diameter,
                        pilot_depth=0.0,
                        countersink_depth=predrill.countersink_diameter / 2,
                        pos=(x, y),
                        purpose=HolePurpose.ASSEMBLY,
                    )
                )
            else:
                holes.append(
                    HoleFeature(
                        diameter=predrill.pilot_diameter,
                        depth=0.0,
                        pos=(x, y),
                        purpose=HolePurpose.ASSEMBLY,
                    )
                )
    logger.debug(f"Generated {len(holes)} assembly pre-drills per side panel")
    return holes


def slide_predrills(config: AssemblyConfig, geometry: CabinetGeometry) -> list[HoleFeature]:
    """Drawer slide mounting holes for one side panel.

    One row per drawer opening at the configured mounting height above the
    opening bottom. Holes too close to the rear edge are dropped.

    Returns:
        Holes grouped by drawer, lowest drawer first. Empty unless drawers
        and slide pre-drills are both enabled.
    """
    slides = config.predrills.slides
    if not slides.enabled or geometry.drawer_count == 0:
        return []

    max_x = geometry.depth - c.SLIDE_REAR_MARGIN
    holes: list[HoleFeature] = []
    for i in range(geometry.drawer_count):
        y = geometry.drawer_opening_bottom(i) + slides.mounting_height
        for k in range(slides.holes_per_slide):
            x = slides.front_offset + k * slides.hole_spacing
            if x > max_x:
                continue
            holes.append(
                HoleFeature(
                    diameter=slides.hole_diameter,
                    depth=0.0,
                    pos=(x, y),
                    purpose=HolePurpose.SLIDE_MOUNT,
                )
            )
    return holes
