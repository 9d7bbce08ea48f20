"""Back panel generation.

The back is either applied (nailed over the rear edges), inset (seated in
dados cut into all four carcass panels) or omitted. Inset dados are returned
separately so the builder can append them to the carcass panels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cabineato.domain.geometry import CabinetGeometry
from cabineato.domain.value_objects import (
    BackPanelType,
    Component,
    ComponentRole,
    SlotFeature,
    SlotPurpose,
)

if TYPE_CHECKING:
    from cabineato.application.config.schema import AssemblyConfig


@dataclass(frozen=True)
class BackPanelDados:
    """Dado slots that receive an inset back panel.

    Attributes:
        side: Vertical slot for each side panel.
        horizontal: Horizontal slot for the top and bottom panels.
    """

    side: SlotFeature
    horizontal: SlotFeature


def generate_back_panel(config: AssemblyConfig, geometry: CabinetGeometry) -> Component | None:
    """Generate the back panel for the configured attachment type.

    Args:
        config: The assembly configuration.
        geometry: Derived geometry for the configuration.

    Returns:
        The back panel, or None for BackPanelType.NONE.
    """
    t = geometry.thickness
    bt = geometry.back_panel_thickness

    match geometry.back_panel_type:
        case BackPanelType.NONE:
            return None
        case BackPanelType.APPLIED:
            return Component(
                id="back_panel",
                label="Back Panel",
                role=ComponentRole.BACK_PANEL,
                dimensions=(geometry.width, geometry.height - geometry.toe_kick_height, bt),
                position=(0.0, geometry.toe_kick_height, geometry.depth - bt),
                material_thickness=bt,
            )
        case BackPanelType.INSET:
            dd = geometry.back_dado_depth
            return Component(
                id="back_panel",
                label="Back Panel (Inset)",
                role=ComponentRole.BACK_PANEL,
                dimensions=(geometry.interior.w + 2 * dd, geometry.interior.h + 2 * dd, bt),
                position=(t - dd, geometry.bottom_panel_top - dd, geometry.inset_back_front_face),
                material_thickness=bt,
            )


def back_panel_dados(config: AssemblyConfig, geometry: CabinetGeometry) -> BackPanelDados | None:
    """Dados for an inset back panel.

    Every slot is exactly as wide as the back panel and as deep as the
    configured dado depth. The side slot runs the full height above the toe
    kick; the horizontal slot runs the full width of the top/bottom panels.

    Returns:
        The dados, or None unless the back panel is inset.
    """
    if not geometry.is_back_inset:
        return None

    width = geometry.back_panel_thickness
    depth = geometry.back_dado_depth
    center = geometry.back_dado_center
    side = SlotFeature(
        width=width,
        depth=depth,
        path=((center, geometry.toe_kick_height), (center, geometry.height)),
        purpose=SlotPurpose.BACK_PANEL,
    )
    horizontal = SlotFeature(
        width=width,
        depth=depth,
        path=((0.0, center), (geometry.interior.w, center)),
        purpose=SlotPurpose.BACK_PANEL,
    )
    return BackPanelDados(side=side, horizontal=horizontal)
