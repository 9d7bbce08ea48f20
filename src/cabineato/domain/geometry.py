"""Derived cabinet geometry shared by every generator.

Quantities such as the interior bounds, the toe-kick offset or the shelf pin
rows are needed by several generators at once. They are computed here once
per build and handed to each generator, so panels that must agree (a dado
and the shelf seated in it, the left and right pin columns) read the same
number instead of re-deriving it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cabineato.domain import constants as c
from cabineato.domain.value_objects import BackPanelType, Bounds

if TYPE_CHECKING:
    from cabineato.application.config.schema import AssemblyConfig

# Absorbs float error when counting rows that land exactly on a limit
_EPSILON = 1e-9


def evenly_spaced(start: float, end: float, max_spacing: float) -> tuple[float, ...]:
    """Positions from start to end, inclusive, no further apart than max_spacing.

    The span is divided into the fewest equal intervals whose length does not
    exceed ``max_spacing``, so the first and last positions always sit on the
    span ends. A span of zero or less yields the single start position.

    Args:
        start: First position.
        end: Last position.
        max_spacing: Largest allowed interval.

    Returns:
        Tuple of positions in ascending order.
    """
    span = end - start
    if span <= 0 or max_spacing <= 0:
        return (start,)
    intervals = max(1, math.ceil(span / max_spacing - _EPSILON))
    step = span / intervals
    return tuple(start + step * i for i in range(intervals + 1))


def pitch_rows(start: float, end: float, pitch: float) -> tuple[float, ...]:
    """Rows from start at a fixed pitch, stopping at or before end."""
    if end <= start or pitch <= 0:
        return ()
    count = math.floor((end - start) / pitch + _EPSILON) + 1
    return tuple(start + pitch * i for i in range(count))


@dataclass(frozen=True)
class CabinetGeometry:
    """Quantities derived from a configuration, computed once per build.

    Attributes:
        width: Overall width.
        height: Overall height.
        depth: Overall depth.
        thickness: Carcass material thickness.
        toe_kick_height: Toe-kick height, 0 when disabled.
        toe_kick_depth: Toe-kick depth, 0 when disabled.
        interior: Clear space between the carcass panels.
        back_panel_type: How the back is attached.
        back_panel_thickness: Effective back thickness (secondary override first).
        back_dado_depth: Depth of the inset back dados.
        back_inset_distance: Rear edge to back of the inset dado.
        shelf_pin_rows: Y of every System 32 row, shared by both side panels.
        drawer_count: Number of drawers, 0 when drawers are disabled.
        drawer_opening_height: Height of each drawer opening.
    """

    width: float
    height: float
    depth: float
    thickness: float
    toe_kick_height: float
    toe_kick_depth: float
    interior: Bounds
    back_panel_type: BackPanelType
    back_panel_thickness: float
    back_dado_depth: float
    back_inset_distance: float
    shelf_pin_rows: tuple[float, ...]
    drawer_count: int
    drawer_opening_height: float

    @classmethod
    def from_config(cls, config: AssemblyConfig) -> CabinetGeometry:
        """Derive the shared geometry of a configuration."""
        bounds = config.global_bounds
        t = config.material.thickness
        toe_kick = config.features.toe_kick
        toe_kick_height = toe_kick.height if toe_kick.enabled else 0.0
        toe_kick_depth = toe_kick.depth if toe_kick.enabled else 0.0

        interior = Bounds(
            w=bounds.w - 2 * t,
            h=bounds.h - 2 * t - toe_kick_height,
            d=bounds.d,
        )

        back = config.back_panel
        secondary_back = config.secondary_material.back_panel_thickness
        back_thickness = secondary_back if secondary_back is not None else back.thickness

        bottom_panel_top = toe_kick_height + t
        top_panel_bottom = bounds.h - t
        shelf_pin_rows = pitch_rows(
            bottom_panel_top + c.SHELF_PIN_VERTICAL_MARGIN,
            top_panel_bottom - c.SHELF_PIN_VERTICAL_MARGIN,
            c.SHELF_PIN_SPACING,
        )

        drawers = config.features.drawers
        drawer_count = max(drawers.count, 0) if drawers.enabled else 0
        if drawer_count > 0:
            opening_height = (interior.h - (drawer_count - 1) * c.DRAWER_GAP) / drawer_count
        else:
            opening_height = 0.0

        return cls(
            width=bounds.w,
            height=bounds.h,
            depth=bounds.d,
            thickness=t,
            toe_kick_height=toe_kick_height,
            toe_kick_depth=toe_kick_depth,
            interior=interior,
            back_panel_type=back.type,
            back_panel_thickness=back_thickness,
            back_dado_depth=back.dado_depth,
            back_inset_distance=back.inset_distance,
            shelf_pin_rows=shelf_pin_rows,
            drawer_count=drawer_count,
            drawer_opening_height=opening_height,
        )

    @property
    def bottom_panel_top(self) -> float:
        """Y of the top face of the bottom panel (the interior floor)."""
        return self.toe_kick_height + self.thickness

    @property
    def top_panel_bottom(self) -> float:
        """Y of the underside of the top panel (the interior ceiling)."""
        return self.height - self.thickness

    @property
    def is_back_inset(self) -> bool:
        return self.back_panel_type == BackPanelType.INSET

    @property
    def back_dado_center(self) -> float:
        """Distance from the front edge to the inset back dado centerline."""
        return self.depth - self.back_inset_distance - self.back_panel_thickness / 2

    @property
    def inset_back_front_face(self) -> float:
        """Distance from the front edge to the front face of an inset back."""
        return self.depth - self.back_inset_distance - self.back_panel_thickness

    def interior_y(self, height_above_floor: float) -> float:
        """Convert a height measured from the interior floor to assembly Y."""
        return self.bottom_panel_top + height_above_floor

    def drawer_opening_bottom(self, index: int) -> float:
        """Y of the bottom of drawer opening ``index`` (0 is lowest)."""
        return self.bottom_panel_top + index * (self.drawer_opening_height + c.DRAWER_GAP)
