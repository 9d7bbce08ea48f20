"""Drawer feasibility checks."""

from __future__ import annotations

from cabineato.application.config.schema import AssemblyConfig, DrawerPullConfig
from cabineato.domain import constants as c
from cabineato.domain.geometry import CabinetGeometry
from cabineato.domain.services.drawers import DrawerBoxDimensions
from cabineato.domain.value_objects import PullType

from .base import ValidationResult


class DrawerValidator:
    """Checks drawer boxes fit between the slides and in their openings."""

    @property
    def name(self) -> str:
        return "drawers"

    def validate(self, config: AssemblyConfig) -> ValidationResult:
        result = ValidationResult()
        drawers = config.features.drawers
        if not drawers.enabled:
            return result

        path = "features.drawers"
        if drawers.slide_width < 0:
            result.add_error(
                f"{path}.slideWidth",
                f"Slide width must be non-negative, got {drawers.slide_width:g}mm.",
                drawers.slide_width,
            )
        if drawers.count < 0:
            result.add_error(
                f"{path}.count",
                f"Drawer count must be non-negative, got {drawers.count}.",
                drawers.count,
            )

        geometry = CabinetGeometry.from_config(config)
        box = DrawerBoxDimensions.from_config(config, geometry)
        if box.exterior_width < c.DRAWER_MIN_BOX_WIDTH:
            result.add_error(
                f"{path}.slideWidth",
                f"Drawer box width ({box.exterior_width:g}mm) is too small after slide "
                f"clearance. Need at least {c.DRAWER_MIN_BOX_WIDTH:g}mm.",
                box.exterior_width,
            )
        if geometry.drawer_count > 0 and box.height < c.DRAWER_MIN_BOX_HEIGHT:
            result.add_error(
                f"{path}.count",
                f"Drawer height ({box.height:g}mm) is below minimum of "
                f"{c.DRAWER_MIN_BOX_HEIGHT:g}mm. Reduce drawer count or increase "
                f"cabinet height.",
                box.height,
            )

        pull = drawers.pull_holes
        if pull.type != PullType.NONE and pull.hole_diameter <= 0:
            result.add_error(
                f"{path}.pullHoles.holeDiameter",
                f"Pull hole diameter must be positive, got {pull.hole_diameter:g}mm.",
                pull.hole_diameter,
            )
        if pull.type == PullType.DOUBLE and pull.hole_spacing <= 0:
            result.add_error(
                f"{path}.pullHoles.holeSpacing",
                f"Pull hole spacing must be positive, got {pull.hole_spacing:g}mm.",
                pull.hole_spacing,
            )
        if pull.type != PullType.NONE and geometry.drawer_count > 0:
            self._check_pull_position(result, f"{path}.pullHoles", pull, box)

        return result

    @staticmethod
    def _check_pull_position(
        result: ValidationResult, path: str, pull: DrawerPullConfig, box: DrawerBoxDimensions
    ) -> None:
        """Pull holes must land on the drawer front."""
        if not 0 < pull.vertical_offset < box.front_height:
            result.add_error(
                f"{path}.verticalOffset",
                f"Pull vertical offset ({pull.vertical_offset:g}mm) must be inside the "
                f"{box.front_height:g}mm drawer front.",
                pull.vertical_offset,
            )

        offset = 0.0 if pull.horizontal_position == "center" else pull.horizontal_position
        half_spread = pull.hole_spacing / 2 if pull.type == PullType.DOUBLE else 0.0
        if abs(offset) + half_spread >= box.front_width / 2:
            result.add_error(
                f"{path}.horizontalPosition",
                f"Pull holes at {offset:g}mm from center would run off the "
                f"{box.front_width:g}mm drawer front.",
                offset,
            )
