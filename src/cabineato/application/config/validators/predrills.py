"""Pre-drill feasibility checks for assembly screws and drawer slides."""

from __future__ import annotations

from cabineato.application.config.schema import AssemblyConfig
from cabineato.domain import constants as c
from cabineato.domain.geometry import CabinetGeometry

from .base import ValidationResult


def _check_positive(result: ValidationResult, path: str, label: str, value: float) -> None:
    if value <= 0:
        result.add_error(path, f"{label} must be positive, got {value:g}mm.", value)


class PredrillValidator:
    """Checks that pre-drilled holes land on the panels they belong to."""

    @property
    def name(self) -> str:
        return "predrills"

    def validate(self, config: AssemblyConfig) -> ValidationResult:
        result = ValidationResult()
        depth = config.global_bounds.d

        assembly = config.predrills.assembly
        if assembly.enabled:
            path = "predrills.assembly"
            _check_positive(result, f"{path}.pilotDiameter", "Pilot diameter", assembly.pilot_diameter)
            _check_positive(result, f"{path}.screwSpacing", "Screw spacing", assembly.screw_spacing)
            if assembly.countersink and assembly.countersink_diameter <= assembly.pilot_diameter:
                result.add_error(
                    f"{path}.countersinkDiameter",
                    f"Countersink diameter ({assembly.countersink_diameter:g}mm) must be "
                    f"larger than the pilot diameter ({assembly.pilot_diameter:g}mm).",
                    assembly.countersink_diameter,
                )
            if assembly.edge_distance < 0:
                result.add_error(
                    f"{path}.edgeDistance",
                    f"Edge distance must be non-negative, got {assembly.edge_distance:g}mm.",
                    assembly.edge_distance,
                )
            elif 2 * assembly.edge_distance >= depth:
                result.add_error(
                    f"{path}.edgeDistance",
                    f"Edge distance ({assembly.edge_distance:g}mm) from both ends leaves no "
                    f"room for screws in a {depth:g}mm deep cabinet.",
                    assembly.edge_distance,
                )

        slides = config.predrills.slides
        geometry = CabinetGeometry.from_config(config)
        if not slides.enabled or geometry.drawer_count == 0:
            return result

        path = "predrills.slides"
        _check_positive(result, f"{path}.holeDiameter", "Slide hole diameter", slides.hole_diameter)
        _check_positive(result, f"{path}.holeSpacing", "Slide hole spacing", slides.hole_spacing)
        if slides.holes_per_slide < 1:
            result.add_error(
                f"{path}.holesPerSlide",
                f"Need at least one hole per slide, got {slides.holes_per_slide}.",
                slides.holes_per_slide,
            )

        opening = geometry.drawer_opening_height
        if not 0 <= slides.mounting_height < opening:
            result.add_error(
                f"{path}.mountingHeight",
                f"Slide mounting height ({slides.mounting_height:g}mm) must fall inside "
                f"the {opening:g}mm drawer opening.",
                slides.mounting_height,
            )

        # The first hole must clear the rear margin or the row is empty
        max_x = depth - c.SLIDE_REAR_MARGIN
        if not 0 <= slides.front_offset <= max_x:
            result.add_error(
                f"{path}.frontOffset",
                f"Slide front offset ({slides.front_offset:g}mm) must be between 0mm "
                f"and {max_x:g}mm.",
                slides.front_offset,
            )

        return result
