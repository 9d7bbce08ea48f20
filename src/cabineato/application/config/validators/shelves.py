"""Shelf feasibility checks for the adjustable, fixed and runner systems."""

from __future__ import annotations

from cabineato.application.config.schema import AssemblyConfig
from cabineato.domain import constants as c
from cabineato.domain.geometry import CabinetGeometry
from cabineato.domain.services.shelves import fixed_shelf_thickness

from .base import ValidationResult


def _check_setbacks(
    result: ValidationResult, path: str, front: float, rear: float, depth: float
) -> None:
    if front < 0:
        result.add_error(
            f"{path}.frontSetback", f"Front setback must be non-negative, got {front:g}mm.", front
        )
    if rear < 0:
        result.add_error(
            f"{path}.rearSetback", f"Rear setback must be non-negative, got {rear:g}mm.", rear
        )
    if front + rear >= depth:
        result.add_error(
            path,
            f"Combined setbacks ({front + rear:g}mm) exceed cabinet depth ({depth:g}mm).",
            front + rear,
        )


class ShelfValidator:
    """Checks every enabled shelf system has room to be built."""

    @property
    def name(self) -> str:
        return "shelves"

    def validate(self, config: AssemblyConfig) -> ValidationResult:
        result = ValidationResult()
        shelves = config.features.shelves
        geometry = CabinetGeometry.from_config(config)
        depth = config.global_bounds.d
        interior_h = geometry.interior.h

        adjustable = shelves.adjustable
        if adjustable.enabled:
            path = "features.shelves.adjustable"
            _check_setbacks(result, path, adjustable.front_setback, adjustable.rear_setback, depth)
            vertical_space = (
                geometry.top_panel_bottom
                - geometry.bottom_panel_top
                - 2 * c.SHELF_PIN_VERTICAL_MARGIN
            )
            if vertical_space < c.SHELF_PIN_SPACING:
                result.add_error(
                    path,
                    f"Not enough vertical space ({vertical_space:g}mm) for shelf pin holes. "
                    f"Need at least {c.SHELF_PIN_SPACING:g}mm.",
                    vertical_space,
                )
            if adjustable.count < 0:
                result.add_error(
                    f"{path}.count",
                    "Adjustable shelf count must be non-negative.",
                    adjustable.count,
                )

        fixed = shelves.fixed
        if fixed.enabled:
            path = "features.shelves.fixed"
            half = fixed_shelf_thickness(config) / 2
            for i, position in enumerate(fixed.positions):
                if position - half < 0:
                    result.add_error(
                        f"{path}.positions[{i}]",
                        f"Fixed shelf position {i + 1} ({position:g}mm) leaves the shelf "
                        f"below the interior floor.",
                        position,
                    )
                elif position + half > interior_h:
                    result.add_error(
                        f"{path}.positions[{i}]",
                        f"Fixed shelf position {i + 1} ({position:g}mm) exceeds interior "
                        f"height ({interior_h:g}mm).",
                        position,
                    )
            t = config.material.thickness
            if fixed.dado_depth <= 0:
                result.add_error(
                    f"{path}.dadoDepth",
                    f"Dado depth must be positive, got {fixed.dado_depth:g}mm.",
                    fixed.dado_depth,
                )
            elif fixed.dado_depth > t * c.DADO_DEPTH_FRACTION:
                result.add_error(
                    f"{path}.dadoDepth",
                    f"Dado depth ({fixed.dado_depth:g}mm) should not exceed half of "
                    f"material thickness ({t * c.DADO_DEPTH_FRACTION:g}mm).",
                    fixed.dado_depth,
                )

        runners = shelves.runners
        if runners.enabled:
            path = "features.shelves.runners"
            for i, position in enumerate(runners.positions):
                if position < 0:
                    result.add_error(
                        f"{path}.positions[{i}]",
                        f"Shelf runner position {i + 1} ({position:g}mm) must be non-negative.",
                        position,
                    )
                elif position > interior_h:
                    result.add_error(
                        f"{path}.positions[{i}]",
                        f"Shelf runner position {i + 1} ({position:g}mm) exceeds interior "
                        f"height ({interior_h:g}mm).",
                        position,
                    )
            _check_setbacks(result, path, runners.front_setback, runners.rear_setback, depth)
            if runners.holes_per_runner < 1:
                result.add_error(
                    f"{path}.holesPerRunner",
                    f"Each runner needs at least one hole, got {runners.holes_per_runner}.",
                    runners.holes_per_runner,
                )
            if runners.hole_diameter <= 0:
                result.add_error(
                    f"{path}.holeDiameter",
                    f"Runner hole diameter must be positive, got {runners.hole_diameter:g}mm.",
                    runners.hole_diameter,
                )

        return result
