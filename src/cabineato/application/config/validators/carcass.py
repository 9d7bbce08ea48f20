"""Carcass feasibility checks: overall size, material and toe kick."""

from __future__ import annotations

from cabineato.application.config.schema import AssemblyConfig
from cabineato.domain import constants as c
from cabineato.domain.geometry import CabinetGeometry

from .base import ValidationResult


class CarcassValidator:
    """Checks that the carcass can be built at all."""

    @property
    def name(self) -> str:
        return "carcass"

    def validate(self, config: AssemblyConfig) -> ValidationResult:
        result = ValidationResult()
        bounds = config.global_bounds
        t = config.material.thickness
        geometry = CabinetGeometry.from_config(config)
        interior = geometry.interior

        if interior.w <= 0:
            result.add_error(
                "material.thickness",
                f"Interior width would be {interior.w:g}mm. Material thickness "
                f"({t:g}mm x 2 = {2 * t:g}mm) leaves no room inside a "
                f"{bounds.w:g}mm wide cabinet.",
                interior.w,
            )
        if interior.h <= 0:
            result.add_error(
                "globalBounds.h",
                f"Interior height would be {interior.h:g}mm. Combined thickness of "
                f"top ({t:g}mm), bottom ({t:g}mm) and toe kick "
                f"({geometry.toe_kick_height:g}mm) exceeds cabinet height ({bounds.h:g}mm).",
                interior.h,
            )

        for axis, label in (("w", "width"), ("h", "height"), ("d", "depth")):
            value = getattr(bounds, axis)
            if value < c.MIN_DIMENSION:
                result.add_error(
                    f"globalBounds.{axis}",
                    f"Cabinet {label} ({value:g}mm) is below minimum of {c.MIN_DIMENSION:g}mm.",
                    value,
                )

        if t <= 0:
            result.add_error(
                "material.thickness", f"Material thickness must be positive, got {t:g}mm.", t
            )
        elif t > c.MAX_MATERIAL_THICKNESS:
            result.add_error(
                "material.thickness",
                f"Material thickness ({t:g}mm) exceeds maximum of {c.MAX_MATERIAL_THICKNESS:g}mm.",
                t,
            )

        if config.material.kerf < 0:
            result.add_error(
                "material.kerf",
                f"Kerf must be non-negative, got {config.material.kerf:g}mm.",
                config.material.kerf,
            )
        if config.machining.bit_diameter <= 0:
            result.add_error(
                "machining.bitDiameter",
                f"Bit diameter must be positive, got {config.machining.bit_diameter:g}mm.",
                config.machining.bit_diameter,
            )

        toe_kick = config.features.toe_kick
        if toe_kick.enabled:
            if toe_kick.height <= 0:
                result.add_error(
                    "features.toeKick.height",
                    f"Toe kick height must be positive, got {toe_kick.height:g}mm.",
                    toe_kick.height,
                )
            if toe_kick.depth <= 0:
                result.add_error(
                    "features.toeKick.depth",
                    f"Toe kick depth must be positive, got {toe_kick.depth:g}mm.",
                    toe_kick.depth,
                )
            elif toe_kick.depth >= bounds.d:
                result.add_error(
                    "features.toeKick.depth",
                    f"Toe kick depth ({toe_kick.depth:g}mm) must be less than "
                    f"cabinet depth ({bounds.d:g}mm).",
                    toe_kick.depth,
                )

        return result
