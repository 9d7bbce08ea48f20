"""Back panel feasibility checks."""

from __future__ import annotations

from cabineato.application.config.schema import AssemblyConfig
from cabineato.domain.geometry import CabinetGeometry
from cabineato.domain.value_objects import BackPanelType

from .base import ValidationResult


class BackPanelValidator:
    """Checks the back panel fits its dados and the cabinet depth."""

    @property
    def name(self) -> str:
        return "back_panel"

    def validate(self, config: AssemblyConfig) -> ValidationResult:
        result = ValidationResult()
        back = config.back_panel
        if back.type == BackPanelType.NONE:
            return result

        thickness = CabinetGeometry.from_config(config).back_panel_thickness
        if thickness <= 0:
            result.add_error(
                "backPanel.thickness",
                f"Back panel thickness must be positive, got {thickness:g}mm.",
                thickness,
            )

        if back.type == BackPanelType.INSET:
            t = config.material.thickness
            if back.dado_depth >= t:
                result.add_error(
                    "backPanel.dadoDepth",
                    f"Dado depth ({back.dado_depth:g}mm) must be less than "
                    f"material thickness ({t:g}mm).",
                    back.dado_depth,
                )
            if back.dado_depth <= 0:
                result.add_error(
                    "backPanel.dadoDepth",
                    f"Dado depth must be positive, got {back.dado_depth:g}mm.",
                    back.dado_depth,
                )
            if back.inset_distance < 0:
                result.add_error(
                    "backPanel.insetDistance",
                    f"Inset distance must be non-negative, got {back.inset_distance:g}mm.",
                    back.inset_distance,
                )
            depth = config.global_bounds.d
            if back.inset_distance + thickness > depth:
                result.add_error(
                    "backPanel.insetDistance",
                    f"Inset distance ({back.inset_distance:g}mm) + back panel thickness "
                    f"({thickness:g}mm) exceeds cabinet depth ({depth:g}mm).",
                    back.inset_distance,
                )

        return result
