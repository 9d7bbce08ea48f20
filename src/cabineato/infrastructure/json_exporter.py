"""JSON exporter for assemblies.

Produces the camelCase JSON shape used by the CLI and the web API: the
normalized configuration, interior bounds, build metadata and every
component with its features, flat cutting footprint and layers. Dogbone
reliefs for slots and notches are included on request.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, ClassVar

from cabineato.domain.services.cutting import component_layers, flat_dimensions, toolpath_extent
from cabineato.domain.services.dogbone import component_dogbones
from cabineato.domain.value_objects import (
    Assembly,
    Component,
    CountersinkFeature,
    Feature,
    HoleFeature,
    NotchFeature,
    SlotFeature,
)

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


def feature_to_dict(feature: Feature) -> dict[str, Any]:
    """Serialize a feature with its ``type`` discriminant."""
    match feature:
        case HoleFeature():
            return {
                "type": feature.kind,
                "diameter": feature.diameter,
                "depth": feature.depth,
                "pos": list(feature.pos),
                "purpose": feature.purpose.value,
            }
        case CountersinkFeature():
            return {
                "type": feature.kind,
                "pilotDiameter": feature.pilot_diameter,
                "countersinkDiameter": feature.countersink_diameter,
                "pilotDepth": feature.pilot_depth,
                "countersinkDepth": feature.countersink_depth,
                "pos": list(feature.pos),
                "purpose": feature.purpose.value,
            }
        case SlotFeature():
            return {
                "type": feature.kind,
                "width": feature.width,
                "depth": feature.depth,
                "path": [list(point) for point in feature.path],
                "purpose": feature.purpose.value,
            }
        case NotchFeature():
            return {
                "type": feature.kind,
                "width": feature.width,
                "height": feature.height,
                "pos": list(feature.pos),
                "corner": feature.corner.value,
            }


class AssemblyJsonExporter:
    """Exports an Assembly as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, include_reliefs: bool = False, indent: int | None = 2) -> None:
        """Initialize the exporter.

        Args:
            include_reliefs: Whether to add dogbone reliefs per component.
            indent: JSON indentation, None for compact output.
        """
        self.include_reliefs = include_reliefs
        self.indent = indent

    def export(self, assembly: Assembly, path: Path) -> None:
        """Write the assembly JSON to a file."""
        path.write_text(self.export_string(assembly), encoding="utf-8")
        logger.info(f"Exported assembly JSON to {path}")

    def export_string(self, assembly: Assembly) -> str:
        return json.dumps(self.to_dict(assembly), indent=self.indent)

    def to_dict(self, assembly: Assembly) -> dict[str, Any]:
        """Build the JSON-ready mapping for an assembly."""
        interior = assembly.interior_bounds
        return {
            "schemaVersion": SCHEMA_VERSION,
            "config": assembly.config.model_dump(mode="json", by_alias=True),
            "components": [self._component(assembly, c) for c in assembly.components],
            "interiorBounds": {"w": interior.w, "h": interior.h, "d": interior.d},
            "metadata": {
                "generatedAt": assembly.metadata.generated_at.isoformat(),
                "version": assembly.metadata.version,
            },
        }

    def _component(self, assembly: Assembly, component: Component) -> dict[str, Any]:
        machining = assembly.config.machining
        flat_w, flat_h = flat_dimensions(component)
        data: dict[str, Any] = {
            "id": component.id,
            "label": component.label,
            "role": component.role.value,
            "dimensions": list(component.dimensions),
            "position": list(component.position),
            "rotation": list(component.rotation),
            "features": [feature_to_dict(f) for f in component.features],
            "layer": component.layer.value,
            "layers": [layer.value for layer in component_layers(component)],
            "materialThickness": component.material_thickness,
            "flat": {
                "width": flat_w,
                "height": flat_h,
                "toolpathWidth": toolpath_extent(
                    flat_w, machining.compensation, machining.bit_diameter
                ),
                "toolpathHeight": toolpath_extent(
                    flat_h, machining.compensation, machining.bit_diameter
                ),
            },
        }
        if self.include_reliefs:
            data["reliefs"] = [
                {
                    "featureIndex": index,
                    "center": list(fillet.center),
                    "radius": fillet.radius,
                    "cornerIndex": fillet.corner_index,
                }
                for index, fillets in component_dogbones(component, machining.bit_diameter)
                for fillet in fillets
            ]
        return data
