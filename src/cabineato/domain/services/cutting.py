"""Cutting-side helpers for export consumers.

Layer definitions, feature-to-layer assignment, the flat cutting footprint
of each component role, and router bit compensation.
"""

from __future__ import annotations

from dataclasses import dataclass

from cabineato.domain.value_objects import (
    CNCLayer,
    Compensation,
    Component,
    ComponentRole,
    CountersinkFeature,
    Feature,
    HoleFeature,
    NotchFeature,
    SlotFeature,
)


@dataclass(frozen=True)
class LayerConfig:
    """Display and toolpath hints for a CNC layer."""

    name: str
    description: str
    color: str
    operation: str


LAYER_CONFIGS: dict[CNCLayer, LayerConfig] = {
    CNCLayer.OUTSIDE_CUT: LayerConfig(
        name="OUTSIDE_CUT",
        description="External boundaries for through-cutting",
        color="#FF0000",
        operation="Profile toolpath - outside/right",
    ),
    CNCLayer.DRILL_5MM: LayerConfig(
        name="DRILL_5MM",
        description="Center points for 5mm shelf pin drilling",
        color="#00FF00",
        operation="Drilling toolpath - 5mm bit",
    ),
    CNCLayer.DRILL_3MM: LayerConfig(
        name="DRILL_3MM",
        description="Center points for 3mm pilot holes",
        color="#00FFFF",
        operation="Drilling toolpath - 3mm bit",
    ),
    CNCLayer.DRILL_8MM: LayerConfig(
        name="DRILL_8MM",
        description="Center points for 8mm hardware holes",
        color="#FF00FF",
        operation="Drilling toolpath - 8mm bit",
    ),
    CNCLayer.DRILL_35MM: LayerConfig(
        name="DRILL_35MM",
        description="Center points for 35mm hinge cups",
        color="#FFA500",
        operation="Drilling toolpath - 35mm Forstner bit",
    ),
    CNCLayer.COUNTERSINK: LayerConfig(
        name="COUNTERSINK",
        description="Countersunk screw locations",
        color="#FFFF00",
        operation="Drilling toolpath - countersink bit",
    ),
    CNCLayer.POCKET_DADO: LayerConfig(
        name="POCKET_DADO",
        description="Closed vectors for dados, slots, and pockets",
        color="#0000FF",
        operation="Pocket toolpath",
    ),
}

# Drill layers by bit diameter, in mm
DRILL_LAYERS: dict[float, CNCLayer] = {
    3.0: CNCLayer.DRILL_3MM,
    5.0: CNCLayer.DRILL_5MM,
    8.0: CNCLayer.DRILL_8MM,
    35.0: CNCLayer.DRILL_35MM,
}


def drill_layer(diameter: float) -> CNCLayer:
    """Drill layer whose bit is closest to the hole diameter.

    Ties go to the smaller bit, so an odd-sized hole is never drilled
    oversize by a tie-break.
    """
    best = min(DRILL_LAYERS, key=lambda size: (abs(size - diameter), size))
    return DRILL_LAYERS[best]


def feature_layer(feature: Feature) -> CNCLayer:
    """CNC layer a feature is machined on."""
    match feature:
        case HoleFeature():
            return drill_layer(feature.diameter)
        case CountersinkFeature():
            return CNCLayer.COUNTERSINK
        case SlotFeature():
            return CNCLayer.POCKET_DADO
        case NotchFeature():
            # Notches are part of the profile cut
            return CNCLayer.OUTSIDE_CUT


def component_layers(component: Component) -> list[CNCLayer]:
    """Every layer a component appears on, outline first, without repeats."""
    layers = [component.layer]
    for feature in component.features:
        layer = feature_layer(feature)
        if layer not in layers:
            layers.append(layer)
    return layers


def flat_dimensions(component: Component) -> tuple[float, float]:
    """Flat (width, height) of the face a component is cut on.

    Components carry assembly-space dimensions; a sheet is cut on the face
    perpendicular to the part's thickness.
    """
    dim_x, dim_y, dim_z = component.dimensions
    match component.role:
        case ComponentRole.SIDE_PANEL_LEFT | ComponentRole.SIDE_PANEL_RIGHT:
            return (dim_z, dim_y)
        case (
            ComponentRole.TOP_PANEL
            | ComponentRole.BOTTOM_PANEL
            | ComponentRole.ADJUSTABLE_SHELF
            | ComponentRole.FIXED_SHELF
            | ComponentRole.RUNNER_SHELF
            | ComponentRole.DRAWER_BOTTOM
        ):
            return (dim_x, dim_z)
        case (
            ComponentRole.BACK_PANEL
            | ComponentRole.DRAWER_FRONT
            | ComponentRole.DRAWER_BACK
            | ComponentRole.TOE_KICK_PANEL
        ):
            return (dim_x, dim_y)
        case ComponentRole.DRAWER_SIDE:
            return (dim_z, dim_y)
        case ComponentRole.RUNNER_STRIP:
            return (dim_z, dim_x)
        case _:
            largest, second, _ = sorted(component.dimensions, reverse=True)
            return (largest, second)


def centerline_offset(compensation: Compensation, bit_diameter: float) -> float:
    """Offset from a part edge to the bit centerline.

    Positive moves the centerline away from the part. Each edge moves by
    the bit radius, so an outside cut's centerline rectangle is one full
    bit diameter larger than the part in each direction.
    """
    radius = bit_diameter / 2
    match compensation:
        case Compensation.OUTSIDE:
            return radius
        case Compensation.INSIDE:
            return -radius
        case Compensation.CENTER:
            return 0.0


def toolpath_extent(size: float, compensation: Compensation, bit_diameter: float) -> float:
    """Length of the bit centerline across a part dimension."""
    return size + 2 * centerline_offset(compensation, bit_diameter)
