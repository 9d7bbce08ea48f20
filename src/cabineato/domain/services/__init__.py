"""Geometry generators and cutting helpers."""

from .back_panel import BackPanelDados, back_panel_dados, generate_back_panel
from .carcass import (
    CarcassPanels,
    assembly_predrills,
    generate_carcass,
    generate_toe_kick_panel,
    slide_predrills,
)
from .cutting import (
    LAYER_CONFIGS,
    LayerConfig,
    centerline_offset,
    component_layers,
    feature_layer,
    flat_dimensions,
    toolpath_extent,
)
from .dogbone import (
    DogboneDirection,
    DogboneFillet,
    apply_dogbones_to_path,
    component_dogbones,
    dogbone_center,
    feature_dogbones,
    is_internal_corner,
    notch_dogbones,
    rectangle_dogbones,
)
from .drawers import DrawerBoxDimensions, generate_drawers, pull_holes
from .shelves import (
    fixed_shelf_dados,
    generate_adjustable_shelves,
    generate_fixed_shelves,
    generate_runner_components,
    runner_holes,
    shelf_pin_holes,
)

__all__ = [
    "BackPanelDados",
    "CarcassPanels",
    "DogboneDirection",
    "DogboneFillet",
    "DrawerBoxDimensions",
    "LAYER_CONFIGS",
    "LayerConfig",
    "apply_dogbones_to_path",
    "assembly_predrills",
    "back_panel_dados",
    "centerline_offset",
    "component_dogbones",
    "component_layers",
    "dogbone_center",
    "feature_dogbones",
    "feature_layer",
    "fixed_shelf_dados",
    "flat_dimensions",
    "generate_adjustable_shelves",
    "generate_back_panel",
    "generate_carcass",
    "generate_drawers",
    "generate_fixed_shelves",
    "generate_runner_components",
    "generate_toe_kick_panel",
    "is_internal_corner",
    "notch_dogbones",
    "pull_holes",
    "rectangle_dogbones",
    "runner_holes",
    "shelf_pin_holes",
    "slide_predrills",
    "toolpath_extent",
]
