"""Pydantic models for cabinet assembly configuration.

The models mirror the JSON configuration shape: field names are camelCase
in JSON and snake_case in Python. They check types and structure only.
Physical feasibility (positive interior, clearances, hole room) is left to
``validate_config`` so that every problem is reported in one pass rather
than stopping at the first bad field.

All lengths are in millimeters.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from cabineato.domain import constants as c
from cabineato.domain.value_objects import (
    BackPanelType,
    Compensation,
    PullType,
    RunnerMode,
)


class ConfigModel(BaseModel):
    """Base for every configuration model: immutable, camelCase, strict keys.

    Lengths must be finite numbers; NaN and infinity are rejected on load.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )


class GlobalBoundsConfig(ConfigModel):
    """Overall outside dimensions of the cabinet."""

    w: float = Field(default=c.DEFAULT_WIDTH, description="Overall width")
    h: float = Field(default=c.DEFAULT_HEIGHT, description="Overall height")
    d: float = Field(default=c.DEFAULT_DEPTH, description="Overall depth")


class MaterialConfig(ConfigModel):
    """Primary sheet material used for the carcass."""

    thickness: float = Field(default=c.DEFAULT_THICKNESS)
    kerf: float = Field(default=c.DEFAULT_KERF, description="Saw blade kerf")
    name: str = Field(default="18mm Plywood")


class SecondaryMaterialConfig(ConfigModel):
    """Thinner stock for backs, drawer bottoms and optionally fixed shelves.

    A value of None falls back to the owning feature's own thickness.
    """

    back_panel_thickness: float | None = Field(default=c.BACK_PANEL_THICKNESS)
    drawer_bottom_thickness: float | None = Field(default=c.DRAWER_BOTTOM_THICKNESS)
    fixed_shelf_thickness: float | None = None


class MachiningConfig(ConfigModel):
    """Router settings."""

    bit_diameter: float = Field(default=c.DEFAULT_BIT_DIAMETER)
    compensation: Compensation = Compensation.OUTSIDE


class BackPanelConfig(ConfigModel):
    """Back panel attachment."""

    type: BackPanelType = BackPanelType.APPLIED
    thickness: float = Field(default=c.BACK_PANEL_THICKNESS)
    dado_depth: float = Field(default=c.BACK_PANEL_DADO_DEPTH)
    inset_distance: float = Field(
        default=c.BACK_PANEL_INSET_DISTANCE,
        description="Distance from the rear edge to the back of the dado",
    )


class AdjustableShelfConfig(ConfigModel):
    """System 32 shelf pin holes and loose shelves."""

    enabled: bool = True
    count: int = 2
    front_setback: float = Field(default=c.SHELF_PIN_SETBACK)
    rear_setback: float = Field(default=c.SHELF_PIN_SETBACK)


class FixedShelfConfig(ConfigModel):
    """Shelves glued into dados cut in the side panels."""

    enabled: bool = False
    positions: tuple[float, ...] = Field(
        default=(),
        description="Dado centerline heights above the bottom panel top",
    )
    dado_depth: float = Field(default=c.DEFAULT_DADO_DEPTH)
    use_secondary_material: bool = False


class ShelfRunnerConfig(ConfigModel):
    """Wooden runner strips screwed to the side panels."""

    enabled: bool = False
    mode: RunnerMode = RunnerMode.FULL_WIDTH
    positions: tuple[float, ...] = Field(
        default=(),
        description="Runner screw line heights above the bottom panel top",
    )
    front_setback: float = Field(default=c.RUNNER_SETBACK)
    rear_setback: float = Field(default=c.RUNNER_SETBACK)
    hole_diameter: float = Field(default=c.RUNNER_HOLE_DIAMETER)
    holes_per_runner: int = Field(default=c.RUNNER_HOLES_PER_RUNNER)


class ShelvesConfig(ConfigModel):
    """The three independent shelf systems."""

    adjustable: AdjustableShelfConfig = Field(default_factory=AdjustableShelfConfig)
    fixed: FixedShelfConfig = Field(default_factory=FixedShelfConfig)
    runners: ShelfRunnerConfig = Field(default_factory=ShelfRunnerConfig)


class DrawerPullConfig(ConfigModel):
    """Pull pre-drills on drawer fronts."""

    type: PullType = PullType.NONE
    hole_diameter: float = Field(default=c.PULL_HOLE_DIAMETER)
    hole_spacing: float = Field(
        default=c.PULL_DEFAULT_SPACING, description="Center-to-center for double pulls"
    )
    vertical_offset: float = Field(
        default=c.PULL_VERTICAL_OFFSET, description="Down from the top of the front"
    )
    horizontal_position: Literal["center"] | float = Field(
        default="center", description="'center' or an offset from center"
    )


class DrawerConfig(ConfigModel):
    """Stacked drawers filling the interior."""

    enabled: bool = False
    count: int = 0
    slide_width: float = Field(
        default=c.DRAWER_SLIDE_CLEARANCE, description="Slide clearance per side"
    )
    overlay_amount: float = Field(default=c.DRAWER_FULL_OVERLAY)
    pull_holes: DrawerPullConfig = Field(default_factory=DrawerPullConfig)


class ToeKickConfig(ConfigModel):
    """Recessed base notch and its kick board."""

    enabled: bool = True
    height: float = Field(default=c.TOE_KICK_HEIGHT)
    depth: float = Field(default=c.TOE_KICK_DEPTH)
    generate_panel: bool = True


class FeaturesConfig(ConfigModel):
    """Optional cabinet features."""

    shelves: ShelvesConfig = Field(default_factory=ShelvesConfig)
    drawers: DrawerConfig = Field(default_factory=DrawerConfig)
    toe_kick: ToeKickConfig = Field(default_factory=ToeKickConfig)


class AssemblyPredrillConfig(ConfigModel):
    """Screw holes joining the side panels to the top and bottom."""

    enabled: bool = False
    countersink: bool = True
    pilot_diameter: float = Field(default=c.ASSEMBLY_PILOT_DIAMETER)
    countersink_diameter: float = Field(default=c.ASSEMBLY_COUNTERSINK_DIAMETER)
    edge_distance: float = Field(default=c.ASSEMBLY_EDGE_DISTANCE)
    screw_spacing: float = Field(default=c.ASSEMBLY_SCREW_SPACING)


class SlidePredrillConfig(ConfigModel):
    """Drawer slide mounting holes in the side panels."""

    enabled: bool = False
    hole_diameter: float = Field(default=c.SLIDE_HOLE_DIAMETER)
    mounting_height: float = Field(
        default=c.SLIDE_MOUNTING_HEIGHT, description="Above the drawer opening bottom"
    )
    front_offset: float = Field(default=c.SLIDE_FRONT_OFFSET)
    hole_spacing: float = Field(default=c.SLIDE_HOLE_SPACING)
    holes_per_slide: int = Field(default=c.SLIDE_HOLES_PER_SLIDE)


class PredrillsConfig(ConfigModel):
    """Pre-drilled hardware holes."""

    assembly: AssemblyPredrillConfig = Field(default_factory=AssemblyPredrillConfig)
    slides: SlidePredrillConfig = Field(default_factory=SlidePredrillConfig)


class AssemblyConfig(ConfigModel):
    """Root configuration: everything needed to generate one cabinet.

    Every section has defaults, so an empty mapping describes a standard
    600 x 720 x 560 base cabinet with two adjustable shelves.
    """

    global_bounds: GlobalBoundsConfig = Field(default_factory=GlobalBoundsConfig)
    material: MaterialConfig = Field(default_factory=MaterialConfig)
    secondary_material: SecondaryMaterialConfig = Field(
        default_factory=SecondaryMaterialConfig
    )
    machining: MachiningConfig = Field(default_factory=MachiningConfig)
    back_panel: BackPanelConfig = Field(default_factory=BackPanelConfig)
    features: FeaturesConfig = Field(default_factory=FeaturesConfig)
    predrills: PredrillsConfig = Field(default_factory=PredrillsConfig)
