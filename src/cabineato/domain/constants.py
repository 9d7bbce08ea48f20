"""Cabinet-making constants for hardware standards, clearances and defaults.

This module provides:
- System 32 shelf pin hole layout
- Drawer box construction dimensions and clearances
- Pre-drill hardware sizes
- Carcass, back panel and shelf offsets
- Default material and machining values

All values are in millimeters.
"""

from __future__ import annotations

BUILDER_VERSION = "0.1.0"


# --- System 32 ---

SHELF_PIN_DIAMETER: float = 5.0
SHELF_PIN_SPACING: float = 32.0
SHELF_PIN_DEPTH: float = 10.0
SHELF_PIN_SETBACK: float = 37.0
# Clear distance between the first/last pin row and the top/bottom panel
SHELF_PIN_VERTICAL_MARGIN: float = 50.0


# --- Shelves ---

ADJUSTABLE_SHELF_CLEARANCE: float = 1.0  # total side-to-side play
ADJUSTABLE_SHELF_REAR_CLEARANCE: float = 10.0
# Extra rear gap when the shelf must clear an inset back panel
ADJUSTABLE_SHELF_INSET_BACK_GAP: float = 5.0
FIXED_SHELF_DADO_OFFSET: float = 10.0  # dado stops short of front and rear edges
DADO_DEPTH_FRACTION: float = 0.5  # max dado depth as a fraction of thickness
DEFAULT_DADO_DEPTH: float = 6.0

RUNNER_HOLE_DIAMETER: float = 4.0
RUNNER_SETBACK: float = 50.0
RUNNER_HOLES_PER_RUNNER: int = 2
RUNNER_STRIP_WIDTH: float = 20.0
RUNNER_FULL_WIDTH_CLEARANCE: float = 2.0  # per side


# --- Back panel ---

BACK_PANEL_THICKNESS: float = 6.0
BACK_PANEL_DADO_DEPTH: float = 6.0
BACK_PANEL_INSET_DISTANCE: float = 10.0


# --- Toe kick ---

TOE_KICK_HEIGHT: float = 100.0
TOE_KICK_DEPTH: float = 75.0


# --- Drawers ---

DRAWER_BOX_THICKNESS: float = 12.7  # 1/2" drawer box stock
DRAWER_BOTTOM_THICKNESS: float = 6.0
DRAWER_BOTTOM_DADO_DEPTH: float = 6.0
DRAWER_BOTTOM_DADO_OFFSET: float = 12.0  # dado centerline above the box bottom
DRAWER_GAP: float = 3.0  # between stacked drawer fronts
DRAWER_TOP_CLEARANCE: float = 25.0  # box height below the opening height
DRAWER_REAR_CLEARANCE: float = 50.0
DRAWER_INSET_BACK_CLEARANCE: float = 20.0
DRAWER_MIN_BOX_WIDTH: float = 100.0
DRAWER_MIN_BOX_HEIGHT: float = 50.0
DRAWER_SLIDE_CLEARANCE: float = 12.7
DRAWER_FULL_OVERLAY: float = 19.0
DRAWER_HALF_OVERLAY: float = 9.5

PULL_HOLE_DIAMETER: float = 5.0
PULL_VERTICAL_OFFSET: float = 32.0
PULL_SPACINGS: tuple[float, ...] = (64.0, 96.0, 128.0, 160.0)
PULL_DEFAULT_SPACING: float = 96.0


# --- Pre-drills ---

ASSEMBLY_PILOT_DIAMETER: float = 3.0
ASSEMBLY_COUNTERSINK_DIAMETER: float = 8.0
ASSEMBLY_EDGE_DISTANCE: float = 25.0
ASSEMBLY_SCREW_SPACING: float = 200.0

SLIDE_HOLE_DIAMETER: float = 4.0
SLIDE_FRONT_OFFSET: float = 37.0
SLIDE_HOLE_SPACING: float = 32.0
SLIDE_HOLES_PER_SLIDE: int = 3
SLIDE_MOUNTING_HEIGHT: float = 37.0
# Slide holes closer than this to the rear edge are dropped
SLIDE_REAR_MARGIN: float = 20.0


# --- Carcass limits ---

MIN_DIMENSION: float = 100.0
MAX_MATERIAL_THICKNESS: float = 50.0


# --- Material and machining defaults ---

DEFAULT_THICKNESS: float = 18.0
DEFAULT_KERF: float = 3.2
DEFAULT_BIT_DIAMETER: float = 6.35  # 1/4" end mill
DEFAULT_WIDTH: float = 600.0
DEFAULT_HEIGHT: float = 720.0
DEFAULT_DEPTH: float = 560.0
