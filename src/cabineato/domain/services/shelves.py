"""Shelf generation: adjustable (System 32), fixed (dado) and runner shelves.

Each shelf system contributes side panel features and the shelf parts
themselves. The systems are independent: any subset may be enabled, and
none of them knows about the others.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cabineato.domain import constants as c
from cabineato.domain.geometry import CabinetGeometry
from cabineato.domain.value_objects import (
    Component,
    ComponentRole,
    HoleFeature,
    HolePurpose,
    RunnerMode,
    SlotFeature,
    SlotPurpose,
)

if TYPE_CHECKING:
    from cabineato.application.config.schema import AssemblyConfig

logger = logging.getLogger(__name__)


# --- Adjustable shelves ---


def shelf_pin_holes(config: AssemblyConfig, geometry: CabinetGeometry) -> list[HoleFeature]:
    """System 32 shelf pin holes for a side panel.

    Both side panels receive the same list: rows come from
    ``geometry.shelf_pin_rows`` and the columns from the shared setbacks,
    so left and right holes always line up.

    Returns:
        Front column bottom to top, then rear column bottom to top. Empty
        when adjustable shelves are disabled.
    """
    adjustable = config.features.shelves.adjustable
    if not adjustable.enabled:
        return []

    columns = (adjustable.front_setback, geometry.depth - adjustable.rear_setback)
    return [
        HoleFeature(
            diameter=c.SHELF_PIN_DIAMETER,
            depth=c.SHELF_PIN_DEPTH,
            pos=(x, y),
            purpose=HolePurpose.SHELF_PIN,
        )
        for x in columns
        for y in geometry.shelf_pin_rows
    ]


def _shelf_rear_limit(geometry: CabinetGeometry, rear_clearance: float) -> float:
    """Distance from the front edge to the rear of a loose or fixed shelf."""
    if geometry.is_back_inset:
        return geometry.inset_back_front_face - c.ADJUSTABLE_SHELF_INSET_BACK_GAP
    return geometry.depth - rear_clearance


def generate_adjustable_shelves(
    config: AssemblyConfig, geometry: CabinetGeometry
) -> list[Component]:
    """Loose shelves resting on pins, spread evenly over the interior height."""
    adjustable = config.features.shelves.adjustable
    if not adjustable.enabled or adjustable.count <= 0:
        return []

    t = geometry.thickness
    width = geometry.interior.w - c.ADJUSTABLE_SHELF_CLEARANCE
    depth = (
        _shelf_rear_limit(geometry, c.ADJUSTABLE_SHELF_REAR_CLEARANCE)
        - adjustable.front_setback
    )
    spacing = geometry.interior.h / (adjustable.count + 1)

    shelves = []
    for i in range(adjustable.count):
        shelves.append(
            Component(
                id=f"adjustable_shelf_{i + 1}",
                label=f"Adjustable Shelf {i + 1}",
                role=ComponentRole.ADJUSTABLE_SHELF,
                dimensions=(width, t, depth),
                position=(
                    t + c.ADJUSTABLE_SHELF_CLEARANCE / 2,
                    geometry.interior_y(spacing * (i + 1)),
                    adjustable.front_setback,
                ),
                material_thickness=t,
            )
        )
    return shelves


# --- Fixed shelves ---


def fixed_shelf_thickness(config: AssemblyConfig) -> float:
    """Thickness of fixed shelf stock, and so of its dados."""
    fixed = config.features.shelves.fixed
    secondary = config.secondary_material.fixed_shelf_thickness
    if fixed.use_secondary_material and secondary is not None:
        return secondary
    return config.material.thickness


def fixed_shelf_dados(config: AssemblyConfig, geometry: CabinetGeometry) -> list[SlotFeature]:
    """Horizontal dados for fixed shelves, identical on both side panels.

    Each dado is centered on its configured height and stops short of the
    front and rear edges.
    """
    fixed = config.features.shelves.fixed
    if not fixed.enabled:
        return []

    width = fixed_shelf_thickness(config)
    start = c.FIXED_SHELF_DADO_OFFSET
    end = geometry.depth - c.FIXED_SHELF_DADO_OFFSET
    dados = []
    for position in fixed.positions:
        y = geometry.interior_y(position)
        dados.append(
            SlotFeature(
                width=width,
                depth=fixed.dado_depth,
                path=((start, y), (end, y)),
                purpose=SlotPurpose.FIXED_SHELF,
            )
        )
    return dados


def generate_fixed_shelves(config: AssemblyConfig, geometry: CabinetGeometry) -> list[Component]:
    """Fixed shelves seated in the side panel dados.

    Shelves are widened by the dado depth on each side and centered
    vertically on their dado.
    """
    fixed = config.features.shelves.fixed
    if not fixed.enabled:
        return []

    shelf_t = fixed_shelf_thickness(config)
    dd = fixed.dado_depth
    front = c.FIXED_SHELF_DADO_OFFSET
    depth = _shelf_rear_limit(geometry, c.FIXED_SHELF_DADO_OFFSET) - front

    shelves = []
    for i, position in enumerate(fixed.positions):
        y = geometry.interior_y(position) - shelf_t / 2
        shelves.append(
            Component(
                id=f"fixed_shelf_{i + 1}",
                label=f"Fixed Shelf {i + 1}",
                role=ComponentRole.FIXED_SHELF,
                dimensions=(geometry.interior.w + 2 * dd, shelf_t, depth),
                position=(geometry.thickness - dd, y, front),
                material_thickness=shelf_t,
            )
        )
    return shelves


# --- Shelf runners ---


def _runner_hole_xs(config: AssemblyConfig, geometry: CabinetGeometry) -> list[float]:
    runners = config.features.shelves.runners
    start = runners.front_setback
    end = geometry.depth - runners.rear_setback
    count = runners.holes_per_runner
    if count <= 0:
        return []
    if count == 1:
        return [(start + end) / 2]
    spacing = (end - start) / (count - 1)
    return [start + spacing * k for k in range(count)]


def runner_holes(config: AssemblyConfig, geometry: CabinetGeometry) -> list[HoleFeature]:
    """Through holes for screwing runner strips to a side panel.

    Returns:
        Holes grouped by runner position, front to back. Empty when runners
        are disabled.
    """
    runners = config.features.shelves.runners
    if not runners.enabled:
        return []

    xs = _runner_hole_xs(config, geometry)
    return [
        HoleFeature(
            diameter=runners.hole_diameter,
            depth=0.0,
            pos=(x, geometry.interior_y(position)),
            purpose=HolePurpose.SHELF_RUNNER,
        )
        for position in runners.positions
        for x in xs
    ]


def generate_runner_components(
    config: AssemblyConfig, geometry: CabinetGeometry
) -> list[Component]:
    """Runner strips, and in full-width mode the shelves resting on them.

    A strip is screwed to each side panel, centered on the screw line and
    extending half a strip width beyond the outermost holes.
    """
    runners = config.features.shelves.runners
    if not runners.enabled:
        return []

    t = geometry.thickness
    strip_w = c.RUNNER_STRIP_WIDTH
    front = runners.front_setback - strip_w / 2
    length = (geometry.depth - runners.rear_setback + strip_w / 2) - front
    clearance = c.RUNNER_FULL_WIDTH_CLEARANCE

    components: list[Component] = []
    for i, position in enumerate(runners.positions):
        n = i + 1
        strip_y = geometry.interior_y(position) - t / 2
        for side, x in (("left", t), ("right", geometry.width - t - strip_w)):
            components.append(
                Component(
                    id=f"runner_strip_{side}_{n}",
                    label=f"Runner Strip {side.capitalize()} {n}",
                    role=ComponentRole.RUNNER_STRIP,
                    dimensions=(strip_w, t, length),
                    position=(x, strip_y, front),
                    material_thickness=t,
                )
            )
        if runners.mode == RunnerMode.FULL_WIDTH:
            components.append(
                Component(
                    id=f"runner_shelf_{n}",
                    label=f"Runner Shelf {n}",
                    role=ComponentRole.RUNNER_SHELF,
                    dimensions=(geometry.interior.w - 2 * clearance, t, length),
                    position=(t + clearance, strip_y + t, front),
                    material_thickness=t,
                )
            )
    logger.debug(f"Generated {len(components)} runner components")
    return components
