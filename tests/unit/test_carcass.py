"""Unit tests for carcass panel generation.

These tests verify:
- Side, top and bottom panel dimensions and positions
- Mirrored toe-kick notches and the kick board
- Assembly pre-drills along the top and bottom joints
- Drawer slide pre-drills per drawer opening
"""

from __future__ import annotations

import pytest

from cabineato.domain.geometry import CabinetGeometry
from cabineato.domain.services import (
    assembly_predrills,
    generate_carcass,
    generate_toe_kick_panel,
    slide_predrills,
)
from cabineato.domain.services.carcass import generate_side_panel, toe_kick_notch
from cabineato.domain.value_objects import (
    ComponentRole,
    CountersinkFeature,
    HoleFeature,
    HolePurpose,
    NotchCorner,
    NotchFeature,
)


class TestCarcassPanels:
    """Tests for generate_carcass."""

    def test_side_panels_are_full_height_and_depth(self, default_config, default_geometry) -> None:
        panels = generate_carcass(default_config, default_geometry)

        assert panels.left.dimensions == (18.0, 720.0, 560.0)
        assert panels.right.dimensions == (18.0, 720.0, 560.0)
        assert panels.left.position == (0.0, 0.0, 0.0)
        assert panels.right.position == (582.0, 0.0, 0.0)

    def test_top_and_bottom_captured_between_sides(self, default_config, default_geometry) -> None:
        panels = generate_carcass(default_config, default_geometry)

        assert panels.top.dimensions == (564.0, 18.0, 560.0)
        assert panels.bottom.dimensions == (564.0, 18.0, 560.0)
        assert panels.top.position == (18.0, 702.0, 0.0)
        assert panels.bottom.position == (18.0, 100.0, 0.0)

    @pytest.mark.parametrize(
        ("thickness", "expected"),
        [(18.0, 964.0), (0.0, 1000.0), (500.0, 0.0)],
    )
    def test_top_width_follows_thickness(self, make_config, thickness, expected) -> None:
        """Generators are total, so even infeasible thicknesses produce panels."""
        config = make_config(
            {"globalBounds": {"w": 1000}, "material": {"thickness": thickness}}
        )
        panels = generate_carcass(config, CabinetGeometry.from_config(config))

        assert panels.top.width == expected
        assert panels.bottom.width == expected

    def test_bottom_sits_on_floor_without_toe_kick(self, make_config) -> None:
        config = make_config({"features": {"toeKick": {"enabled": False}}})
        panels = generate_carcass(config, CabinetGeometry.from_config(config))

        assert panels.bottom.position == (18.0, 0.0, 0.0)
        assert panels.left.features == ()

    def test_as_tuple_order(self, default_config, default_geometry) -> None:
        panels = generate_carcass(default_config, default_geometry)
        roles = [panel.role for panel in panels.as_tuple()]

        assert roles == [
            ComponentRole.SIDE_PANEL_LEFT,
            ComponentRole.SIDE_PANEL_RIGHT,
            ComponentRole.TOP_PANEL,
            ComponentRole.BOTTOM_PANEL,
        ]

    def test_material_thickness_recorded(self, default_config, default_geometry) -> None:
        panels = generate_carcass(default_config, default_geometry)
        assert all(panel.material_thickness == 18.0 for panel in panels.as_tuple())

    def test_rejects_non_side_role(self, default_config, default_geometry) -> None:
        with pytest.raises(ValueError, match="Not a side panel role"):
            generate_side_panel(default_config, default_geometry, ComponentRole.TOP_PANEL)


class TestToeKick:
    """Tests for the toe-kick notch and kick board."""

    def test_left_notch_anchors_at_origin(self, default_geometry) -> None:
        notch = toe_kick_notch(default_geometry, ComponentRole.SIDE_PANEL_LEFT)

        assert notch == NotchFeature(
            width=75.0, height=100.0, pos=(0.0, 0.0), corner=NotchCorner.BOTTOM_LEFT
        )

    def test_right_notch_is_mirrored(self, default_geometry) -> None:
        notch = toe_kick_notch(default_geometry, ComponentRole.SIDE_PANEL_RIGHT)

        assert notch is not None
        assert notch.pos == (18.0 - 75.0, 0.0)
        assert notch.corner == NotchCorner.BOTTOM_RIGHT
        assert (notch.width, notch.height) == (75.0, 100.0)

    def test_no_notch_without_toe_kick(self, make_config) -> None:
        config = make_config({"features": {"toeKick": {"enabled": False}}})
        geometry = CabinetGeometry.from_config(config)
        assert toe_kick_notch(geometry, ComponentRole.SIDE_PANEL_LEFT) is None

    def test_side_panels_carry_notch(self, default_config, default_geometry) -> None:
        panels = generate_carcass(default_config, default_geometry)
        assert isinstance(panels.left.features[0], NotchFeature)
        assert isinstance(panels.right.features[0], NotchFeature)

    def test_kick_board_dimensions(self, default_config, default_geometry) -> None:
        board = generate_toe_kick_panel(default_config, default_geometry)

        assert board is not None
        assert board.role == ComponentRole.TOE_KICK_PANEL
        assert board.dimensions == (564.0, 100.0, 18.0)
        assert board.position == (18.0, 0.0, 75.0)

    def test_kick_board_can_be_skipped(self, make_config) -> None:
        config = make_config({"features": {"toeKick": {"generatePanel": False}}})
        geometry = CabinetGeometry.from_config(config)
        assert generate_toe_kick_panel(config, geometry) is None


class TestAssemblyPredrills:
    """Tests for assembly_predrills."""

    def test_disabled_by_default(self, default_config, default_geometry) -> None:
        assert assembly_predrills(default_config, default_geometry) == []

    def test_countersunk_holes_on_both_joints(self, make_config) -> None:
        config = make_config({"predrills": {"assembly": {"enabled": True}}})
        holes = assembly_predrills(config, CabinetGeometry.from_config(config))

        assert len(holes) == 8
        assert all(isinstance(h, CountersinkFeature) for h in holes)
        assert all(h.purpose == HolePurpose.ASSEMBLY for h in holes)
        assert {h.pos[1] for h in holes} == {109.0, 711.0}

    def test_holes_anchor_at_edge_distance(self, make_config) -> None:
        config = make_config({"predrills": {"assembly": {"enabled": True}}})
        holes = assembly_predrills(config, CabinetGeometry.from_config(config))
        xs = [h.pos[0] for h in holes[:4]]

        assert xs[0] == 25.0
        assert xs[-1] == pytest.approx(535.0)
        assert all(b - a <= 200.0 for a, b in zip(xs, xs[1:]))

    def test_plain_pilot_holes_without_countersink(self, make_config) -> None:
        config = make_config(
            {"predrills": {"assembly": {"enabled": True, "countersink": False}}}
        )
        holes = assembly_predrills(config, CabinetGeometry.from_config(config))

        assert all(isinstance(h, HoleFeature) for h in holes)
        assert all(h.diameter == 3.0 and h.depth == 0.0 for h in holes)

    def test_side_panel_includes_predrills(self, make_config) -> None:
        config = make_config({"predrills": {"assembly": {"enabled": True}}})
        panels = generate_carcass(config, CabinetGeometry.from_config(config))
        # Notch followed by eight pre-drills
        assert len(panels.left.features) == 9


class TestSlidePredrills:
    """Tests for slide_predrills."""

    def test_requires_drawers(self, make_config) -> None:
        config = make_config({"predrills": {"slides": {"enabled": True}}})
        assert slide_predrills(config, CabinetGeometry.from_config(config)) == []

    def test_disabled_by_default(self, drawer_config) -> None:
        geometry = CabinetGeometry.from_config(drawer_config)
        assert slide_predrills(drawer_config, geometry) == []

    def test_one_row_per_drawer(self, make_config) -> None:
        config = make_config(
            {
                "features": {"drawers": {"enabled": True, "count": 3}},
                "predrills": {"slides": {"enabled": True}},
            }
        )
        geometry = CabinetGeometry.from_config(config)
        holes = slide_predrills(config, geometry)

        assert len(holes) == 9
        assert [h.pos[0] for h in holes[:3]] == [37.0, 69.0, 101.0]
        assert holes[0].pos[1] == 118.0 + 37.0
        assert holes[3].pos[1] == pytest.approx(geometry.drawer_opening_bottom(1) + 37.0)
        assert all(h.purpose == HolePurpose.SLIDE_MOUNT for h in holes)

    def test_drops_holes_near_rear_edge(self, make_config) -> None:
        config = make_config(
            {
                "globalBounds": {"d": 150},
                "features": {
                    "toeKick": {"depth": 50},
                    "drawers": {"enabled": True, "count": 1},
                },
                "predrills": {"slides": {"enabled": True, "holeSpacing": 64}},
            }
        )
        holes = slide_predrills(config, CabinetGeometry.from_config(config))
        # 37 and 101 fit before 130; 165 does not
        assert [h.pos[0] for h in holes] == [37.0, 101.0]
