"""Unit tests for the carcass, back panel, shelf, drawer and pre-drill validators."""

from __future__ import annotations

import pytest

from cabineato.application.config.validators import (
    BackPanelValidator,
    CarcassValidator,
    DrawerValidator,
    PredrillValidator,
    ShelfValidator,
)
from cabineato.contracts import Validator


class TestValidatorProtocol:
    """Every feasibility validator satisfies the Validator protocol."""

    @pytest.mark.parametrize(
        ("validator", "name"),
        [
            (CarcassValidator(), "carcass"),
            (BackPanelValidator(), "back_panel"),
            (ShelfValidator(), "shelves"),
            (DrawerValidator(), "drawers"),
            (PredrillValidator(), "predrills"),
        ],
    )
    def test_name_and_protocol(self, validator, name: str) -> None:
        assert isinstance(validator, Validator)
        assert validator.name == name

    @pytest.mark.parametrize(
        "validator",
        [
            CarcassValidator(),
            BackPanelValidator(),
            ShelfValidator(),
            DrawerValidator(),
            PredrillValidator(),
        ],
    )
    def test_default_config_passes(self, validator, default_config) -> None:
        result = validator.validate(default_config)
        assert result.is_valid
        assert result.warnings == []


class TestCarcassValidator:
    """Tests for CarcassValidator."""

    def test_width_below_minimum(self, make_config) -> None:
        result = CarcassValidator().validate(make_config({"globalBounds": {"w": 50}}))

        assert not result.is_valid
        assert "Cabinet width (50mm) is below minimum of 100mm." in result.error_messages
        assert result.errors[0].path == "globalBounds.w"

    def test_non_positive_thickness(self, make_config) -> None:
        result = CarcassValidator().validate(make_config({"material": {"thickness": 0}}))
        assert "Material thickness must be positive, got 0mm." in result.error_messages

    def test_thickness_above_maximum(self, make_config) -> None:
        result = CarcassValidator().validate(make_config({"material": {"thickness": 60}}))
        assert any("exceeds maximum of 50mm" in m for m in result.error_messages)

    def test_no_interior_width(self, make_config) -> None:
        config = make_config({"globalBounds": {"w": 90}, "material": {"thickness": 45}})
        result = CarcassValidator().validate(config)

        assert any(m.startswith("Interior width would be 0mm") for m in result.error_messages)

    def test_no_interior_height(self, make_config) -> None:
        result = CarcassValidator().validate(make_config({"globalBounds": {"h": 130}}))
        assert any(m.startswith("Interior height would be") for m in result.error_messages)

    def test_toe_kick_deeper_than_cabinet(self, make_config) -> None:
        result = CarcassValidator().validate(
            make_config({"features": {"toeKick": {"depth": 600}}})
        )
        assert any("must be less than cabinet depth" in m for m in result.error_messages)

    def test_toe_kick_checks_skipped_when_disabled(self, make_config) -> None:
        config = make_config({"features": {"toeKick": {"enabled": False, "depth": 600}}})
        assert CarcassValidator().validate(config).is_valid

    def test_bit_diameter_must_be_positive(self, make_config) -> None:
        result = CarcassValidator().validate(make_config({"machining": {"bitDiameter": 0}}))
        assert [e.path for e in result.errors] == ["machining.bitDiameter"]

    def test_reports_every_error(self, make_config) -> None:
        config = make_config(
            {"globalBounds": {"w": 50, "d": 50}, "material": {"kerf": -1}}
        )
        result = CarcassValidator().validate(config)
        paths = {e.path for e in result.errors}

        assert {"globalBounds.w", "globalBounds.d", "material.kerf"} <= paths


class TestBackPanelValidator:
    """Tests for BackPanelValidator."""

    def test_dado_deeper_than_material(self, make_config) -> None:
        config = make_config({"backPanel": {"type": "inset", "dadoDepth": 18}})
        result = BackPanelValidator().validate(config)

        assert (
            "Dado depth (18mm) must be less than material thickness (18mm)."
            in result.error_messages
        )

    def test_inset_beyond_depth(self, make_config) -> None:
        config = make_config({"backPanel": {"type": "inset", "insetDistance": 556}})
        result = BackPanelValidator().validate(config)
        assert any("exceeds cabinet depth (560mm)" in m for m in result.error_messages)

    def test_zero_thickness(self, make_config) -> None:
        config = make_config({"secondaryMaterial": {"backPanelThickness": 0}})
        result = BackPanelValidator().validate(config)
        assert result.error_messages == ["Back panel thickness must be positive, got 0mm."]

    def test_no_back_is_never_checked(self, make_config) -> None:
        config = make_config(
            {"backPanel": {"type": "none"}, "secondaryMaterial": {"backPanelThickness": 0}}
        )
        assert BackPanelValidator().validate(config).is_valid


class TestShelfValidator:
    """Tests for ShelfValidator."""

    def test_setbacks_exceed_depth(self, make_config) -> None:
        config = make_config(
            {
                "features": {
                    "shelves": {"adjustable": {"frontSetback": 300, "rearSetback": 300}}
                }
            }
        )
        result = ShelfValidator().validate(config)
        assert (
            "Combined setbacks (600mm) exceed cabinet depth (560mm)." in result.error_messages
        )

    def test_not_enough_room_for_pin_rows(self, make_config) -> None:
        result = ShelfValidator().validate(make_config({"globalBounds": {"h": 250}}))
        assert any("Not enough vertical space" in m for m in result.error_messages)

    def test_negative_count(self, make_config) -> None:
        config = make_config({"features": {"shelves": {"adjustable": {"count": -1}}}})
        result = ShelfValidator().validate(config)
        assert [e.path for e in result.errors] == ["features.shelves.adjustable.count"]

    @pytest.mark.parametrize("position", [5, 580])
    def test_fixed_shelf_outside_interior(self, make_config, position: float) -> None:
        config = make_config(
            {"features": {"shelves": {"fixed": {"enabled": True, "positions": [300, position]}}}}
        )
        result = ShelfValidator().validate(config)
        assert [e.path for e in result.errors] == ["features.shelves.fixed.positions[1]"]

    def test_fixed_dado_too_deep(self, make_config) -> None:
        config = make_config(
            {"features": {"shelves": {"fixed": {"enabled": True, "dadoDepth": 10}}}}
        )
        result = ShelfValidator().validate(config)
        assert any("should not exceed half" in m for m in result.error_messages)

    def test_runner_positions(self, make_config) -> None:
        config = make_config(
            {"features": {"shelves": {"runners": {"enabled": True, "positions": [-10, 600]}}}}
        )
        result = ShelfValidator().validate(config)

        assert [e.path for e in result.errors] == [
            "features.shelves.runners.positions[0]",
            "features.shelves.runners.positions[1]",
        ]

    def test_runner_needs_a_hole(self, make_config) -> None:
        config = make_config(
            {"features": {"shelves": {"runners": {"enabled": True, "holesPerRunner": 0}}}}
        )
        result = ShelfValidator().validate(config)
        assert any("at least one hole" in m for m in result.error_messages)

    def test_disabled_systems_not_checked(self, make_config) -> None:
        config = make_config(
            {
                "features": {
                    "shelves": {
                        "adjustable": {"enabled": False, "count": -1},
                        "fixed": {"positions": [9999]},
                    }
                }
            }
        )
        assert ShelfValidator().validate(config).is_valid


class TestDrawerValidator:
    """Tests for DrawerValidator."""

    def test_valid_drawers(self, drawer_config) -> None:
        assert DrawerValidator().validate(drawer_config).is_valid

    def test_too_many_drawers(self, make_config) -> None:
        config = make_config({"features": {"drawers": {"enabled": True, "count": 8}}})
        result = DrawerValidator().validate(config)

        assert len(result.errors) == 1
        assert result.errors[0].message.startswith("Drawer height (45.375mm) is below minimum")

    def test_seven_drawers_fit(self, make_config) -> None:
        config = make_config({"features": {"drawers": {"enabled": True, "count": 7}}})
        assert DrawerValidator().validate(config).is_valid

    def test_box_too_narrow(self, make_config) -> None:
        config = make_config(
            {"features": {"drawers": {"enabled": True, "count": 2, "slideWidth": 250}}}
        )
        result = DrawerValidator().validate(config)
        assert any("Drawer box width (64mm) is too small" in m for m in result.error_messages)

    def test_double_pull_needs_spacing(self, make_config) -> None:
        config = make_config(
            {
                "features": {
                    "drawers": {
                        "enabled": True,
                        "count": 2,
                        "pullHoles": {"type": "double", "holeSpacing": 0},
                    }
                }
            }
        )
        result = DrawerValidator().validate(config)
        assert [e.path for e in result.errors] == ["features.drawers.pullHoles.holeSpacing"]

    @pytest.mark.parametrize("offset", [0, 622, 5000, -10])
    def test_pull_vertical_offset_must_land_on_front(self, make_config, offset: float) -> None:
        config = make_config(
            {
                "features": {
                    "drawers": {
                        "enabled": True,
                        "count": 1,
                        "pullHoles": {"type": "single", "verticalOffset": offset},
                    }
                }
            }
        )
        result = DrawerValidator().validate(config)
        assert [e.path for e in result.errors] == ["features.drawers.pullHoles.verticalOffset"]

    def test_pull_horizontal_position_must_land_on_front(self, make_config) -> None:
        config = make_config(
            {
                "features": {
                    "drawers": {
                        "enabled": True,
                        "count": 1,
                        "pullHoles": {"type": "single", "horizontalPosition": -400},
                    }
                }
            }
        )
        result = DrawerValidator().validate(config)
        assert [e.path for e in result.errors] == ["features.drawers.pullHoles.horizontalPosition"]

    def test_double_pull_spread_counts_toward_edge(self, make_config) -> None:
        """Front is 602mm wide, so 260 + 96/2 runs past the 301mm half width."""
        pull = {"type": "double", "holeSpacing": 96, "horizontalPosition": 260}
        config = make_config(
            {"features": {"drawers": {"enabled": True, "count": 2, "pullHoles": pull}}}
        )
        result = DrawerValidator().validate(config)
        assert "off the 602mm drawer front" in result.errors[0].message

    def test_offset_pull_inside_front(self, make_config) -> None:
        pull = {"type": "double", "horizontalPosition": 100, "verticalOffset": 50}
        config = make_config(
            {"features": {"drawers": {"enabled": True, "count": 2, "pullHoles": pull}}}
        )
        assert DrawerValidator().validate(config).is_valid

    def test_disabled_drawers_not_checked(self, make_config) -> None:
        config = make_config({"features": {"drawers": {"count": 50, "slideWidth": 500}}})
        assert DrawerValidator().validate(config).is_valid


class TestPredrillValidator:
    """Tests for PredrillValidator."""

    @staticmethod
    def _slides(make_config, count: int = 1, **slides):
        return make_config(
            {
                "features": {"drawers": {"enabled": True, "count": count}},
                "predrills": {"slides": {"enabled": True, **slides}},
            }
        )

    def test_default_slides_pass(self, make_config) -> None:
        assert PredrillValidator().validate(self._slides(make_config, count=3)).is_valid

    def test_negative_mounting_height_would_hit_toe_kick(self, make_config) -> None:
        result = PredrillValidator().validate(self._slides(make_config, mountingHeight=-60))

        assert not result.is_valid
        assert result.errors[0].path == "predrills.slides.mountingHeight"
        assert result.errors[0].value == -60.0

    def test_mounting_height_above_opening(self, make_config) -> None:
        """Three drawers leave 192.667mm openings."""
        config = self._slides(make_config, count=3, mountingHeight=200)
        result = PredrillValidator().validate(config)
        assert [e.path for e in result.errors] == ["predrills.slides.mountingHeight"]

    @pytest.mark.parametrize(
        ("field", "path"),
        [
            ("holeSpacing", "predrills.slides.holeSpacing"),
            ("holeDiameter", "predrills.slides.holeDiameter"),
        ],
    )
    def test_slide_sizes_must_be_positive(self, make_config, field: str, path: str) -> None:
        result = PredrillValidator().validate(self._slides(make_config, **{field: 0}))
        assert [e.path for e in result.errors] == [path]

    def test_needs_a_hole_per_slide(self, make_config) -> None:
        result = PredrillValidator().validate(self._slides(make_config, holesPerSlide=0))
        assert [e.path for e in result.errors] == ["predrills.slides.holesPerSlide"]

    def test_front_offset_past_rear_margin(self, make_config) -> None:
        result = PredrillValidator().validate(self._slides(make_config, frontOffset=545))
        assert [e.path for e in result.errors] == ["predrills.slides.frontOffset"]

    def test_slides_ignored_without_drawers(self, make_config) -> None:
        config = make_config({"predrills": {"slides": {"enabled": True, "mountingHeight": -60}}})
        assert PredrillValidator().validate(config).is_valid

    def test_assembly_spacing_and_diameter_positive(self, make_config) -> None:
        config = make_config(
            {
                "predrills": {
                    "assembly": {"enabled": True, "screwSpacing": 0, "pilotDiameter": -1}
                }
            }
        )
        paths = {e.path for e in PredrillValidator().validate(config).errors}
        assert {"predrills.assembly.screwSpacing", "predrills.assembly.pilotDiameter"} <= paths

    def test_countersink_wider_than_pilot(self, make_config) -> None:
        config = make_config(
            {"predrills": {"assembly": {"enabled": True, "countersinkDiameter": 3}}}
        )
        result = PredrillValidator().validate(config)
        assert [e.path for e in result.errors] == ["predrills.assembly.countersinkDiameter"]

    @pytest.mark.parametrize("edge_distance", [280, 400, -5])
    def test_edge_distance_leaves_room(self, make_config, edge_distance: float) -> None:
        config = make_config(
            {"predrills": {"assembly": {"enabled": True, "edgeDistance": edge_distance}}}
        )
        result = PredrillValidator().validate(config)
        assert [e.path for e in result.errors] == ["predrills.assembly.edgeDistance"]

    def test_disabled_predrills_not_checked(self, make_config) -> None:
        config = make_config({"predrills": {"assembly": {"screwSpacing": 0}}})
        assert PredrillValidator().validate(config).is_valid
