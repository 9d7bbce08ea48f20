"""Unit tests for back panel generation and its dados."""

from __future__ import annotations

from cabineato.domain.geometry import CabinetGeometry
from cabineato.domain.services import back_panel_dados, generate_back_panel
from cabineato.domain.value_objects import ComponentRole, SlotPurpose


class TestGenerateBackPanel:
    """Tests for generate_back_panel."""

    def test_applied_back_covers_rear_above_toe_kick(self, default_config, default_geometry) -> None:
        back = generate_back_panel(default_config, default_geometry)

        assert back is not None
        assert back.role == ComponentRole.BACK_PANEL
        assert back.dimensions == (600.0, 620.0, 6.0)
        assert back.position == (0.0, 100.0, 554.0)
        assert back.material_thickness == 6.0

    def test_inset_back_extends_into_dados(self, make_config) -> None:
        config = make_config({"backPanel": {"type": "inset"}})
        back = generate_back_panel(config, CabinetGeometry.from_config(config))

        assert back is not None
        assert back.dimensions == (576.0, 596.0, 6.0)
        assert back.position == (12.0, 112.0, 544.0)

    def test_no_back(self, make_config) -> None:
        config = make_config({"backPanel": {"type": "none"}})
        assert generate_back_panel(config, CabinetGeometry.from_config(config)) is None


class TestBackPanelDados:
    """Tests for back_panel_dados."""

    def test_only_for_inset_backs(self, default_config, default_geometry) -> None:
        assert back_panel_dados(default_config, default_geometry) is None

    def test_slot_width_matches_back_thickness(self, make_config) -> None:
        config = make_config(
            {"backPanel": {"type": "inset"}, "secondaryMaterial": {"backPanelThickness": 9}}
        )
        dados = back_panel_dados(config, CabinetGeometry.from_config(config))

        assert dados is not None
        assert dados.side.width == 9.0
        assert dados.horizontal.width == 9.0
        assert dados.side.depth == 6.0

    def test_side_dado_runs_above_toe_kick(self, make_config) -> None:
        config = make_config({"backPanel": {"type": "inset"}})
        dados = back_panel_dados(config, CabinetGeometry.from_config(config))

        assert dados is not None
        assert dados.side.path == ((547.0, 100.0), (547.0, 720.0))
        assert dados.side.purpose == SlotPurpose.BACK_PANEL

    def test_horizontal_dado_spans_panel_width(self, make_config) -> None:
        config = make_config({"backPanel": {"type": "inset"}})
        dados = back_panel_dados(config, CabinetGeometry.from_config(config))

        assert dados is not None
        assert dados.horizontal.path == ((0.0, 547.0), (564.0, 547.0))
