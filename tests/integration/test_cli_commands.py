"""Integration tests for the cabineato CLI.

These tests verify the commands work end-to-end, including:
- validate exit codes for valid, warning and invalid configurations
- build output to stdout and to a file
- summary output in millimeters and inches
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from cabineato.cli.main import app

pytestmark = pytest.mark.integration


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a configuration mapping to a JSON file and return its path."""

    def _write(data: dict[str, Any], name: str = "cabinet.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_config(self, runner: CliRunner, write_config) -> None:
        result = runner.invoke(app, ["validate", str(write_config({}))])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_valid_with_warnings(self, runner: CliRunner, write_config) -> None:
        path = write_config({"features": {"drawers": {"enabled": True, "count": 2}}})
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "Suggestion:" in result.output

    def test_infeasible_config(self, runner: CliRunner, write_config) -> None:
        path = write_config({"globalBounds": {"w": 50}})
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "globalBounds.w" in result.output
        assert "Validation failed" in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        result = runner.invoke(app, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output

    def test_unknown_field_rejected(self, runner: CliRunner, write_config) -> None:
        result = runner.invoke(app, ["validate", str(write_config({"colour": "red"}))])

        assert result.exit_code == 1
        assert "colour" in result.output


class TestBuildCommand:
    """Tests for the build command."""

    def test_prints_assembly_json(self, runner: CliRunner, write_config) -> None:
        result = runner.invoke(app, ["build", str(write_config({}))])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data["components"]) == 8
        assert data["interiorBounds"]["h"] == 584.0

    def test_writes_output_file(self, runner: CliRunner, write_config, tmp_path: Path) -> None:
        output = tmp_path / "out.json"
        result = runner.invoke(app, ["build", str(write_config({})), "-o", str(output)])

        assert result.exit_code == 0
        assert "Wrote 8 components" in result.output
        assert json.loads(output.read_text(encoding="utf-8"))["schemaVersion"] == "1.0"

    def test_reliefs_flag(self, runner: CliRunner, write_config) -> None:
        result = runner.invoke(app, ["build", str(write_config({})), "--reliefs"])

        assert result.exit_code == 0
        assert "reliefs" in json.loads(result.stdout)["components"][0]

    def test_infeasible_config(self, runner: CliRunner, write_config) -> None:
        path = write_config({"features": {"drawers": {"enabled": True, "count": 8}}})
        result = runner.invoke(app, ["build", str(path)])

        assert result.exit_code == 1
        assert "Drawer height" in result.output


class TestSummaryCommand:
    """Tests for the summary command."""

    def test_millimeters(self, runner: CliRunner, write_config) -> None:
        result = runner.invoke(app, ["summary", str(write_config({}))])

        assert result.exit_code == 0
        assert "Cabinet:  600mm x 720mm x 560mm" in result.output
        assert "Interior: 564mm x 584mm x 560mm" in result.output
        assert "Total: 8 components, 66 features" in result.output

    def test_inches(self, runner: CliRunner, write_config) -> None:
        result = runner.invoke(app, ["summary", str(write_config({})), "--inches"])

        assert result.exit_code == 0
        assert 'Cabinet:  23-5/8"' in result.output

    def test_verbose_flag(self, runner: CliRunner, write_config) -> None:
        result = runner.invoke(app, ["--verbose", "summary", str(write_config({}))])
        assert result.exit_code == 0
