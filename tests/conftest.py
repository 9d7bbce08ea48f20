"""Pytest configuration and shared fixtures for cabinet assembly tests."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from cabineato.application import AssemblyBuilder
from cabineato.application.config import AssemblyConfig, load_config_from_dict
from cabineato.domain.geometry import CabinetGeometry

FIXED_TIME = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


class FixedClock:
    """Clock that always returns the same instant."""

    def __init__(self, instant: datetime = FIXED_TIME) -> None:
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests exercising the CLI or HTTP API")


# =============================================================================
# Configuration fixtures
# =============================================================================


@pytest.fixture
def default_config() -> AssemblyConfig:
    """600 x 720 x 560 cabinet, 18mm carcass, toe kick, two adjustable shelves."""
    return AssemblyConfig()


@pytest.fixture
def make_config() -> Callable[[dict[str, Any]], AssemblyConfig]:
    """Factory building an AssemblyConfig from a camelCase mapping."""

    def _make(data: dict[str, Any]) -> AssemblyConfig:
        return load_config_from_dict(data)

    return _make


@pytest.fixture
def drawer_config() -> AssemblyConfig:
    """Three-drawer base cabinet without shelves."""
    return load_config_from_dict(
        {
            "features": {
                "shelves": {"adjustable": {"enabled": False}},
                "drawers": {"enabled": True, "count": 3},
            }
        }
    )


@pytest.fixture
def default_geometry(default_config: AssemblyConfig) -> CabinetGeometry:
    return CabinetGeometry.from_config(default_config)


# =============================================================================
# Builder fixtures
# =============================================================================


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def builder(fixed_clock: FixedClock) -> AssemblyBuilder:
    """AssemblyBuilder with a deterministic clock."""
    return AssemblyBuilder(clock=fixed_clock)
