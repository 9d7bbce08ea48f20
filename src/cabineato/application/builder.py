"""Assembly builder: turns a configuration into a complete Assembly.

The builder validates, derives the shared geometry once, runs every
generator against it in a fixed order and collects the results. Generators
never see each other's output; the builder is the only place where features
from one generator are attached to panels made by another.
"""

from __future__ import annotations

import logging

from cabineato.application.config.schema import AssemblyConfig
from cabineato.application.config.validator import validate_config
from cabineato.contracts import Clock, SystemClock
from cabineato.domain.constants import BUILDER_VERSION
from cabineato.domain.geometry import CabinetGeometry
from cabineato.domain.services import (
    back_panel_dados,
    fixed_shelf_dados,
    generate_adjustable_shelves,
    generate_back_panel,
    generate_carcass,
    generate_drawers,
    generate_fixed_shelves,
    generate_runner_components,
    generate_toe_kick_panel,
    runner_holes,
    shelf_pin_holes,
    slide_predrills,
)
from cabineato.domain.value_objects import Assembly, BuildMetadata, Component, Feature

logger = logging.getLogger(__name__)


class AssemblyBuildError(Exception):
    """Raised when asked to build an invalid configuration.

    The message lists every validation error, one per line, so nothing is
    lost compared to calling ``validate_config`` directly.

    Attributes:
        errors: The validation error messages.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Invalid assembly configuration:\n" + "\n".join(errors))


class AssemblyBuilder:
    """Builds assemblies, stamping them with an injected clock and version.

    Example:
        >>> builder = AssemblyBuilder()
        >>> assembly = builder.build(AssemblyConfig())
        >>> len(assembly.components)
        8
    """

    def __init__(self, clock: Clock | None = None, version: str = BUILDER_VERSION) -> None:
        self.clock = clock or SystemClock()
        self.version = version

    def build(self, config: AssemblyConfig) -> Assembly:
        """Build the assembly for a configuration.

        Components are ordered carcass panels (left, right, top, bottom),
        back panel, toe-kick panel, shelves (adjustable, fixed, runners),
        then drawers.

        Args:
            config: The configuration to build.

        Returns:
            The complete assembly.

        Raises:
            AssemblyBuildError: If the configuration fails validation.
        """
        validation = validate_config(config)
        if not validation.is_valid:
            logger.info(f"Rejected configuration with {len(validation.errors)} error(s)")
            raise AssemblyBuildError(validation.error_messages)

        geometry = CabinetGeometry.from_config(config)
        components = self._carcass(config, geometry)

        back = generate_back_panel(config, geometry)
        if back is not None:
            components.append(back)
        toe_kick = generate_toe_kick_panel(config, geometry)
        if toe_kick is not None:
            components.append(toe_kick)

        components.extend(generate_adjustable_shelves(config, geometry))
        components.extend(generate_fixed_shelves(config, geometry))
        components.extend(generate_runner_components(config, geometry))
        components.extend(generate_drawers(config, geometry))

        assembly = Assembly(
            config=config,
            components=tuple(components),
            interior_bounds=geometry.interior,
            metadata=BuildMetadata(generated_at=self.clock.now(), version=self.version),
        )
        logger.info(
            f"Built assembly {geometry.width:g} x {geometry.height:g} x {geometry.depth:g} "
            f"with {len(components)} components"
        )
        return assembly

    def _carcass(self, config: AssemblyConfig, geometry: CabinetGeometry) -> list[Component]:
        """Carcass panels with the features other generators cut into them."""
        panels = generate_carcass(config, geometry)

        side_features: list[Feature] = []
        side_features.extend(shelf_pin_holes(config, geometry))
        side_features.extend(runner_holes(config, geometry))
        side_features.extend(fixed_shelf_dados(config, geometry))
        horizontal_features: list[Feature] = []
        dados = back_panel_dados(config, geometry)
        if dados is not None:
            side_features.append(dados.side)
            horizontal_features.append(dados.horizontal)
        side_features.extend(slide_predrills(config, geometry))

        logger.debug(
            f"Adding {len(side_features)} features to each side panel and "
            f"{len(horizontal_features)} to top/bottom"
        )
        return [
            panels.left.with_features(*side_features),
            panels.right.with_features(*side_features),
            panels.top.with_features(*horizontal_features),
            panels.bottom.with_features(*horizontal_features),
        ]


def build_assembly(config: AssemblyConfig, clock: Clock | None = None) -> Assembly:
    """Build an assembly with the default builder version.

    Raises:
        AssemblyBuildError: If the configuration fails validation.
    """
    return AssemblyBuilder(clock=clock).build(config)
