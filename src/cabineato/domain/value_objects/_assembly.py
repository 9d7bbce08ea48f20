"""Assembly output value objects."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from ._components import Component, ComponentRole

if TYPE_CHECKING:
    from cabineato.application.config.schema import AssemblyConfig


@dataclass(frozen=True)
class Bounds:
    """Box extents in mm."""

    w: float
    h: float
    d: float


@dataclass(frozen=True)
class BuildMetadata:
    """When and by which builder version an assembly was generated."""

    generated_at: datetime
    version: str


@dataclass(frozen=True)
class Assembly:
    """Complete generated cabinet.

    Attributes:
        config: The configuration the assembly was built from.
        components: Every part, in generation order.
        interior_bounds: Clear space inside the carcass.
        metadata: Build timestamp and version.
    """

    config: AssemblyConfig
    components: tuple[Component, ...]
    interior_bounds: Bounds
    metadata: BuildMetadata

    def by_role(self, role: ComponentRole) -> list[Component]:
        """Components with the given role, in generation order."""
        return [c for c in self.components if c.role == role]

    def get(self, component_id: str) -> Component:
        """Look up a component by id.

        Raises:
            KeyError: If no component has that id.
        """
        for component in self.components:
            if component.id == component_id:
                return component
        raise KeyError(component_id)
