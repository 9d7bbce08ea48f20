"""Assembly summaries for reports and the API."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from cabineato.domain.services.cutting import component_layers
from cabineato.domain.value_objects import Assembly, CNCLayer, Component, ComponentRole


@dataclass(frozen=True)
class AssemblySummary:
    """Totals for an assembly.

    Attributes:
        total_components: Number of parts.
        by_role: Part count per role, in first-seen order.
        outside_cut_count: Parts whose outline is profile cut.
        feature_count: Holes, slots and notches across all parts.
    """

    total_components: int
    by_role: dict[ComponentRole, int]
    outside_cut_count: int
    feature_count: int


def summarize_assembly(assembly: Assembly) -> AssemblySummary:
    """Count an assembly's parts by role and layer."""
    by_role = Counter(component.role for component in assembly.components)
    return AssemblySummary(
        total_components=len(assembly.components),
        by_role=dict(by_role),
        outside_cut_count=sum(
            1 for component in assembly.components if component.layer == CNCLayer.OUTSIDE_CUT
        ),
        feature_count=sum(len(component.features) for component in assembly.components),
    )


def components_by_layer(assembly: Assembly) -> dict[CNCLayer, list[Component]]:
    """Group components under every CNC layer they need machining on.

    A side panel with shelf pin holes appears under both OUTSIDE_CUT and
    DRILL_5MM. Layers with no components are omitted.
    """
    groups: dict[CNCLayer, list[Component]] = {}
    for component in assembly.components:
        for layer in component_layers(component):
            groups.setdefault(layer, []).append(component)
    return groups
