"""Application layer - configuration, validation and assembly building."""

from .builder import AssemblyBuilder, AssemblyBuildError, build_assembly
from .summary import AssemblySummary, components_by_layer, summarize_assembly

__all__ = [
    "AssemblyBuildError",
    "AssemblyBuilder",
    "AssemblySummary",
    "build_assembly",
    "components_by_layer",
    "summarize_assembly",
]
