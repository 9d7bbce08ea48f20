"""FastAPI dependency injection for the assembly builder."""

from typing import Annotated

from fastapi import Depends

from cabineato.application import AssemblyBuilder


def get_assembly_builder() -> AssemblyBuilder:
    """Dependency for AssemblyBuilder, using the system clock."""
    return AssemblyBuilder()


AssemblyBuilderDep = Annotated[AssemblyBuilder, Depends(get_assembly_builder)]
