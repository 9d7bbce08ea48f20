"""Assembly generation endpoints."""

from typing import Any

from fastapi import APIRouter

from cabineato.application import summarize_assembly
from cabineato.application.config import load_config_from_dict
from cabineato.infrastructure import AssemblyJsonExporter
from cabineato.web.dependencies import AssemblyBuilderDep
from cabineato.web.schemas.requests import AssemblyRequest
from cabineato.web.schemas.responses import AssemblySummarySchema, ErrorResponseSchema

router = APIRouter(
    prefix="/assemblies",
    tags=["assemblies"],
    responses={422: {"model": ErrorResponseSchema}},
)


@router.post("")
async def create_assembly(
    request: AssemblyRequest, builder: AssemblyBuilderDep
) -> dict[str, Any]:
    """Build an assembly and return it as JSON.

    Invalid configurations are rejected with 422 and the full error list.
    """
    config = load_config_from_dict(request.config)
    assembly = builder.build(config)
    return AssemblyJsonExporter(include_reliefs=request.include_reliefs).to_dict(assembly)


@router.post("/summary", response_model=AssemblySummarySchema)
async def summarize(
    request: AssemblyRequest, builder: AssemblyBuilderDep
) -> AssemblySummarySchema:
    """Build an assembly and return its part counts."""
    config = load_config_from_dict(request.config)
    assembly = builder.build(config)
    summary = summarize_assembly(assembly)
    interior = assembly.interior_bounds

    return AssemblySummarySchema(
        total_components=summary.total_components,
        by_role={role.value: count for role, count in summary.by_role.items()},
        outside_cut_count=summary.outside_cut_count,
        feature_count=summary.feature_count,
        interior_bounds={"w": interior.w, "h": interior.h, "d": interior.d},
    )
