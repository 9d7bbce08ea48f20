"""Configuration validation endpoints."""

from fastapi import APIRouter

from cabineato.application.config import load_config_from_dict, validate_config
from cabineato.web.schemas.requests import AssemblyRequest
from cabineato.web.schemas.responses import ErrorResponseSchema, ValidationResultSchema

router = APIRouter(
    prefix="/validate",
    tags=["validate"],
    responses={422: {"model": ErrorResponseSchema}},
)


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(request: AssemblyRequest) -> ValidationResultSchema:
    """Validate an assembly configuration without building it.

    Args:
        request: Request containing the configuration to validate.

    Returns:
        Validation result with errors and warnings.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
