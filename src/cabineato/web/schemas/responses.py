"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class AssemblySummarySchema(BaseModel):
    """Part counts for a generated assembly."""

    total_components: int = Field(..., description="Number of parts")
    by_role: dict[str, int] = Field(..., description="Part count per role")
    outside_cut_count: int = Field(..., description="Parts cut on the profile layer")
    feature_count: int = Field(..., description="Holes, slots and notches")
    interior_bounds: dict[str, float] = Field(..., description="Interior w, h, d in mm")


class ErrorResponseSchema(BaseModel):
    """Body of every 422 response from the configuration and build handlers."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")
