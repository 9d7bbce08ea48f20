"""Pydantic schemas for the REST API."""

from cabineato.web.schemas.requests import AssemblyRequest
from cabineato.web.schemas.responses import (
    AssemblySummarySchema,
    ErrorResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    "AssemblyRequest",
    "AssemblySummarySchema",
    "ErrorResponseSchema",
    "ValidationResultSchema",
]
