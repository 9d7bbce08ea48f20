"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class AssemblyRequest(BaseModel):
    """Request carrying an assembly configuration.

    The configuration is taken as a raw mapping so that loading errors are
    reported with the same JSON paths as the CLI.
    """

    config: dict[str, Any] = Field(
        default_factory=dict, description="Assembly configuration JSON"
    )
    include_reliefs: bool = Field(
        default=False, description="Include dogbone reliefs in the assembly JSON"
    )
