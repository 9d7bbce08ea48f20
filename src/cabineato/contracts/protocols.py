"""Protocols for validators and the build clock."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cabineato.application.config.schema import AssemblyConfig
    from cabineato.application.config.validators.base import ValidationResult


@runtime_checkable
class Validator(Protocol):
    """Protocol for assembly configuration validators.

    Validators check one aspect of an AssemblyConfig and return a
    ValidationResult containing any errors or warnings found. They report
    problems, they never raise for them.

    Attributes:
        name: Unique identifier for the validator (e.g., "carcass", "drawers").
    """

    @property
    def name(self) -> str:
        """Return the unique name/identifier for this validator."""
        ...

    def validate(self, config: AssemblyConfig) -> ValidationResult:
        """Validate the given configuration.

        Args:
            config: An AssemblyConfig instance to validate.

        Returns:
            ValidationResult containing any errors or warnings found.
        """
        ...


@runtime_checkable
class Clock(Protocol):
    """Source of the build timestamp."""

    def now(self) -> datetime:
        """Return the current time."""
        ...


class SystemClock:
    """Clock reading the system time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
