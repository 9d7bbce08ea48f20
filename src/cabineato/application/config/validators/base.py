"""Error and warning records collected while checking a configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ValidationError:
    """A problem that makes the cabinet impossible to build.

    ``path`` is the camelCase JSON path of the offending field, e.g.
    ``"features.drawers.count"``; ``value`` is the number that failed.
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A buildable but risky setting, with an optional remedy."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Errors and warnings in the order the validators found them."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_messages(self) -> list[str]:
        return [error.message for error in self.errors]

    @property
    def exit_code(self) -> int:
        """CLI exit status: 1 on errors, 2 on warnings only, else 0."""
        if self.errors:
            return 1
        return 2 if self.warnings else 0

    def add_error(self, path: str, message: str, value: Any = None) -> ValidationResult:
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        self.warnings.append(ValidationWarning(path=path, message=message, suggestion=suggestion))
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Append another result's entries after this one's."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self
