"""Base classes for validation results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Severity level of a validation issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    """A single validation issue, located on an entity and optionally one of
    its relationships."""

    code: str
    message: str
    severity: Severity
    entity: str | None = None
    relationship: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def location(self) -> str:
        """``Entity`` or ``Entity.relationship``, empty when unlocated."""
        if not self.entity:
            return ""
        if self.relationship:
            return f"{self.entity}.{self.relationship}"
        return self.entity

    def __str__(self) -> str:
        location = f" [{self.location}]" if self.location else ""
        return f"{self.severity.value.upper()}: {self.code}{location} - {self.message}"


@dataclass
class ValidationResult:
    """Result of running validation on a model set."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def is_valid(self) -> bool:
        """The model set is valid when there are no errors."""
        return not self.has_errors

    def add_error(
        self,
        code: str,
        message: str,
        entity: str | None = None,
        relationship: str | None = None,
        **details: Any,
    ) -> None:
        self._add(Severity.ERROR, code, message, entity, relationship, details)

    def add_warning(
        self,
        code: str,
        message: str,
        entity: str | None = None,
        relationship: str | None = None,
        **details: Any,
    ) -> None:
        self._add(Severity.WARNING, code, message, entity, relationship, details)

    def _add(
        self,
        severity: Severity,
        code: str,
        message: str,
        entity: str | None,
        relationship: str | None,
        details: dict[str, Any],
    ) -> None:
        self.issues.append(
            ValidationIssue(
                code=code,
                message=message,
                severity=severity,
                entity=entity,
                relationship=relationship,
                details=details,
            )
        )

    def merge(self, other: "ValidationResult") -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)
