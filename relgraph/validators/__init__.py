"""Validators for structural checks of entity model sets."""

from .base import Severity, ValidationIssue, ValidationResult
from .join_symmetry import check_join_symmetry
from .orphan_detector import check_orphan_entities
from .reference_integrity import check_reference_integrity
from .through_warnings import check_through_warnings
from .runner import run_validators, validate_model_file

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_join_symmetry",
    "check_orphan_entities",
    "check_reference_integrity",
    "check_through_warnings",
    "run_validators",
    "validate_model_file",
]
