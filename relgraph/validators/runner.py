"""Validation runner that orchestrates all validators."""

import logging
from pathlib import Path

from ..graph.builder import build_graph
from ..graph.dependency_graph import DependencyGraph
from ..graph.errors import GraphBuildError
from ..schema.loader import parse_model
from ..schema.models import ModelSet
from .base import ValidationResult
from .join_symmetry import check_join_symmetry
from .orphan_detector import check_orphan_entities
from .reference_integrity import check_reference_integrity
from .through_warnings import check_through_warnings

logger = logging.getLogger(__name__)


def run_validators(model: ModelSet, graph: DependencyGraph | None) -> ValidationResult:
    """Run all validators on a model set.

    Args:
        model: The parsed model set.
        graph: The dependency graph, or None if it could not be built.
            Graph-based checks are skipped without one.

    Returns:
        Combined ValidationResult from all validators.
    """
    result = ValidationResult()

    # Model-level checks first; they explain most build failures
    result.merge(check_reference_integrity(model))
    result.merge(check_join_symmetry(model))

    if graph is not None:
        result.merge(check_through_warnings(graph))
        result.merge(check_orphan_entities(graph))

    return result


def validate_model_file(path: str | Path) -> ValidationResult:
    """Load and validate a model file.

    Args:
        path: Path to the YAML model file.

    Returns:
        ValidationResult from all validators.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        SchemaValidationError: If the model fails schema validation.
    """
    model = parse_model(path)

    try:
        graph = build_graph(model)
    except GraphBuildError as e:
        logger.info("Skipping graph checks for %s: %s", path, e)
        graph = None

    return run_validators(model, graph)
