"""Reports through relationships skipped during a graph build."""

from ..graph.dependency_graph import DependencyGraph
from .base import ValidationResult


def check_through_warnings(graph: DependencyGraph) -> ValidationResult:
    """Turn the graph's build warnings into validation warnings.

    Args:
        graph: A graph returned by the builder.

    Returns:
        ValidationResult with one BROKEN_THROUGH warning per skipped relationship.
    """
    result = ValidationResult()

    for warning in graph.warnings:
        result.add_warning(
            code="BROKEN_THROUGH",
            message=(
                f"{warning.kind} through '{warning.through_name}' could not be "
                f"resolved and was left out of the graph"
            ),
            entity=warning.owner,
            kind=warning.kind,
            through_name=warning.through_name,
        )

    return result
