"""Orphan entity detection validator."""

from ..graph.dependency_graph import DependencyGraph
from .base import ValidationResult


def check_orphan_entities(graph: DependencyGraph) -> ValidationResult:
    """Check for entities with no dependency edges.

    An orphan entity neither depends on nor is depended on by anything, so
    its position in any load order is arbitrary. That is often fine, but can
    also point at a forgotten relationship.

    Args:
        graph: The dependency graph to check.

    Returns:
        ValidationResult with warnings for orphan entities.
    """
    result = ValidationResult()

    for entity_name in graph.entity_names():
        if graph.graph.degree(entity_name) == 0:
            result.add_warning(
                code="ORPHAN_ENTITY",
                message=f"Entity '{entity_name}' has no relationships to other entities",
                entity=entity_name,
            )

    return result
