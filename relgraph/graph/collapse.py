"""Collapsing many-to-many join vertices."""

from .dependency_graph import DependencyGraph
from .node_types import JoinVertex, Vertex


def singularize_joins(graph: DependencyGraph) -> DependencyGraph:
    """Replace every JoinVertex with its representative join entity.

    Each edge touching a JoinVertex is redrawn from (or to) the vertex's
    representative, the lexicographically smallest member. The JoinVertex
    vertices are then removed; edges that become duplicates merge.

    Args:
        graph: The graph to collapse in place.

    Returns:
        The same graph.
    """
    for source, target in graph.edges():
        if not isinstance(source, JoinVertex) and not isinstance(target, JoinVertex):
            continue

        edge_type = graph.edge_type(source, target)
        graph.remove_edge(source, target)
        graph.add_edge(_collapse(graph, source), _collapse(graph, target), edge_type)

    for vertex in graph.join_vertices():
        graph.remove_vertex(vertex)

    return graph


def _collapse(graph: DependencyGraph, vertex: Vertex) -> Vertex:
    if isinstance(vertex, JoinVertex):
        return graph.add_vertex(vertex.representative, synthetic=True)
    return vertex
