"""DependencyGraph wrapper around networkx."""

from typing import Any, Iterable

import networkx as nx

from .errors import ThroughWarning
from .node_types import EdgeType, JoinVertex, NodeType, Vertex


class DependencyGraph:
    """A directed graph of entity dependencies.

    An edge ``A -> B`` means B must exist (be loaded, seeded) before A.
    Vertices are entity names or JoinVertex values. Adding an edge that
    already exists is a no-op, and adding an edge adds its endpoints.

    Wraps a networkx DiGraph; ``warnings`` holds the through relationships
    skipped while the graph was built.
    """

    def __init__(self):
        """Initialize an empty dependency graph."""
        self._graph = nx.DiGraph()
        self.warnings: list[ThroughWarning] = []

    @property
    def graph(self) -> nx.DiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_vertex(self, vertex: Vertex, **attrs: Any) -> Vertex:
        """Add a vertex if it is not already present.

        Args:
            vertex: An entity name or a JoinVertex.
            **attrs: Attributes to set on a newly added vertex.

        Returns:
            The vertex.
        """
        if not self._graph.has_node(vertex):
            node_type = NodeType.JOIN if isinstance(vertex, JoinVertex) else NodeType.ENTITY
            self._graph.add_node(vertex, node_type=node_type, **attrs)
        return vertex

    def add_edge(
        self, source: Vertex, target: Vertex, edge_type: EdgeType | None = None
    ) -> None:
        """Add a directed edge, adding missing endpoints.

        The edge type of the first insertion is kept.
        """
        if self._graph.has_edge(source, target):
            return

        self.add_vertex(source)
        self.add_vertex(target)
        self._graph.add_edge(source, target, edge_type=edge_type)

    def remove_vertex(self, vertex: Vertex) -> None:
        """Remove a vertex and its edges."""
        self._graph.remove_node(vertex)

    def remove_edge(self, source: Vertex, target: Vertex) -> None:
        """Remove a directed edge. Endpoints are kept."""
        self._graph.remove_edge(source, target)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_vertex(self, vertex: Vertex) -> bool:
        return self._graph.has_node(vertex)

    def has_edge(self, source: Vertex, target: Vertex) -> bool:
        return self._graph.has_edge(source, target)

    def vertices(self) -> list[Vertex]:
        """Get all vertices in insertion order."""
        return list(self._graph.nodes)

    def edges(self) -> list[tuple[Vertex, Vertex]]:
        """Get all edges as (source, target) pairs."""
        return list(self._graph.edges)

    def edge_type(self, source: Vertex, target: Vertex) -> EdgeType | None:
        """Get the relationship kind that produced an edge."""
        return self._graph.edges[source, target].get("edge_type")

    def entity_names(self) -> list[str]:
        """Get the names of all entity vertices."""
        return [
            node
            for node, data in self._graph.nodes(data=True)
            if data.get("node_type") == NodeType.ENTITY
        ]

    def join_vertices(self) -> list[JoinVertex]:
        """Get all JoinVertex vertices."""
        return [node for node in self._graph.nodes if isinstance(node, JoinVertex)]

    def find_join_vertex(self, members: Iterable[str]) -> JoinVertex | None:
        """Find the JoinVertex already in the graph for a set of join entities."""
        key = JoinVertex(frozenset(members))
        for vertex in self.join_vertices():
            if vertex == key:
                return vertex
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DependencyGraph):
            return NotImplemented
        return set(self.vertices()) == set(other.vertices()) and set(
            self.edges()
        ) == set(other.edges())

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        """Serialize the graph to plain data, sorted for stable output."""
        vertices = []
        for vertex in sorted(self.vertices(), key=str):
            data = self._graph.nodes[vertex]
            entry: dict[str, Any] = {
                "id": str(vertex),
                "type": data["node_type"].value,
            }
            if isinstance(vertex, JoinVertex):
                entry["members"] = sorted(vertex.members)
            if data.get("synthetic"):
                entry["synthetic"] = True
            vertices.append(entry)

        edges = []
        for source, target in sorted(self.edges(), key=lambda e: (str(e[0]), str(e[1]))):
            edge_type = self.edge_type(source, target)
            edges.append({
                "source": str(source),
                "target": str(target),
                "type": edge_type.value if edge_type is not None else None,
            })

        return {
            "vertices": vertices,
            "edges": edges,
            "warnings": [
                {
                    "kind": w.kind,
                    "through_name": w.through_name,
                    "owner": w.owner,
                }
                for w in self.warnings
            ],
        }
