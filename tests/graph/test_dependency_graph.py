"""Tests for DependencyGraph."""

import networkx as nx
import pytest

from relgraph.graph.dependency_graph import DependencyGraph
from relgraph.graph.errors import ThroughWarning
from relgraph.graph.node_types import EdgeType, JoinVertex, NodeType


class TestJoinVertex:
    def test_equality_is_by_members(self):
        a = JoinVertex.of("Assembly::HABTM_Part", "Part::HABTM_Assembly")
        b = JoinVertex.of("Part::HABTM_Assembly", "Assembly::HABTM_Part")

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_members(self):
        assert JoinVertex.of("A::HABTM_B") != JoinVertex.of("B::HABTM_A")

    def test_representative(self):
        vertex = JoinVertex.of("Part::HABTM_Assembly", "Assembly::HABTM_Part")
        assert vertex.representative == "Assembly::HABTM_Part"

    def test_str(self):
        vertex = JoinVertex.of("Part::HABTM_Assembly", "Assembly::HABTM_Part")
        assert str(vertex) == "{Assembly::HABTM_Part, Part::HABTM_Assembly}"


class TestMutation:
    def test_add_vertex_is_idempotent(self):
        graph = DependencyGraph()
        graph.add_vertex("Author")
        graph.add_vertex("Author")

        assert graph.vertices() == ["Author"]

    def test_add_edge_adds_endpoints(self):
        graph = DependencyGraph()
        graph.add_edge("Book", "Author", EdgeType.BELONGS_TO)

        assert graph.has_vertex("Book")
        assert graph.has_vertex("Author")
        assert graph.has_edge("Book", "Author")
        assert not graph.has_edge("Author", "Book")

    def test_duplicate_edge_keeps_first_type(self):
        graph = DependencyGraph()
        graph.add_edge("Book", "Author", EdgeType.BELONGS_TO)
        graph.add_edge("Book", "Author", EdgeType.HAS_MANY)

        assert graph.edges() == [("Book", "Author")]
        assert graph.edge_type("Book", "Author") == EdgeType.BELONGS_TO

    def test_remove_edge_keeps_vertices(self):
        graph = DependencyGraph()
        graph.add_edge("Book", "Author")
        graph.remove_edge("Book", "Author")

        assert graph.edges() == []
        assert set(graph.vertices()) == {"Book", "Author"}

    def test_remove_vertex_drops_edges(self):
        graph = DependencyGraph()
        graph.add_edge("Book", "Author")
        graph.remove_vertex("Author")

        assert graph.vertices() == ["Book"]
        assert graph.edges() == []

    def test_remove_missing_edge_raises(self):
        graph = DependencyGraph()
        with pytest.raises(nx.NetworkXError):
            graph.remove_edge("Book", "Author")


class TestQueries:
    def test_node_types(self):
        graph = DependencyGraph()
        join = JoinVertex.of("Assembly::HABTM_Part", "Part::HABTM_Assembly")
        graph.add_edge(join, "Assembly")

        assert graph.graph.nodes[join]["node_type"] == NodeType.JOIN
        assert graph.graph.nodes["Assembly"]["node_type"] == NodeType.ENTITY
        assert graph.entity_names() == ["Assembly"]
        assert graph.join_vertices() == [join]

    def test_find_join_vertex(self):
        graph = DependencyGraph()
        join = JoinVertex.of("Assembly::HABTM_Part", "Part::HABTM_Assembly")
        graph.add_edge(join, "Assembly")

        found = graph.find_join_vertex(["Part::HABTM_Assembly", "Assembly::HABTM_Part"])
        assert found is join
        assert graph.find_join_vertex(["Other::HABTM_Thing"]) is None

    def test_structural_equality(self):
        first = DependencyGraph()
        first.add_edge("Book", "Author")
        second = DependencyGraph()
        second.add_vertex("Author")
        second.add_edge("Book", "Author")

        assert first == second

        second.add_vertex("Publisher")
        assert first != second

    def test_underlying_graph(self):
        graph = DependencyGraph()
        graph.add_edge("Book", "Author")

        assert isinstance(graph.graph, nx.DiGraph)
        assert nx.is_directed_acyclic_graph(graph.graph)


class TestToDict:
    def test_serializes_sorted(self):
        graph = DependencyGraph()
        join = JoinVertex.of("Part::HABTM_Assembly", "Assembly::HABTM_Part")
        graph.add_edge(join, "Part", EdgeType.MANY_TO_MANY)
        graph.add_edge("Book", "Author", EdgeType.BELONGS_TO)
        graph.warnings.append(ThroughWarning("has_one", "Account", "Supplier"))

        data = graph.to_dict()

        assert [v["id"] for v in data["vertices"]] == [
            "Author",
            "Book",
            "Part",
            "{Assembly::HABTM_Part, Part::HABTM_Assembly}",
        ]
        assert data["vertices"][-1]["type"] == "join"
        assert data["vertices"][-1]["members"] == [
            "Assembly::HABTM_Part",
            "Part::HABTM_Assembly",
        ]
        assert data["edges"][0] == {
            "source": "Book",
            "target": "Author",
            "type": "belongs_to",
        }
        assert data["warnings"] == [
            {"kind": "has_one", "through_name": "Account", "owner": "Supplier"}
        ]
