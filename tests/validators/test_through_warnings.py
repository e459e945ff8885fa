"""Tests for the through warning validator."""

from relgraph.schema.loader import parse_model_from_string
from relgraph.graph.builder import build_graph
from relgraph.validators.base import Severity
from relgraph.validators.through_warnings import check_through_warnings


class TestThroughWarnings:
    def test_no_warnings(self, library_graph):
        assert check_through_warnings(library_graph).issues == []

    def test_broken_through(self, broken_through_yaml):
        graph = build_graph(parse_model_from_string(broken_through_yaml))

        result = check_through_warnings(graph)

        assert result.is_valid
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.code == "BROKEN_THROUGH"
        assert warning.severity == Severity.WARNING
        assert warning.entity == "Supplier"
        assert warning.details == {"kind": "has_one", "through_name": "Account"}
