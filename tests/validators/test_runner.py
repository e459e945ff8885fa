"""Tests for validation runner."""

import pytest

from relgraph.schema.errors import SchemaLoadError
from relgraph.schema.loader import parse_model_from_string
from relgraph.graph.builder import build_graph
from relgraph.validators.runner import run_validators, validate_model_file


class TestRunValidators:
    def test_valid_model(self, library_model, library_graph):
        result = run_validators(library_model, library_graph)

        assert result.is_valid
        assert not result.has_warnings

    def test_without_graph_runs_model_checks(self):
        model = parse_model_from_string("""
entities:
  Assembly:
    many_to_many: Part
  Part: {}
""")
        result = run_validators(model, None)

        assert [e.code for e in result.errors] == ["UNMATCHED_MANY_TO_MANY"]

    def test_collects_all_issue_kinds(self):
        model = parse_model_from_string("""
entities:
  Supplier:
    relationships:
      - has_one: AccountHistory
        through: Account
      - belongs_to: Region
  Lonely: {}
""")
        result = run_validators(model, build_graph(model))

        codes = {issue.code for issue in result.issues}
        assert codes == {"UNDEFINED_ENTITY_REF", "BROKEN_THROUGH", "ORPHAN_ENTITY"}


class TestValidateModelFile:
    def test_example_passes(self, examples_dir):
        result = validate_model_file(examples_dir / "library.yaml")

        assert result.is_valid
        assert result.issues == []

    def test_graph_build_error_still_reports(self, examples_dir):
        result = validate_model_file(examples_dir / "invalid" / "unmatched_join.yaml")

        assert not result.is_valid
        assert result.errors[0].code == "UNMATCHED_MANY_TO_MANY"

    def test_missing_file(self):
        with pytest.raises(SchemaLoadError):
            validate_model_file("/nonexistent/models.yaml")
