"""Tests for reference integrity validator."""

from relgraph.schema.loader import parse_model_from_string
from relgraph.validators.reference_integrity import check_reference_integrity


class TestReferenceIntegrity:
    def test_valid_references(self, library_model):
        result = check_reference_integrity(library_model)

        assert result.is_valid
        assert result.issues == []

    def test_undefined_target(self):
        model = parse_model_from_string("""
entities:
  Book:
    belongs_to: Writer
""")
        result = check_reference_integrity(model)

        assert not result.is_valid
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.code == "UNDEFINED_ENTITY_REF"
        assert error.entity == "Book"
        assert error.relationship == "Writer"
        assert error.details == {"referenced_entity": "Writer", "kind": "belongs_to"}

    def test_each_broken_relationship_reported(self):
        model = parse_model_from_string("""
entities:
  Author:
    relationships:
      - has_many: Novel
      - has_one: Agent
""")
        result = check_reference_integrity(model)

        assert {e.details["referenced_entity"] for e in result.errors} == {"Novel", "Agent"}

    def test_abstract_target(self):
        model = parse_model_from_string("""
entities:
  ApplicationRecord:
    abstract: true
  Book:
    belongs_to: ApplicationRecord
""")
        result = check_reference_integrity(model)

        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.code == "ABSTRACT_ENTITY_REF"
        assert error.entity == "Book"
        assert error.details == {
            "referenced_entity": "ApplicationRecord",
            "kind": "belongs_to",
        }

    def test_synthetic_target(self):
        model = parse_model_from_string("""
entities:
  AssembliesParts:
    synthetic: true
  Audit:
    has_many: AssembliesParts
""")
        result = check_reference_integrity(model)

        assert [e.code for e in result.errors] == ["ABSTRACT_ENTITY_REF"]
        assert "synthetic" in result.errors[0].message
