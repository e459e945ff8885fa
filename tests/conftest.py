"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from relgraph.schema.loader import parse_model_from_string
from relgraph.graph.builder import build_graph


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def library_model(examples_dir):
    """Return the parsed library example with every relationship kind."""
    return parse_model_from_string((examples_dir / "library.yaml").read_text())


@pytest.fixture
def library_graph(library_model):
    """Return a graph built from the library example."""
    return build_graph(library_model)


@pytest.fixture
def habtm_model_yaml() -> str:
    """Return a symmetric many-to-many model YAML string."""
    return """
entities:
  Assembly:
    many_to_many: Part

  Part:
    many_to_many: Assembly
"""


@pytest.fixture
def habtm_model(habtm_model_yaml):
    """Return a parsed symmetric many-to-many model."""
    return parse_model_from_string(habtm_model_yaml)


@pytest.fixture
def broken_through_yaml() -> str:
    """Return a model whose has_one through names a missing relationship."""
    return """
entities:
  Supplier:
    relationships:
      - has_one: AccountHistory
        through: Account

  Account: {}

  AccountHistory: {}
"""


@pytest.fixture
def two_link_tables_yaml() -> str:
    """Return a model with two link tables between the same pair of entities."""
    return """
entities:
  Assembly:
    relationships:
      - many_to_many: Part
        name: parts
        join_entity: AssembliesParts
        join_table: assemblies_parts
      - many_to_many: Part
        name: spare_parts
        join_entity: AssembliesSpareParts
        join_table: assemblies_spare_parts

  Part:
    relationships:
      - many_to_many: Assembly
        name: assemblies
        join_entity: PartsAssemblies
        join_table: assemblies_parts
      - many_to_many: Assembly
        name: spare_for
        join_entity: SparePartsAssemblies
        join_table: assemblies_spare_parts
"""
