"""relgraph: build load-order dependency graphs from entity relationships."""

from .graph import DependencyGraph, GraphBuilder, JoinVertex, build_graph, singularize_joins
from .provider import EntityMetadataProvider, ModelSetProvider
from .schema import parse_model, parse_model_from_string

__all__ = [
    "DependencyGraph",
    "GraphBuilder",
    "JoinVertex",
    "build_graph",
    "singularize_joins",
    "EntityMetadataProvider",
    "ModelSetProvider",
    "parse_model",
    "parse_model_from_string",
]
