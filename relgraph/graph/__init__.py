"""Graph layer for representing entity dependencies as networkx graphs."""

from .node_types import NodeType, EdgeType, JoinVertex, Vertex
from .errors import (
    GraphBuildError,
    JoinResolutionError,
    ThroughWarning,
    UnknownRelationshipKindError,
)
from .dependency_graph import DependencyGraph
from .collapse import singularize_joins
from .builder import GraphBuilder, build_graph

__all__ = [
    "NodeType",
    "EdgeType",
    "JoinVertex",
    "Vertex",
    "GraphBuildError",
    "JoinResolutionError",
    "ThroughWarning",
    "UnknownRelationshipKindError",
    "DependencyGraph",
    "singularize_joins",
    "GraphBuilder",
    "build_graph",
]
