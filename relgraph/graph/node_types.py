"""Vertex and edge type definitions for the dependency graph."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class NodeType(str, Enum):
    """Types of vertices in the dependency graph."""

    ENTITY = "entity"
    JOIN = "join"  # Many-to-many join table


class EdgeType(str, Enum):
    """Relationship kind that produced an edge."""

    BELONGS_TO = "belongs_to"
    HAS_ONE = "has_one"
    HAS_MANY = "has_many"
    HAS_ONE_THROUGH = "has_one_through"
    HAS_MANY_THROUGH = "has_many_through"
    MANY_TO_MANY = "many_to_many"


@dataclass(frozen=True)
class JoinVertex:
    """A many-to-many join table seen from both sides.

    A single link table is reflected as one synthetic join entity per
    direction. Both identities go into ``members``; two JoinVertex values are
    equal when their member sets are equal.
    """

    members: frozenset[str]

    @classmethod
    def of(cls, *identities: str) -> "JoinVertex":
        return cls(frozenset(identities))

    @property
    def representative(self) -> str:
        """Deterministic member used when joins are collapsed."""
        return min(self.members)

    def __str__(self) -> str:
        return "{" + ", ".join(sorted(self.members)) + "}"


Vertex = Union[str, JoinVertex]
