"""Graph build errors and warnings."""

from dataclasses import dataclass


class GraphBuildError(Exception):
    """Base class for errors that abort a graph build."""


class JoinResolutionError(GraphBuildError):
    """Raised when a many-to-many join entity cannot be resolved."""

    def __init__(self, owner: str, target: str):
        self.owner = owner
        self.target = target
        super().__init__(
            f"Cannot resolve the many_to_many join entity from {owner} to {target}; "
            f"{owner} must declare exactly one matching many_to_many back to "
            f"{target} (pair several with join_table or inverse_of)"
        )


class UnknownRelationshipKindError(GraphBuildError):
    """Raised for a relationship kind the builder has no rule for."""

    def __init__(self, kind: str, owner: str):
        self.kind = kind
        self.owner = owner
        super().__init__(f"Unknown relationship kind {kind!r} on {owner}")


@dataclass(frozen=True)
class ThroughWarning:
    """A through relationship that was skipped because it could not be resolved."""

    kind: str
    through_name: str
    owner: str
