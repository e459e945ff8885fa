"""Entity metadata providers.

A provider is the only thing the graph builder knows about where entities come
from. It lists entities and their relationships and answers the lookups that
depend on how a particular framework names things:

- whether an entity may appear in the graph at all
- which entity a ``through`` relationship is routed via
- which synthetic join entities back a many-to-many relationship

``ModelSetProvider`` implements this over a parsed YAML model set. Adapters for
an ORM's reflection API would implement the same interface.
"""

from abc import ABC, abstractmethod

from .schema.models import Entity, ModelSet, Relationship

HABTM_PREFIX = "HABTM_"


def default_join_entity_name(owner: str, relationship_name: str) -> str:
    """Name of the synthetic join entity generated on ``owner``'s side."""
    return f"{owner}::{HABTM_PREFIX}{relationship_name}"


class EntityMetadataProvider(ABC):
    """Source of entity and relationship descriptors for one graph build."""

    @abstractmethod
    def list_entities(self) -> list[Entity]:
        """Entities to scan as top-level graph vertices.

        Abstract entities and synthetic join entities must not be returned.
        """

    @abstractmethod
    def list_relationships(self, entity: Entity) -> list[Relationship]:
        """Relationships declared on ``entity``."""

    @abstractmethod
    def is_excluded(self, identity: str) -> bool:
        """True if ``identity`` names an abstract or synthetic entity, which
        must never become a vertex."""

    @abstractmethod
    def resolve_through(self, entity: Entity, through_name: str) -> str | None:
        """Resolve the entity a through relationship is routed via.

        Returns:
            The target of the sibling relationship named ``through_name``
            on ``entity``, or None if it is missing or unresolvable.
        """

    @abstractmethod
    def resolve_join_entity(self, owner: Entity, rel: Relationship) -> str | None:
        """Identity of the synthetic join entity on ``owner``'s side of the
        many-to-many ``rel``, or None."""

    @abstractmethod
    def resolve_reverse_join_entity(
        self, owner: Entity, rel: Relationship
    ) -> str | None:
        """Identity of the synthetic join entity on the target's side of the
        many-to-many ``rel``, or None if the target declares no single
        matching reverse relationship."""


class ModelSetProvider(EntityMetadataProvider):
    """Provider backed by a parsed ModelSet."""

    def __init__(self, model: ModelSet):
        self.model = model

    def list_entities(self) -> list[Entity]:
        return [
            entity
            for entity in self.model.entities.values()
            if not entity.abstract and not entity.synthetic
        ]

    def list_relationships(self, entity: Entity) -> list[Relationship]:
        return list(entity.relationships)

    def is_excluded(self, identity: str) -> bool:
        entity = self.model.get_entity(identity)
        return entity is not None and (entity.abstract or entity.synthetic)

    def resolve_through(self, entity: Entity, through_name: str) -> str | None:
        """Resolve a through sibling to its target.

        The target must be a declared entity; a sibling pointing at an
        undeclared one counts as unresolved.
        """
        return self._resolve_through(entity, through_name, set())

    def _resolve_through(
        self, entity: Entity, through_name: str, seen: set[str]
    ) -> str | None:
        if through_name in seen:
            return None
        seen.add(through_name)

        sibling = entity.get_relationship(through_name)
        if sibling is None or self.model.get_entity(sibling.target) is None:
            return None

        # A through sibling is only usable if its own chain resolves
        if sibling.through is not None:
            if self._resolve_through(entity, sibling.through, seen) is None:
                return None

        return sibling.target

    def resolve_join_entity(self, owner: Entity, rel: Relationship) -> str | None:
        if rel.kind != "many_to_many":
            return None
        return rel.join_entity or default_join_entity_name(owner.name, rel.name)

    def resolve_reverse_join_entity(
        self, owner: Entity, rel: Relationship
    ) -> str | None:
        target = self.model.get_entity(rel.target)
        candidates = self.reverse_candidates(owner, rel)
        if target is None or len(candidates) != 1:
            return None
        return self.resolve_join_entity(target, candidates[0])

    def reverse_candidates(self, owner: Entity, rel: Relationship) -> list[Relationship]:
        """Many-to-many relationships on the target that may be ``rel``'s reverse.

        Both sides naming the same ``join_table``, or either naming the other
        with ``inverse_of``, pins the pair down. Otherwise every many_to_many
        back to ``owner`` is a candidate.
        """
        target = self.model.get_entity(rel.target)
        if target is None:
            return []

        candidates = [
            other
            for other in target.relationships
            if other.kind == "many_to_many" and other.target == owner.name
        ]

        if rel.join_table is not None:
            return [other for other in candidates if other.join_table == rel.join_table]

        paired = [
            other
            for other in candidates
            if other.inverse_of == rel.name or rel.inverse_of == other.name
        ]
        return paired or candidates
