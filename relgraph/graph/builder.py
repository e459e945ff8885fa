"""Builder for converting entity metadata to a DependencyGraph."""

import logging
from typing import Callable, Iterable

from ..provider import EntityMetadataProvider, ModelSetProvider
from ..schema.models import Entity, ModelSet, Relationship
from .collapse import singularize_joins
from .dependency_graph import DependencyGraph
from .errors import JoinResolutionError, ThroughWarning, UnknownRelationshipKindError
from .node_types import EdgeType, JoinVertex

logger = logging.getLogger(__name__)

RelationshipHandler = Callable[[DependencyGraph, Entity, Relationship], None]


class GraphBuilder:
    """Builds dependency graphs from a metadata provider.

    Edge direction follows load order: ``A -> B`` means B is needed first.
    Relationships whose target or through entity is abstract or synthetic
    add no edges.

    ========================  =============================================
    relationship              edges
    ========================  =============================================
    belongs_to                owner -> target
    has_one / has_many        target -> owner
    has_one through T         T -> owner, target -> T
    has_many through T        T -> owner, T -> target
    many_to_many              JoinVertex -> owner
    ========================  =============================================
    """

    def __init__(self, provider: EntityMetadataProvider):
        self.provider = provider
        self._handlers: dict[str, RelationshipHandler] = {
            "belongs_to": self._add_belongs_to,
            "has_one": self._add_has_one,
            "has_many": self._add_has_many,
            "many_to_many": self._add_many_to_many,
        }

    def build(
        self,
        entities: Iterable[Entity] | None = None,
        collapse_joins: bool = False,
    ) -> DependencyGraph:
        """Build a new graph.

        Args:
            entities: Entities to scan. Defaults to ``provider.list_entities()``.
                Abstract and synthetic entities are skipped.
            collapse_joins: Replace JoinVertex vertices with a representative
                join entity (see ``singularize_joins``).

        Returns:
            The dependency graph, with any skipped through relationships
            recorded in ``graph.warnings``.

        Raises:
            JoinResolutionError: If a many_to_many join entity can't be resolved.
            UnknownRelationshipKindError: If a relationship kind has no rule.
        """
        if entities is None:
            entities = self.provider.list_entities()

        graph = DependencyGraph()

        for entity in entities:
            if entity.abstract or entity.synthetic:
                continue
            self._add_entity(graph, entity)

        if collapse_joins:
            singularize_joins(graph)

        return graph

    def _add_entity(self, graph: DependencyGraph, entity: Entity) -> None:
        graph.add_vertex(entity.name)

        for rel in self.provider.list_relationships(entity):
            handler = self._handlers.get(rel.kind)
            if handler is None:
                raise UnknownRelationshipKindError(rel.kind, entity.name)
            handler(graph, entity, rel)

    def _add_belongs_to(
        self, graph: DependencyGraph, entity: Entity, rel: Relationship
    ) -> None:
        if self._references_excluded(entity, rel, rel.target):
            return
        graph.add_edge(entity.name, rel.target, EdgeType.BELONGS_TO)

    def _add_has_one(
        self, graph: DependencyGraph, entity: Entity, rel: Relationship
    ) -> None:
        if self._references_excluded(entity, rel, rel.target):
            return

        if rel.through is None:
            graph.add_edge(rel.target, entity.name, EdgeType.HAS_ONE)
            return

        through_entity = self._resolve_through(graph, entity, rel)
        if through_entity is None:
            return
        if self._references_excluded(entity, rel, through_entity):
            return

        graph.add_edge(through_entity, entity.name, EdgeType.HAS_ONE_THROUGH)
        graph.add_edge(rel.target, through_entity, EdgeType.HAS_ONE_THROUGH)

    def _add_has_many(
        self, graph: DependencyGraph, entity: Entity, rel: Relationship
    ) -> None:
        if self._references_excluded(entity, rel, rel.target):
            return

        if rel.through is None:
            graph.add_edge(rel.target, entity.name, EdgeType.HAS_MANY)
            return

        through_entity = self._resolve_through(graph, entity, rel)
        if through_entity is None:
            return
        if self._references_excluded(entity, rel, through_entity):
            return

        graph.add_edge(through_entity, entity.name, EdgeType.HAS_MANY_THROUGH)
        graph.add_edge(through_entity, rel.target, EdgeType.HAS_MANY_THROUGH)

    def _references_excluded(
        self, entity: Entity, rel: Relationship, identity: str
    ) -> bool:
        # Abstract and synthetic entities never become vertices
        if not self.provider.is_excluded(identity):
            return False

        logger.warning(
            "Skipping %s '%s' on %s: %s is abstract or synthetic.",
            rel.kind,
            rel.name,
            entity.name,
            identity,
            extra={"kind": rel.kind, "owner": entity.name, "excluded": identity},
        )
        return True

    def _resolve_through(
        self, graph: DependencyGraph, entity: Entity, rel: Relationship
    ) -> str | None:
        through_entity = self.provider.resolve_through(entity, rel.through)
        if through_entity is not None:
            return through_entity

        graph.warnings.append(
            ThroughWarning(kind=rel.kind, through_name=rel.through, owner=entity.name)
        )
        logger.warning(
            "Failed to resolve %s '%s' through '%s' on %s. %s may be missing "
            "the non-through relationship named '%s'; skipping it.",
            rel.kind,
            rel.name,
            rel.through,
            entity.name,
            entity.name,
            rel.through,
            extra={
                "kind": rel.kind,
                "through_name": rel.through,
                "owner": entity.name,
            },
        )
        return None

    def _add_many_to_many(
        self, graph: DependencyGraph, entity: Entity, rel: Relationship
    ) -> None:
        join_entity = self.provider.resolve_join_entity(entity, rel)
        if join_entity is None:
            raise JoinResolutionError(entity.name, rel.target)

        reverse_join_entity = self.provider.resolve_reverse_join_entity(entity, rel)
        if reverse_join_entity is None:
            raise JoinResolutionError(rel.target, entity.name)

        # Reuse the vertex added from the other side, if any
        members = {join_entity, reverse_join_entity}
        join_vertex = graph.find_join_vertex(members) or JoinVertex(frozenset(members))

        graph.add_edge(join_vertex, entity.name, EdgeType.MANY_TO_MANY)


def build_graph(model: ModelSet, collapse_joins: bool = False) -> DependencyGraph:
    """Build a DependencyGraph from a parsed ModelSet.

    Args:
        model: The parsed model set.
        collapse_joins: Collapse many-to-many join vertices.

    Returns:
        The dependency graph.
    """
    return GraphBuilder(ModelSetProvider(model)).build(collapse_joins=collapse_joins)
