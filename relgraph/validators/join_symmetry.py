"""Many-to-many symmetry validator."""

from ..provider import ModelSetProvider
from ..schema.models import ModelSet
from .base import ValidationResult


def check_join_symmetry(model: ModelSet) -> ValidationResult:
    """Check that every many_to_many is paired with exactly one reverse.

    A join table is shared by both entities, so each side must declare the
    relationship for the graph builder to find the join entity of the other.
    When the target declares several many_to_many back to the owner, the
    pair must be pinned down with ``join_table`` or ``inverse_of``.
    Targets that aren't declared at all are left to the reference integrity
    check.

    Args:
        model: The parsed model set.

    Returns:
        ValidationResult with errors for unpaired many_to_many relationships.
    """
    result = ValidationResult()
    provider = ModelSetProvider(model)

    for entity_name, entity in model.entities.items():
        for rel in entity.relationships:
            if rel.kind != "many_to_many" or model.get_entity(rel.target) is None:
                continue

            candidates = provider.reverse_candidates(entity, rel)
            if not candidates:
                result.add_error(
                    code="UNMATCHED_MANY_TO_MANY",
                    message=(
                        f"many_to_many to '{rel.target}' has no matching "
                        f"many_to_many back to '{entity_name}'"
                    ),
                    entity=entity_name,
                    relationship=rel.name,
                    referenced_entity=rel.target,
                )
            elif len(candidates) > 1:
                result.add_error(
                    code="AMBIGUOUS_MANY_TO_MANY",
                    message=(
                        f"many_to_many to '{rel.target}' matches "
                        f"{len(candidates)} relationships back to '{entity_name}'; "
                        "set join_table or inverse_of to pair them"
                    ),
                    entity=entity_name,
                    relationship=rel.name,
                    referenced_entity=rel.target,
                    candidates=sorted(other.name for other in candidates),
                )

    return result
