"""Reference integrity validator."""

from ..schema.models import ModelSet
from .base import ValidationResult


def check_reference_integrity(model: ModelSet) -> ValidationResult:
    """Check that relationship targets name declared, concrete entities.

    The graph builder adds undeclared targets as vertices without complaint,
    so a typo in a target shows up as an extra entity rather than a failure.
    Targets that are abstract or synthetic are skipped by the builder, so the
    relationship contributes no edge at all.

    Args:
        model: The parsed model set.

    Returns:
        ValidationResult with errors for broken references.
    """
    result = ValidationResult()

    for entity_name, entity in model.entities.items():
        for rel in entity.relationships:
            target = model.get_entity(rel.target)
            if target is None:
                result.add_error(
                    code="UNDEFINED_ENTITY_REF",
                    message=f"Relationship references undefined entity '{rel.target}'",
                    entity=entity_name,
                    relationship=rel.name,
                    referenced_entity=rel.target,
                    kind=rel.kind,
                )
            elif target.abstract or target.synthetic:
                flavour = "abstract" if target.abstract else "synthetic"
                result.add_error(
                    code="ABSTRACT_ENTITY_REF",
                    message=(
                        f"Relationship references {flavour} entity '{rel.target}', "
                        "which never appears in the graph"
                    ),
                    entity=entity_name,
                    relationship=rel.name,
                    referenced_entity=rel.target,
                    kind=rel.kind,
                )

    return result
