"""Pydantic models for entity and relationship descriptors."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

RelationshipKind = Literal["belongs_to", "has_one", "has_many", "many_to_many"]

RELATIONSHIP_KINDS: tuple[str, ...] = (
    "belongs_to",
    "has_one",
    "has_many",
    "many_to_many",
)

# Alternate spellings accepted in model files
KIND_ALIASES = {
    "has_and_belongs_to_many": "many_to_many",
    "habtm": "many_to_many",
}

THROUGH_KINDS = ("has_one", "has_many")


def _normalize_relationship(data: dict) -> dict:
    """Turn shorthand relationship syntax into ``kind``/``target`` form.

    Accepts ``{type: has_many, target: Post}``, ``{kind: has_many, ...}`` and
    ``{has_many: Post, through: Appointment}``.
    """
    data = dict(data)

    if "type" in data and "kind" not in data:
        data["kind"] = data.pop("type")

    if "kind" in data:
        if isinstance(data["kind"], str):
            data["kind"] = KIND_ALIASES.get(data["kind"], data["kind"])
        return data

    for key in (*RELATIONSHIP_KINDS, *KIND_ALIASES):
        if key in data:
            data["target"] = data.pop(key)
            data["kind"] = KIND_ALIASES.get(key, key)
            break

    return data


class Relationship(BaseModel):
    """A relationship declared on an owning entity."""

    kind: RelationshipKind
    target: str
    name: str = ""  # Defaults to the target
    through: str | None = None
    join_entity: str | None = None
    join_table: str | None = None  # Physical link table shared by both sides
    inverse_of: str | None = None  # Name of the reverse many_to_many

    @model_validator(mode="before")
    @classmethod
    def normalize_shorthand(cls, data):
        """Accept shorthand and aliased relationship kinds."""
        if isinstance(data, dict):
            return _normalize_relationship(data)
        return data

    @model_validator(mode="after")
    def check_options(self) -> "Relationship":
        """Default the name and reject options that don't apply to the kind."""
        if not self.name:
            self.name = self.target

        if self.through is not None and self.kind not in THROUGH_KINDS:
            raise ValueError(
                f"'through' is only supported on has_one and has_many, not {self.kind}"
            )

        for option in ("join_entity", "join_table", "inverse_of"):
            if getattr(self, option) is not None and self.kind != "many_to_many":
                raise ValueError(
                    f"'{option}' is only supported on many_to_many, not {self.kind}"
                )

        return self


class Entity(BaseModel):
    """An entity (model class / table) in the model set."""

    name: str = ""  # Will be set from the key
    abstract: bool = False
    synthetic: bool = False
    description: str | None = None
    relationships: list[Relationship] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def normalize_entity(cls, data: dict) -> dict:
        """Fold entity-level shorthand (``belongs_to: Author``) into relationships."""
        if not isinstance(data, dict):
            return data
        data = dict(data)

        relationships = data.get("relationships", [])
        if not isinstance(relationships, list):
            relationships = []
        relationships = list(relationships)

        for key in (*RELATIONSHIP_KINDS, *KIND_ALIASES):
            if key in data:
                targets = data.pop(key)
                if isinstance(targets, str):
                    targets = [targets]
                for target in targets:
                    relationships.append({key: target})

        data["relationships"] = relationships
        return data

    def get_relationship(self, name: str) -> Relationship | None:
        """Get the first relationship declared with the given name."""
        for rel in self.relationships:
            if rel.name == name:
                return rel
        return None


class ModelSet(BaseModel):
    """Root model for an entity model file."""

    entities: dict[str, Entity] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_model(cls, data: dict) -> dict:
        """Set entity names from their keys."""
        if not isinstance(data, dict):
            return data

        entities = data.get("entities")
        if isinstance(entities, dict):
            normalized = {}
            for name, entity_data in entities.items():
                if entity_data is None:
                    entity_data = {}
                if isinstance(entity_data, dict):
                    entity_data = {**entity_data, "name": name}
                normalized[name] = entity_data
            data = {**data, "entities": normalized}

        return data

    def get_entity(self, name: str) -> Entity | None:
        """Get an entity by name."""
        return self.entities.get(name)

    def get_all_entity_names(self) -> list[str]:
        """Get all entity names."""
        return list(self.entities.keys())
