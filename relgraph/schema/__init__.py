"""Schema layer for parsing and validating entity model files."""

from .errors import SchemaError, SchemaLoadError, SchemaValidationError
from .models import (
    RELATIONSHIP_KINDS,
    Entity,
    ModelSet,
    Relationship,
    RelationshipKind,
)
from .loader import load_yaml, parse_model, parse_model_data, parse_model_from_string

__all__ = [
    "SchemaError",
    "SchemaLoadError",
    "SchemaValidationError",
    "RELATIONSHIP_KINDS",
    "Entity",
    "ModelSet",
    "Relationship",
    "RelationshipKind",
    "load_yaml",
    "parse_model",
    "parse_model_data",
    "parse_model_from_string",
]
