"""YAML loading and parsing for entity model files."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import SchemaLoadError, SchemaValidationError
from .models import ModelSet


def load_yaml(path: str | Path) -> dict:
    """Load a YAML model file and return the raw mapping.

    Args:
        path: Path to the YAML file.

    Returns:
        The parsed YAML data. An empty file yields an empty dict.

    Raises:
        SchemaLoadError: If the file is missing, unreadable or not a mapping.
    """
    path = Path(path)

    if not path.is_file():
        reason = "Not a file" if path.exists() else "File not found"
        raise SchemaLoadError(f"{reason}: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {_describe_yaml_error(e)}", str(path)) from e
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    return _ensure_mapping(data, str(path))


def parse_model(path: str | Path) -> ModelSet:
    """Load and parse a YAML file into a ModelSet.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        SchemaValidationError: If the data fails validation.
    """
    return parse_model_data(load_yaml(path))


def parse_model_from_string(yaml_string: str) -> ModelSet:
    """Parse a YAML string into a ModelSet.

    Raises:
        SchemaLoadError: If the YAML cannot be parsed.
        SchemaValidationError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {_describe_yaml_error(e)}") from e

    return parse_model_data(_ensure_mapping(data))


def parse_model_data(data: dict) -> ModelSet:
    """Validate already-loaded data into a ModelSet.

    Args:
        data: Raw mapping, e.g. from ``load_yaml`` or another metadata source.

    Returns:
        The validated ModelSet.

    Raises:
        SchemaValidationError: If the data fails validation. Each entry of
            ``errors`` has ``loc``, ``msg`` and ``type`` keys.
    """
    try:
        return ModelSet.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise SchemaValidationError(
            f"Model validation failed with {len(errors)} error(s)", errors
        ) from e


def _ensure_mapping(data, path: str | None = None) -> dict:
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", path
        )

    return data


def _describe_yaml_error(error: yaml.YAMLError) -> str:
    mark = getattr(error, "problem_mark", None)
    problem = getattr(error, "problem", None)
    if mark is not None and problem:
        return f"{problem} (line {mark.line + 1}, column {mark.column + 1})"
    return str(error)
