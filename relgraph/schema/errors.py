"""Schema-related exceptions."""


class SchemaError(Exception):
    """Base class for model file problems."""

    def details(self) -> list[str]:
        """Extra lines describing the problem, one per finding."""
        return []


class SchemaLoadError(SchemaError):
    """Raised when a YAML model file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SchemaValidationError(SchemaError):
    """Raised when a model set fails schema validation.

    ``errors`` holds one dict per pydantic error with ``loc``, ``msg`` and
    ``type`` keys.
    """

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)

    def details(self) -> list[str]:
        return [f"{err['loc']}: {err['msg']}" for err in self.errors]
