"""Text and JSON output."""

from .formatter import format_graph, format_validation_result

__all__ = [
    "format_graph",
    "format_validation_result",
]
