"""Output formatting for validation results and dependency graphs."""

import json
from typing import Literal

from ..graph.dependency_graph import DependencyGraph
from ..validators.base import Severity, ValidationIssue, ValidationResult

_SYMBOLS = {
    Severity.ERROR: "✘",
    Severity.WARNING: "⚠",
    Severity.INFO: "ℹ",
}


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a validation result for output.

    Args:
        result: The validation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_result_json(result)
    return _format_result_text(result)


def format_graph(
    graph: DependencyGraph,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a dependency graph for output.

    Args:
        graph: The graph to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return json.dumps(graph.to_dict(), indent=2)
    return _format_graph_text(graph)


def _format_result_text(result: ValidationResult) -> str:
    lines: list[str] = []

    for title, issues in (("ERRORS:", result.errors), ("WARNINGS:", result.warnings)):
        if lines:
            lines.append("")
        lines.append(title)
        if issues:
            lines.extend(f"  {_format_issue_text(issue)}" for issue in issues)
        else:
            lines.append("  (none)")

    errors = len(result.errors)
    warnings = len(result.warnings)

    lines.append("")
    if not result.is_valid:
        lines.append(f"Validation failed: {errors} error(s), {warnings} warning(s)")
    elif warnings:
        lines.append(f"Validation passed with {warnings} warning(s)")
    else:
        lines.append("Validation passed")

    return "\n".join(lines)


def _format_issue_text(issue: ValidationIssue) -> str:
    location = f"[{issue.location}] " if issue.location else ""
    return f"{_SYMBOLS[issue.severity]} {issue.code}: {location}{issue.message}"


def _format_result_json(result: ValidationResult) -> str:
    data = {
        "valid": result.is_valid,
        "error_count": len(result.errors),
        "warning_count": len(result.warnings),
        "issues": [
            {
                "code": issue.code,
                "message": issue.message,
                "severity": issue.severity.value,
                "entity": issue.entity,
                "relationship": issue.relationship,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
    return json.dumps(data, indent=2)


def _format_graph_text(graph: DependencyGraph) -> str:
    data = graph.to_dict()
    lines = ["VERTICES:"]

    for vertex in data["vertices"]:
        suffix = " (join)" if vertex["type"] == "join" else ""
        lines.append(f"  {vertex['id']}{suffix}")
    if not data["vertices"]:
        lines.append("  (none)")

    lines.append("")
    lines.append("EDGES:")
    for edge in data["edges"]:
        kind = f"  [{edge['type']}]" if edge["type"] else ""
        lines.append(f"  {edge['source']} -> {edge['target']}{kind}")
    if not data["edges"]:
        lines.append("  (none)")

    if data["warnings"]:
        lines.append("")
        lines.append("WARNINGS:")
        for warning in data["warnings"]:
            lines.append(
                f"  ⚠ {warning['owner']}: {warning['kind']} through "
                f"'{warning['through_name']}' skipped"
            )

    return "\n".join(lines)
