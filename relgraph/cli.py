"""Command-line interface for relgraph."""

import logging
import sys

import click

from .graph.builder import build_graph
from .graph.errors import GraphBuildError
from .output.formatter import format_graph, format_validation_result
from .schema.errors import SchemaError, SchemaValidationError
from .schema.loader import parse_model
from .validators.runner import validate_model_file

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _report_schema_error(error: SchemaError) -> None:
    if isinstance(error, SchemaValidationError):
        click.echo(f"Schema validation error: {error}", err=True)
    else:
        click.echo(f"Error loading file: {error}", err=True)
    for line in error.details():
        click.echo(f"  - {line}", err=True)


@click.group()
@click.version_option()
@click.option(
    "--log-level",
    envvar="RELGRAPH_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level (defaults to RELGRAPH_LOG_LEVEL env var)",
)
def main(log_level: str):
    """relgraph: dependency graphs from entity relationships."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command("graph")
@click.argument("model_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--collapse-joins",
    is_flag=True,
    default=False,
    help="Replace many-to-many join vertices with a single join entity",
)
def graph_cmd(model_file: str, output_format: str, collapse_joins: bool):
    """Build the dependency graph of a model file.

    MODEL_FILE is the path to a YAML model file. An edge A -> B means B
    must be loaded before A.

    Exit codes:
      0 - Graph built
      2 - File, schema or graph build error
    """
    try:
        model = parse_model(model_file)
        graph = build_graph(model, collapse_joins=collapse_joins)
    except SchemaError as e:
        _report_schema_error(e)
        sys.exit(2)
    except GraphBuildError as e:
        click.echo(f"Graph build error: {e}", err=True)
        sys.exit(2)

    click.echo(format_graph(graph, output_format))  # type: ignore
    sys.exit(0)


@main.command()
@click.argument("model_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def validate(model_file: str, output_format: str, strict: bool):
    """Validate a model file.

    MODEL_FILE is the path to a YAML model file.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File or schema error
    """
    try:
        result = validate_model_file(model_file)
    except SchemaError as e:
        _report_schema_error(e)
        sys.exit(2)

    click.echo(format_validation_result(result, output_format))  # type: ignore

    if result.has_errors or (strict and result.has_warnings):
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
