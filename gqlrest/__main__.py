"""Entry point: python -m gqlrest

Reads a GraphQL schema and query document, writes an OpenAPI description of
a REST-like POST wrapper for one operation, then prints an example curl.

Usage:
  python -m gqlrest --schema schema.graphql --query query.graphql \\
      --endpoint https://api.example.com/graphql --out openapi.yaml
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import click
from graphql import GraphQLError

from .codegen import DEFAULT_FORMAT, FORMATS, format_from_path, render_curl, write_spec
from .document import InvalidEndpointError, attach_request_example, build_openapi_spec
from .examples import build_variables_example
from .loader import InvalidVariablesError, load_query, load_schema, load_variables
from .operations import (
    OperationNotFoundError,
    operation_label,
    operation_names,
    select_operation,
)
from .type_mapper import build_variables_schema

logger = logging.getLogger("gqlrest")

DEFAULT_TITLE = "GraphQL as REST"
DEFAULT_VERSION = "1.0.0"
DEFAULT_OUT_PATH = "openapi.yaml"


class FatalError(click.ClickException):
    """Unrecoverable input problem: message on stderr, exit status 2."""

    exit_code = 2

    def show(self, file: Any = None) -> None:
        click.echo(self.format_message(), err=True, file=file)


def _stdin_is_tty() -> bool:
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def interactive_enabled(flag: bool) -> bool:
    """Prompts are only shown when requested and stdin is a terminal."""
    return flag and _stdin_is_tty()


def _prompt_existing_file(label: str) -> str:
    return click.prompt(label, type=click.Path(exists=True, dir_okay=False))


@click.command(context_settings={"auto_envvar_prefix": "GQLREST"})
@click.option(
    "--schema", "schema_path", envvar="GQLREST_SCHEMA",
    help="Path to GraphQL schema SDL (.graphql/.gql)",
)
@click.option(
    "--query", "query_path", envvar="GQLREST_QUERY",
    help="Path to GraphQL query document (.graphql/.gql)",
)
@click.option("--endpoint", help="GraphQL HTTP endpoint URL")
@click.option(
    "--operation", "operation_name", envvar="GQLREST_OPERATION",
    help="Operation name to document (if multiple in query doc)",
)
@click.option(
    "--out", "out_path", envvar="GQLREST_OUT",
    help="Output path for OpenAPI spec (stdout if empty)",
)
@click.option(
    "--format", "fmt",
    envvar="GQLREST_FORMAT",
    type=click.Choice(FORMATS, case_sensitive=False),
    default=DEFAULT_FORMAT,
    show_default=True,
    help="OpenAPI output format",
)
@click.option("--vars-file", help="Optional JSON file with example variable values")
@click.option("--title", default=DEFAULT_TITLE, show_default=True, help="OpenAPI document title")
@click.option("--version", default=DEFAULT_VERSION, show_default=True, help="OpenAPI document version")
@click.option("--interactive", is_flag=True, help="Prompt for missing inputs interactively")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(
    schema_path: str | None,
    query_path: str | None,
    endpoint: str | None,
    operation_name: str | None,
    out_path: str | None,
    fmt: str,
    vars_file: str | None,
    title: str,
    version: str,
    interactive: bool,
    verbose: bool,
) -> None:
    """Convert a GraphQL query + schema into an OpenAPI spec and a curl example."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    prompting = interactive_enabled(interactive)

    if not (schema_path and query_path and endpoint) and prompting:
        click.echo("Interactive mode: let's collect the missing inputs.")
        if not schema_path:
            schema_path = _prompt_existing_file("Path to GraphQL schema SDL (.graphql/.gql)")
        if not query_path:
            query_path = _prompt_existing_file("Path to GraphQL query document (.graphql/.gql)")
        if not endpoint:
            endpoint = click.prompt("GraphQL HTTP endpoint URL")
    if not (schema_path and query_path and endpoint):
        raise FatalError("--schema, --query, and --endpoint are required")

    try:
        schema = load_schema(schema_path)
    except (OSError, UnicodeDecodeError) as exc:
        raise FatalError(f"failed to read schema: {exc}") from exc
    except GraphQLError as exc:
        raise FatalError(f"failed to parse schema: {exc}") from exc

    try:
        query_text, document = load_query(query_path)
    except (OSError, UnicodeDecodeError) as exc:
        raise FatalError(f"failed to read query: {exc}") from exc
    except GraphQLError as exc:
        raise FatalError(f"failed to parse query: {exc}") from exc

    if not operation_name and prompting:
        names = operation_names(document)
        if len(names) > 1:
            operation_name = click.prompt("Select operation", type=click.Choice(names))

    try:
        operation = select_operation(document, operation_name)
    except OperationNotFoundError as exc:
        logger.debug("Operation selection failed: %s", exc)
        raise FatalError(
            "operation not found. Provide --operation if multiple operations exist"
        ) from exc

    if not vars_file and prompting:
        if click.confirm("Provide a variables JSON file?", default=False):
            vars_file = _prompt_existing_file("Path to variables JSON file")

    example_vars: dict[str, Any] | None = None
    if vars_file:
        try:
            example_vars = load_variables(vars_file)
        except (OSError, UnicodeDecodeError) as exc:
            raise FatalError(f"failed to read vars-file: {exc}") from exc
        except InvalidVariablesError as exc:
            raise FatalError(f"vars-file must contain a JSON object: {exc}") from exc
        except ValueError as exc:
            raise FatalError(f"vars-file is not valid JSON: {exc}") from exc

    variables_schema, required = build_variables_schema(schema, operation)
    logger.debug(
        "Variables: %s (required: %s)",
        ", ".join(variables_schema["properties"]) or "none",
        ", ".join(required) or "none",
    )
    if example_vars is None:
        example_vars = build_variables_example(schema, operation)

    try:
        spec = build_openapi_spec(
            title, version, endpoint, variables_schema, operation_label(operation),
        )
    except InvalidEndpointError as exc:
        raise FatalError(f"failed to build OpenAPI spec: {exc}") from exc
    attach_request_example(spec, query_text, example_vars)

    if not out_path and prompting:
        if click.confirm("Write OpenAPI spec to a file?", default=True):
            out_path = click.prompt("Output path (e.g., openapi.yaml)", default=DEFAULT_OUT_PATH)
            fmt = format_from_path(out_path, fmt)

    try:
        write_spec(spec, out_path, fmt)
    except (OSError, ValueError) as exc:
        raise FatalError(f"failed to write spec: {exc}") from exc
    if out_path:
        logger.debug("Wrote %s (%s)", out_path, fmt)

    curl = render_curl(endpoint, query_text, example_vars)
    click.echo("\n# Example curl:\n" + curl)


if __name__ == "__main__":
    main()
