"""Load and parse GraphQL inputs.

Reads the schema SDL and the query document from disk and hands back
graphql-core structures. Syntax and schema validation errors surface as
GraphQLError; undecodable files raise UnicodeDecodeError.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from graphql import DocumentNode, GraphQLError, GraphQLSchema, Source, build_schema, parse


class InvalidVariablesError(ValueError):
    """Raised when a variables file holds JSON that is not an object."""


def load_schema(path: Path | str) -> GraphQLSchema:
    """Parse an SDL file into a GraphQLSchema."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        return build_schema(Source(text, path.name))
    except TypeError as exc:
        # build_schema reports SDL validation failures (unknown or duplicate types) as TypeError
        raise GraphQLError(str(exc)) from exc


def load_query(path: Path | str) -> tuple[str, DocumentNode]:
    """Read a query document, returning the raw text alongside its AST."""
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    return text, parse(Source(text, path.name))


def load_variables(path: Path | str) -> dict[str, Any] | None:
    """Load example variable values from a JSON file.

    A file holding JSON null means no values were supplied.
    """
    with open(path, encoding="utf-8") as f:
        variables = json.load(f)
    if variables is None:
        return None
    if not isinstance(variables, dict):
        raise InvalidVariablesError(
            f"expected a JSON object, got {type(variables).__name__}"
        )
    return variables
