"""Shared fixtures: a small SDL schema, query documents and input files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
from graphql import GraphQLSchema, OperationDefinitionNode, build_schema, parse


SCHEMA_SDL = """
scalar DateTime

enum Role {
  ADMIN
  EDITOR
  VIEWER
}

input UserFilter {
  name: String!
  age: Int
  role: Role
  tags: [String!]
}

input Pagination {
  first: Int
  after: String
}

input TreeNode {
  value: Int!
  children: [TreeNode!]
  parent: TreeNode
}

input Left {
  right: Right
}

input Right {
  left: Left!
}

type User {
  id: ID!
  name: String
  role: Role
}

type Query {
  user(id: ID!): User
  users(filter: UserFilter, page: Pagination): [User]
}
"""

QUERY_DOC = """
query GetUser($id: ID!) {
  user(id: $id) { id name }
}

query ListUsers($filter: UserFilter!, $page: Pagination, $since: DateTime) {
  users(filter: $filter, page: $page) { id name role }
}
"""


@pytest.fixture(scope="session")
def schema() -> GraphQLSchema:
    return build_schema(SCHEMA_SDL)


@pytest.fixture(scope="session")
def type_ref() -> Callable[[str], Any]:
    """Return a callable that parses a variable type annotation.

    Usage in tests::

        map_type(schema, type_ref("[Int!]!"))
    """
    def _parse(annotation: str):
        doc = parse(f"query Q($v: {annotation}) {{ __typename }}")
        return doc.definitions[0].variable_definitions[0].type
    return _parse


@pytest.fixture(scope="session")
def operation() -> Callable[[str], OperationDefinitionNode]:
    """Return a callable that parses a single-operation document."""
    def _parse(source: str) -> OperationDefinitionNode:
        return parse(source).definitions[0]
    return _parse


# ---------------------------------------------------------------------------
# Files on disk for loader and CLI tests
# ---------------------------------------------------------------------------

@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    path = tmp_path / "schema.graphql"
    path.write_text(SCHEMA_SDL)
    return path


@pytest.fixture
def query_file(tmp_path: Path) -> Path:
    path = tmp_path / "query.graphql"
    path.write_text(QUERY_DOC)
    return path
