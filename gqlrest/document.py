"""Assemble the OpenAPI document wrapping one GraphQL operation.

The document has a single POST path whose request body carries the query
text and the variables object, and whose response is the standard GraphQL
{data, errors} envelope.
"""

from __future__ import annotations

import copy
from typing import Any

import httpx

OPENAPI_VERSION = "3.0.3"
DEFAULT_PATH = "/graphql"
JSON_CONTENT_TYPE = "application/json"

_DESCRIPTION = (
    "Auto-generated from GraphQL query.\n\n"
    "This endpoint wraps the GraphQL operation as a REST-like POST."
)

# Standard GraphQL response envelope
_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "data": {"type": "object"},
        "errors": {"type": "array", "items": {"type": "object"}},
    },
}


class InvalidEndpointError(ValueError):
    """Raised when the endpoint is not an absolute http(s) URL."""


def split_endpoint(endpoint: str) -> tuple[str, str]:
    """Split an endpoint URL into (server URL, path)."""
    try:
        url = httpx.URL(endpoint)
    except httpx.InvalidURL as exc:
        raise InvalidEndpointError(f"invalid endpoint {endpoint!r}: {exc}") from exc
    if not url.scheme or not url.host:
        raise InvalidEndpointError(f"endpoint {endpoint!r} must be an absolute URL")

    server_url = f"{url.scheme}://{url.netloc.decode('ascii')}"
    path = url.path if url.path not in ("", "/") else DEFAULT_PATH
    return server_url, path


def build_openapi_spec(
    title: str,
    version: str,
    endpoint: str,
    variables_schema: dict[str, Any],
    operation_label: str,
) -> dict[str, Any]:
    """Build the OpenAPI document for the wrapped operation."""
    server_url, path = split_endpoint(endpoint)

    request_schema = {
        "type": "object",
        "properties": {
            "query": {"type": "string"},
            "variables": variables_schema,
        },
        "required": ["query"],
    }

    operation = {
        "summary": f"Invoke GraphQL operation {operation_label}",
        "description": "Send the GraphQL query and variables as JSON.",
        "requestBody": {
            "required": True,
            "content": {JSON_CONTENT_TYPE: {"schema": request_schema}},
        },
        "responses": {
            "200": {
                "description": "OK",
                "content": {
                    JSON_CONTENT_TYPE: {"schema": copy.deepcopy(_RESPONSE_SCHEMA)},
                },
            },
        },
    }

    return {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": title,
            "description": _DESCRIPTION,
            "version": version,
        },
        "servers": [{"url": server_url}],
        "paths": {path: {"post": operation}},
    }


def attach_request_example(
    spec: dict[str, Any],
    query: str,
    variables: dict[str, Any],
) -> None:
    """Set the example request payload on every JSON request body."""
    example = {"query": query, "variables": variables}
    for path_item in spec.get("paths", {}).values():
        post = path_item.get("post")
        if not post or "requestBody" not in post:
            continue
        for content_type, media in post["requestBody"].get("content", {}).items():
            if "json" in content_type:
                media["example"] = example
