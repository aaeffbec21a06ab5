"""Convert GraphQL type references to OpenAPI/JSON Schema nodes.

Handles:
- Built-in scalars (Int, Float, String, Boolean, ID)
- List wrappers (array with items)
- Non-null wrappers (required at the parent object, never a nullable flag)
- Enums (string with enum values in schema order)
- Input objects (object with properties/required in declaration order)
- Custom scalars and unresolvable names (opaque string)
- Self-referencing input objects (bounded placeholder)

A type reference is either a graphql-core AST node from a query document
(NamedTypeNode, ListTypeNode, NonNullTypeNode) or a schema-side type
(GraphQLNonNull, GraphQLList, a named type), as found on input object fields.
"""

from __future__ import annotations

import logging
from typing import Any

from graphql import (
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLSchema,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    OperationDefinitionNode,
)

logger = logging.getLogger(__name__)

# Built-in scalar name -> schema node
_SCALAR_SCHEMAS: dict[str, dict[str, Any]] = {
    "Int": {"type": "integer"},
    "Float": {"type": "number", "format": "double"},
    "String": {"type": "string"},
    "Boolean": {"type": "boolean"},
    "ID": {"type": "string", "description": "GraphQL ID"},
}


def is_non_null(type_ref: Any) -> bool:
    """Check whether a type reference carries the non-null modifier."""
    return isinstance(type_ref, (NonNullTypeNode, GraphQLNonNull))


def strip_non_null(type_ref: Any) -> Any:
    """Return the nullable form of a type reference."""
    if isinstance(type_ref, NonNullTypeNode):
        return type_ref.type
    if isinstance(type_ref, GraphQLNonNull):
        return type_ref.of_type
    return type_ref


def list_item_type(type_ref: Any) -> Any | None:
    """Return the element type of a list reference, or None for named types."""
    type_ref = strip_non_null(type_ref)
    if isinstance(type_ref, ListTypeNode):
        return type_ref.type
    if isinstance(type_ref, GraphQLList):
        return type_ref.of_type
    return None


def named_type(type_ref: Any) -> str:
    """Return the type name of a (non-list) type reference."""
    type_ref = strip_non_null(type_ref)
    if isinstance(type_ref, NamedTypeNode):
        return type_ref.name.value
    if isinstance(type_ref, GraphQLNamedType):
        return type_ref.name
    raise TypeError(f"not a named type reference: {type_ref!r}")


def map_type(
    schema: GraphQLSchema,
    type_ref: Any,
    _expanding: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """Map a GraphQL type reference to a schema node."""
    item = list_item_type(type_ref)
    if item is not None:
        return {"type": "array", "items": map_type(schema, item, _expanding)}

    name = named_type(type_ref)
    if name in _SCALAR_SCHEMAS:
        return dict(_SCALAR_SCHEMAS[name])

    definition = schema.get_type(name)
    if definition is None:
        return {"type": "string", "description": f"GraphQL type {name}"}

    if isinstance(definition, GraphQLEnumType):
        return {"type": "string", "enum": list(definition.values)}

    if isinstance(definition, GraphQLInputObjectType):
        if name in _expanding:
            logger.debug("Input %s references itself, emitting placeholder", name)
            return {
                "type": "object",
                "description": f"Recursive reference to GraphQL input {name}",
            }
        expanding = _expanding | {name}
        properties: dict[str, Any] = {}
        required: list[str] = []
        for field_name, field in definition.fields.items():
            properties[field_name] = map_type(schema, field.type, expanding)
            if is_non_null(field.type):
                required.append(field_name)
        node: dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            node["required"] = required
        return node

    # custom scalar, or an output type used where an input is expected
    return {"type": "string", "description": f"GraphQL custom scalar {name}"}


def build_variables_schema(
    schema: GraphQLSchema,
    operation: OperationDefinitionNode,
) -> tuple[dict[str, Any], list[str]]:
    """Build the object schema for an operation's variables.

    Returns the schema node and the list of required (non-null) variable
    names, both in declaration order.
    """
    properties: dict[str, Any] = {}
    required: list[str] = []
    for definition in operation.variable_definitions or ():
        name = definition.variable.name.value
        properties[name] = map_type(schema, definition.type)
        if is_non_null(definition.type):
            required.append(name)

    node: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        node["required"] = list(required)
    return node, required
