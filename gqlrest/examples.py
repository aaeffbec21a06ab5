"""Synthesize example values for GraphQL type references.

Mirrors type_mapper.map_type: same recursion, scalar literals instead of
schema nodes. Output is deterministic for a given schema and reference.
"""

from __future__ import annotations

from typing import Any

from graphql import (
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLSchema,
    OperationDefinitionNode,
)

from .type_mapper import list_item_type, named_type

_SCALAR_EXAMPLES: dict[str, Any] = {
    "Int": 0,
    "Float": 0.0,
    "String": "string",
    "Boolean": True,
    "ID": "id",
}

# Used for enums that declare no values
ENUM_PLACEHOLDER = "VALUE"

# Used for custom scalars and unresolvable names
FALLBACK_EXAMPLE = "string"


def example_for(
    schema: GraphQLSchema,
    type_ref: Any,
    _expanding: frozenset[str] = frozenset(),
) -> Any:
    """Return a representative value for a GraphQL type reference."""
    item = list_item_type(type_ref)
    if item is not None:
        return [example_for(schema, item, _expanding)]

    name = named_type(type_ref)
    if name in _SCALAR_EXAMPLES:
        return _SCALAR_EXAMPLES[name]

    definition = schema.get_type(name)
    if isinstance(definition, GraphQLEnumType):
        return next(iter(definition.values), ENUM_PLACEHOLDER)

    if isinstance(definition, GraphQLInputObjectType):
        if name in _expanding:
            return {}
        expanding = _expanding | {name}
        return {
            field_name: example_for(schema, field.type, expanding)
            for field_name, field in definition.fields.items()
        }

    return FALLBACK_EXAMPLE


def build_variables_example(
    schema: GraphQLSchema,
    operation: OperationDefinitionNode,
) -> dict[str, Any]:
    """Build an example variables object covering every declared variable."""
    return {
        definition.variable.name.value: example_for(schema, definition.type)
        for definition in operation.variable_definitions or ()
    }
