"""Select the GraphQL operation to document from a query document."""

from __future__ import annotations

import logging

from graphql import DocumentNode, OperationDefinitionNode

logger = logging.getLogger(__name__)

ANONYMOUS_LABEL = "(anonymous)"


class OperationNotFoundError(LookupError):
    """Raised when no operation matches the requested name."""


def get_operations(document: DocumentNode) -> list[OperationDefinitionNode]:
    """Extract operation definitions, skipping fragments."""
    return [
        d for d in document.definitions if isinstance(d, OperationDefinitionNode)
    ]


def operation_names(document: DocumentNode) -> list[str]:
    """Names of the named operations, in declaration order."""
    return [op.name.value for op in get_operations(document) if op.name]


def select_operation(
    document: DocumentNode,
    name: str | None = None,
) -> OperationDefinitionNode:
    """Pick one operation from the document.

    With a name, the operation must match it exactly. Without one, a lone
    operation is used; otherwise the first named operation wins, falling back
    to the first operation when none are named.
    """
    operations = get_operations(document)

    if name:
        for op in operations:
            if op.name and op.name.value == name:
                return op
        raise OperationNotFoundError(f"operation {name!r} not found")

    if not operations:
        raise OperationNotFoundError("document contains no operations")

    if len(operations) == 1:
        return operations[0]

    for op in operations:
        if op.name:
            logger.debug("Selected first named operation %s", op.name.value)
            return op
    return operations[0]


def operation_label(operation: OperationDefinitionNode) -> str:
    """Name used for the operation in the OpenAPI summary."""
    return operation.name.value if operation.name else ANONYMOUS_LABEL
