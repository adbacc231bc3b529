"""Directive occurrences

An occurrence is one concrete attachment of a directive: either on a field
definition in the schema (bound once when the schema is bound) or on a field
selection in a query document (bound whenever that selection is resolved).
"""

from typing import Collection, List, NamedTuple, Optional

from graphql import DirectiveLocation, GraphQLField, GraphQLResolveInfo
from graphql import specified_directives
from graphql.language import DirectiveNode

__all__ = [
    "DirectiveOccurrence",
    "get_definition_occurrences",
    "get_usage_occurrences",
    "specified_directive_names",
]


specified_directive_names = frozenset(
    directive.name for directive in specified_directives
)


class DirectiveOccurrence(NamedTuple):
    """A directive attached to a field definition or a field selection."""

    name: str
    location: DirectiveLocation
    node: DirectiveNode


def collect_occurrences(
    nodes: Optional[Collection[DirectiveNode]],
    location: DirectiveLocation,
    skip: Collection[str] = (),
) -> List[DirectiveOccurrence]:
    if not nodes:
        return []
    return [
        DirectiveOccurrence(node.name.value, location, node)
        for node in nodes
        if node.name.value not in skip
    ]


def get_definition_occurrences(
    field: GraphQLField, skip: Collection[str] = ()
) -> List[DirectiveOccurrence]:
    """Get the directives attached to the SDL definition of a field.

    Fields that have been created programmatically have no AST node and therefore
    no directive occurrences.
    """
    ast_node = field.ast_node
    return collect_occurrences(
        ast_node.directives if ast_node else None,
        DirectiveLocation.FIELD_DEFINITION,
        skip,
    )


def get_usage_occurrences(
    info: GraphQLResolveInfo, skip: Collection[str] = ()
) -> List[DirectiveOccurrence]:
    """Get the directives attached to the field selection currently resolved.

    When several selections with the same response name have been merged, the
    directives of the first one are used.
    """
    field_nodes = info.field_nodes
    return collect_occurrences(
        field_nodes[0].directives if field_nodes else None,
        DirectiveLocation.FIELD,
        skip,
    )
