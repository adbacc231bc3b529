from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Union

from graphql import DirectiveLocation, GraphQLError, GraphQLSchema
from graphql.execution.values import get_argument_values

from .error import DirectiveConfigurationError
from .occurrences import DirectiveOccurrence
from .registry import DirectiveHandler, HandlerRegistry

__all__ = ["ResolvedDirective", "resolve_occurrence", "resolve_occurrences"]


class ResolvedDirective(NamedTuple):
    """A directive occurrence bound to its handler and its coerced arguments."""

    name: str
    handler: DirectiveHandler
    args: Dict[str, Any]


def resolve_occurrence(
    occurrence: DirectiveOccurrence,
    schema: GraphQLSchema,
    registry: HandlerRegistry,
    expected_location: DirectiveLocation,
    variable_values: Optional[Dict[str, Any]] = None,
) -> Union[ResolvedDirective, DirectiveConfigurationError]:
    """Resolve a directive occurrence.

    Checks the occurrence against the directive declarations of the schema and the
    given handler registry. Returns the resolved directive, or the configuration
    error describing why the occurrence cannot be resolved. Nothing is raised and
    nothing is cached.
    """
    name = occurrence.name
    node = occurrence.node

    directive = schema.get_directive(name)
    if directive is None:
        return DirectiveConfigurationError(
            f"Directive @{name} is undefined. Please define in schema before using.",
            node,
        )

    if expected_location not in directive.locations:
        location = expected_location.name
        return DirectiveConfigurationError(
            f'Directive @{name} is not marked to be used on "{location}" location.'
            f' Please add "directive @{name} ON {location}" in schema.',
            node,
        )

    handler = registry.get_handler(name)
    if handler is None:
        return DirectiveConfigurationError(
            f"Directive @{name} has no resolver."
            " Please define one in the handler registry.",
            node,
        )

    try:
        args = get_argument_values(directive, node, variable_values)
    except GraphQLError as error:
        return DirectiveConfigurationError(
            error.message, error.nodes or node, original_error=error
        )

    return ResolvedDirective(name, handler, args)


def resolve_occurrences(
    occurrences: Iterable[DirectiveOccurrence],
    schema: GraphQLSchema,
    registry: HandlerRegistry,
    expected_location: DirectiveLocation,
    variable_values: Optional[Dict[str, Any]] = None,
) -> Union[List[ResolvedDirective], DirectiveConfigurationError]:
    """Resolve directive occurrences in the given order.

    Returns the list of resolved directives or the first configuration error.
    """
    resolved: List[ResolvedDirective] = []
    append_resolved = resolved.append
    for occurrence in occurrences:
        result = resolve_occurrence(
            occurrence, schema, registry, expected_location, variable_values
        )
        if isinstance(result, DirectiveConfigurationError):
            return result
        append_resolved(result)
    return resolved
