"""Binding of directive handlers to a schema

Directives are bound at two different times. Directives attached to the definition
of a field in the schema are bound once, when the schema is bound; the resulting
pipeline replaces the resolver of the field. Directives attached to a selection of
the field in a query document are bound every time the field is resolved, because
different selections of the same field may carry different directives.

Directives attached to a selection always wrap around the directives attached to
the definition of the field.
"""

import logging
from typing import Any, Collection, Mapping, NamedTuple, Union, cast

from graphql import (
    DirectiveLocation,
    GraphQLField,
    GraphQLFieldResolver,
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    default_field_resolver,
    is_interface_type,
)
from graphql.pyutils import inspect

from .error import DirectiveConfigurationError, DirectiveExecutionError
from .occurrences import (
    get_definition_occurrences,
    get_usage_occurrences,
    specified_directive_names,
)
from .pipeline import build_pipeline
from .registry import DirectiveHandler, HandlerRegistry
from .schema_transform import map_field_resolvers
from .validate import resolve_occurrences

__all__ = [
    "FieldBinding",
    "UsageDirectiveResolver",
    "bind_definition_directives",
    "bind_directives",
    "check_interface_directives",
]

logger = logging.getLogger(__name__)


class FieldBinding(NamedTuple):
    """The resolvers of a field with bound definition directives."""

    type_name: str
    field_name: str
    original_resolver: GraphQLFieldResolver
    definition_resolver: GraphQLFieldResolver


def bind_definition_directives(
    type_: GraphQLObjectType,
    field_name: str,
    field: GraphQLField,
    schema: GraphQLSchema,
    registry: HandlerRegistry,
    skip: Collection[str] = (),
) -> FieldBinding:
    """Bind the directives attached to the definition of a field.

    Raises a DirectiveConfigurationError if one of the directives cannot be bound.
    """
    original_resolver = field.resolve or default_field_resolver
    occurrences = get_definition_occurrences(field, skip)
    if not occurrences:
        return FieldBinding(
            type_.name, field_name, original_resolver, original_resolver
        )
    resolved = resolve_occurrences(
        occurrences, schema, registry, DirectiveLocation.FIELD_DEFINITION
    )
    if isinstance(resolved, DirectiveConfigurationError):
        raise resolved
    logger.debug(
        "Bound %s to field %s.%s.",
        ", ".join(f"@{directive.name}" for directive in resolved),
        type_.name,
        field_name,
    )
    return FieldBinding(
        type_.name,
        field_name,
        original_resolver,
        build_pipeline(resolved, original_resolver),
    )


class UsageDirectiveResolver:
    """Field resolver binding the directives attached to the resolved selection.

    The directives are looked up, validated and wrapped around the definition
    resolver of the field on every call, so that each selection of the field gets
    its own directives and directive arguments. Directives that cannot be bound
    cause a DirectiveExecutionError for the resolved field only.
    """

    __slots__ = "binding", "schema", "registry", "skip"

    def __init__(
        self,
        binding: FieldBinding,
        schema: GraphQLSchema,
        registry: HandlerRegistry,
        skip: Collection[str] = (),
    ) -> None:
        self.binding = binding
        self.schema = schema
        self.registry = registry
        self.skip = skip

    def __call__(self, source: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        resolver = self.binding.definition_resolver
        occurrences = get_usage_occurrences(info, self.skip)
        if not occurrences:
            return resolver(source, info, **args)
        resolved = resolve_occurrences(
            occurrences,
            self.schema,
            self.registry,
            DirectiveLocation.FIELD,
            info.variable_values,
        )
        if isinstance(resolved, DirectiveConfigurationError):
            logger.debug(
                "Cannot bind directives to field %s.%s: %s",
                self.binding.type_name,
                self.binding.field_name,
                resolved.message,
            )
            raise DirectiveExecutionError(resolved)
        return build_pipeline(resolved, resolver)(source, info, **args)

    def __repr__(self) -> str:
        binding = self.binding
        return (
            f"<{self.__class__.__name__}"
            f" {binding.type_name}.{binding.field_name}>"
        )


def check_interface_directives(
    schema: GraphQLSchema, registry: HandlerRegistry, skip: Collection[str] = ()
) -> None:
    """Check the directives attached to the field definitions of interfaces.

    GraphQL-core never calls resolvers of interface fields, so these directives are
    not bound, but they must still be declared, allowed and handled.
    """
    for type_ in schema.type_map.values():
        if not is_interface_type(type_):
            continue
        for field in cast(GraphQLInterfaceType, type_).fields.values():
            occurrences = get_definition_occurrences(field, skip)
            if not occurrences:
                continue
            resolved = resolve_occurrences(
                occurrences, schema, registry, DirectiveLocation.FIELD_DEFINITION
            )
            if isinstance(resolved, DirectiveConfigurationError):
                raise resolved


def bind_directives(
    schema: GraphQLSchema,
    handlers: Union[HandlerRegistry, Mapping[str, DirectiveHandler]],
    *,
    skip_specified_directives: bool = True,
) -> GraphQLSchema:
    """Bind directive handlers to a schema.

    Returns a copy of the given schema where every field of an object type resolves
    through the directive handlers from the given registry: first through the
    handlers of the directives attached to the definition of the field, then through
    the handlers of the directives attached to the selection of the field in the
    executed query document. The given schema is not changed.

    Directives specified by GraphQL itself (such as ``@deprecated`` or ``@skip``)
    are left to GraphQL-core unless the registry contains a handler for them or
    ``skip_specified_directives`` is set to False.

    Raises a DirectiveConfigurationError if the registry is malformed or a directive
    attached to a field definition cannot be bound. In this case no schema is
    returned.
    """
    if not isinstance(schema, GraphQLSchema):
        raise TypeError(f"Expected {inspect(schema)} to be a GraphQL schema.")
    registry = HandlerRegistry.from_value(handlers)
    skip = (
        specified_directive_names.difference(registry)
        if skip_specified_directives
        else frozenset()
    )

    def bind_field(
        type_: GraphQLObjectType, field_name: str, field: GraphQLField
    ) -> GraphQLFieldResolver:
        binding = bind_definition_directives(
            type_, field_name, field, schema, registry, skip
        )
        return UsageDirectiveResolver(binding, schema, registry, skip)

    check_interface_directives(schema, registry, skip)
    return map_field_resolvers(schema, bind_field)
