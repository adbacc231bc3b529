"""GraphQL-directives

GraphQL-directives lets you implement the behavior of custom GraphQL directives in
Python, as middleware ("directive handlers") that is layered around the resolvers of
the fields the directives are attached to, without changing these resolvers.

A directive handler is called as ``handler(next_, source, args, context, info)``,
where ``next_()`` returns the value of the field as produced by the field resolver
and all directives applied before, and ``args`` are the arguments of the directive.

Directives can be attached to field definitions in the schema (location
``FIELD_DEFINITION``) and to field selections in queries (location ``FIELD``).
Handlers are bound to a schema built with GraphQL-core using ``bind_directives()``::

    from graphql import build_schema, graphql_sync
    from graphql_directives import bind_directives

    schema = build_schema('''
        directive @upperCase on FIELD_DEFINITION | FIELD

        type Query {
          hello: String @upperCase
        }
    ''')

    def upper_case(next_, source, args, context, info):
        return next_().upper()

    schema = bind_directives(schema, {"upperCase": upper_case})
    graphql_sync(schema, "{ hello }", {"hello": "world"})
"""

# The version of this package:
from .version import version, version_info

# Errors
from .error import DirectiveConfigurationError, DirectiveExecutionError

# The handler registry
from .registry import DirectiveHandler, HandlerRegistry

# Directive occurrences
from .occurrences import (
    DirectiveOccurrence,
    get_definition_occurrences,
    get_usage_occurrences,
)

# Resolving directive occurrences
from .validate import ResolvedDirective, resolve_occurrence, resolve_occurrences

# Directive pipelines
from .pipeline import DirectivePipeline, SharedAwaitable, build_pipeline

# Transforming schemas
from .schema_transform import map_field_resolvers

# Binding directive handlers to schemas
from .bind import (
    FieldBinding,
    UsageDirectiveResolver,
    bind_definition_directives,
    bind_directives,
    check_interface_directives,
)

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "DirectiveConfigurationError",
    "DirectiveExecutionError",
    "DirectiveHandler",
    "HandlerRegistry",
    "DirectiveOccurrence",
    "get_definition_occurrences",
    "get_usage_occurrences",
    "ResolvedDirective",
    "resolve_occurrence",
    "resolve_occurrences",
    "DirectivePipeline",
    "SharedAwaitable",
    "build_pipeline",
    "map_field_resolvers",
    "FieldBinding",
    "UsageDirectiveResolver",
    "bind_definition_directives",
    "bind_directives",
    "check_interface_directives",
]
