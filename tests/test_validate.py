from graphql import DirectiveLocation, build_schema, parse
from graphql.language import FieldNode, OperationDefinitionNode

from graphql_directives import (
    DirectiveConfigurationError,
    DirectiveOccurrence,
    HandlerRegistry,
    ResolvedDirective,
    get_definition_occurrences,
    resolve_occurrence,
    resolve_occurrences,
)

FIELD = DirectiveLocation.FIELD
FIELD_DEFINITION = DirectiveLocation.FIELD_DEFINITION

schema = build_schema(
    """
    directive @upperCase on FIELD_DEFINITION | FIELD
    directive @substr(start: Int!, end: Int!) on FIELD_DEFINITION | FIELD
    directive @onlyQuery on FIELD
    directive @onlySchema on FIELD_DEFINITION

    type Query {
      foo: String @upperCase
      bar: String @substr(start: 1, end: 2) @upperCase
      undefinedFoo: String @undefined
      unmarkedFoo: String @onlyQuery
      invalidFoo: String @substr(start: "one", end: 2)
    }
    """,
    assume_valid_sdl=True,
)


def upper_case(next_, _source, _args, _context, _info):
    return next_().upper()


def substr(next_, _source, args, _context, _info):
    return next_()[args["start"] : args["start"] + args["end"]]


registry = HandlerRegistry(
    {
        "upperCase": upper_case,
        "substr": substr,
        "onlyQuery": upper_case,
        "onlySchema": upper_case,
    }
)


def definition_occurrences(field_name):
    return get_definition_occurrences(schema.query_type.fields[field_name])


def usage_occurrences(query):
    operation = parse(query).definitions[0]
    assert isinstance(operation, OperationDefinitionNode)
    field_node = operation.selection_set.selections[0]
    assert isinstance(field_node, FieldNode)
    return [
        DirectiveOccurrence(node.name.value, FIELD, node)
        for node in field_node.directives or ()
    ]


def describe_resolve_occurrence():
    def resolves_occurrence_without_arguments():
        (occurrence,) = definition_occurrences("foo")
        result = resolve_occurrence(occurrence, schema, registry, FIELD_DEFINITION)
        assert result == ResolvedDirective("upperCase", upper_case, {})

    def resolves_occurrence_with_arguments():
        occurrence = definition_occurrences("bar")[0]
        result = resolve_occurrence(occurrence, schema, registry, FIELD_DEFINITION)
        assert result == ResolvedDirective("substr", substr, {"start": 1, "end": 2})

    def resolves_usage_occurrence_with_variables():
        (occurrence,) = usage_occurrences(
            "query ($start: Int!) { foo @substr(start: $start, end: 1) }"
        )
        result = resolve_occurrence(
            occurrence, schema, registry, FIELD, {"start": 2}
        )
        assert result == ResolvedDirective("substr", substr, {"start": 2, "end": 1})

    def reports_undefined_directive():
        (occurrence,) = definition_occurrences("undefinedFoo")
        result = resolve_occurrence(occurrence, schema, registry, FIELD_DEFINITION)
        assert isinstance(result, DirectiveConfigurationError)
        assert result.message == (
            "Directive @undefined is undefined. Please define in schema before using."
        )
        assert result.nodes == [occurrence.node]

    def reports_directive_not_allowed_on_field_definitions():
        (occurrence,) = definition_occurrences("unmarkedFoo")
        result = resolve_occurrence(occurrence, schema, registry, FIELD_DEFINITION)
        assert isinstance(result, DirectiveConfigurationError)
        assert result.message == (
            'Directive @onlyQuery is not marked to be used on "FIELD_DEFINITION"'
            ' location. Please add "directive @onlyQuery ON FIELD_DEFINITION"'
            " in schema."
        )

    def reports_directive_not_allowed_on_fields():
        (occurrence,) = usage_occurrences("{ foo @onlySchema }")
        result = resolve_occurrence(occurrence, schema, registry, FIELD)
        assert isinstance(result, DirectiveConfigurationError)
        assert result.message == (
            'Directive @onlySchema is not marked to be used on "FIELD" location.'
            ' Please add "directive @onlySchema ON FIELD" in schema.'
        )

    def reports_missing_handler():
        (occurrence,) = definition_occurrences("foo")
        result = resolve_occurrence(
            occurrence, schema, HandlerRegistry({}), FIELD_DEFINITION
        )
        assert isinstance(result, DirectiveConfigurationError)
        assert result.message == (
            "Directive @upperCase has no resolver."
            " Please define one in the handler registry."
        )

    def reports_invalid_arguments():
        (occurrence,) = definition_occurrences("invalidFoo")
        result = resolve_occurrence(occurrence, schema, registry, FIELD_DEFINITION)
        assert isinstance(result, DirectiveConfigurationError)
        assert result.message.startswith("Argument 'start' has invalid value")
        assert result.original_error is not None

    def reports_missing_required_arguments():
        (occurrence,) = usage_occurrences("{ foo @substr(start: 1) }")
        result = resolve_occurrence(occurrence, schema, registry, FIELD)
        assert isinstance(result, DirectiveConfigurationError)
        assert "'end'" in result.message

    def does_not_raise_or_cache():
        (occurrence,) = definition_occurrences("foo")
        first = resolve_occurrence(occurrence, schema, registry, FIELD_DEFINITION)
        second = resolve_occurrence(occurrence, schema, registry, FIELD_DEFINITION)
        assert first == second
        assert first is not second


def describe_resolve_occurrences():
    def resolves_occurrences_in_order():
        result = resolve_occurrences(
            definition_occurrences("bar"), schema, registry, FIELD_DEFINITION
        )
        assert result == [
            ResolvedDirective("substr", substr, {"start": 1, "end": 2}),
            ResolvedDirective("upperCase", upper_case, {}),
        ]

    def resolves_no_occurrences():
        assert resolve_occurrences([], schema, registry, FIELD) == []

    def returns_first_error():
        result = resolve_occurrences(
            usage_occurrences("{ foo @upperCase @unknown @onlySchema }"),
            schema,
            registry,
            FIELD,
        )
        assert isinstance(result, DirectiveConfigurationError)
        assert result.message.startswith("Directive @unknown is undefined.")
