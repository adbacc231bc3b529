from typing import Callable, Dict, Optional, Tuple, Union, cast

from graphql import (
    GraphQLField,
    GraphQLFieldResolver,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLUnionType,
    is_interface_type,
    is_introspection_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_union_type,
)

__all__ = ["map_field_resolvers", "ResolverMapper"]


ResolverMapper = Callable[
    [GraphQLObjectType, str, GraphQLField], Optional[GraphQLFieldResolver]
]


def map_field_resolvers(
    schema: GraphQLSchema, map_resolver: ResolverMapper
) -> GraphQLSchema:
    """Map the field resolvers of a GraphQLSchema.

    This function returns a copy of the given GraphQLSchema where the resolver of
    every field of an object type has been replaced with the resolver returned by
    ``map_resolver(type_, field_name, field)``. The given schema is not changed.

    All resolvers are mapped before the copy is built, so if ``map_resolver`` raises
    an error, no copy of the schema is created at all.
    """
    resolvers: Dict[Tuple[str, str], Optional[GraphQLFieldResolver]] = {
        (type_.name, field_name): map_resolver(type_, field_name, field)
        for type_ in schema.type_map.values()
        if is_object_type(type_) and not is_introspection_type(type_)
        for field_name, field in cast(GraphQLObjectType, type_).fields.items()
    }

    def replace_type(
        type_: Union[GraphQLList, GraphQLNonNull, GraphQLNamedType]
    ) -> Union[GraphQLList, GraphQLNonNull, GraphQLNamedType]:
        if is_list_type(type_):
            return GraphQLList(replace_type(cast(GraphQLList, type_).of_type))
        if is_non_null_type(type_):
            return GraphQLNonNull(replace_type(cast(GraphQLNonNull, type_).of_type))
        return replace_named_type(cast(GraphQLNamedType, type_))

    def replace_named_type(type_: GraphQLNamedType) -> GraphQLNamedType:
        return type_map[type_.name]

    def replace_maybe_type(
        maybe_type: Optional[GraphQLNamedType],
    ) -> Optional[GraphQLNamedType]:
        return maybe_type and replace_named_type(maybe_type)

    def replace_fields(
        type_name: str, fields_map: Dict[str, GraphQLField], map_resolvers: bool
    ) -> Dict[str, GraphQLField]:
        fields = {}
        for name, field in fields_map.items():
            kwargs = field.to_kwargs()
            kwargs.update(type_=replace_type(cast(GraphQLNamedType, field.type)))
            if map_resolvers:
                kwargs.update(resolve=resolvers[type_name, name])
            fields[name] = GraphQLField(**kwargs)
        return fields

    def replace_named_types(types):
        return [replace_named_type(type_) for type_ in types]

    def copy_named_type(type_: GraphQLNamedType) -> GraphQLNamedType:
        # input types cannot reference output types and can be shared
        if is_introspection_type(type_) or not (
            is_object_type(type_) or is_interface_type(type_) or is_union_type(type_)
        ):
            return type_
        if is_object_type(type_):
            kwargs = type_.to_kwargs()
            object_type = cast(GraphQLObjectType, type_)
            kwargs.update(
                interfaces=lambda: replace_named_types(object_type.interfaces),
                fields=lambda: replace_fields(
                    object_type.name, object_type.fields, True
                ),
            )
            return GraphQLObjectType(**kwargs)
        if is_interface_type(type_):
            kwargs = type_.to_kwargs()
            interface_type = cast(GraphQLInterfaceType, type_)
            kwargs.update(
                interfaces=lambda: replace_named_types(interface_type.interfaces),
                fields=lambda: replace_fields(
                    interface_type.name, interface_type.fields, False
                ),
            )
            return GraphQLInterfaceType(**kwargs)
        kwargs = type_.to_kwargs()
        union_type = cast(GraphQLUnionType, type_)
        kwargs.update(types=lambda: replace_named_types(union_type.types))
        return GraphQLUnionType(**kwargs)

    type_map: Dict[str, GraphQLNamedType] = {
        type_.name: copy_named_type(type_) for type_ in schema.type_map.values()
    }

    kwargs = schema.to_kwargs()
    kwargs.update(
        query=cast(Optional[GraphQLObjectType], replace_maybe_type(schema.query_type)),
        mutation=cast(
            Optional[GraphQLObjectType], replace_maybe_type(schema.mutation_type)
        ),
        subscription=cast(
            Optional[GraphQLObjectType], replace_maybe_type(schema.subscription_type)
        ),
        types=list(type_map.values()),
    )
    return GraphQLSchema(**kwargs)
