import re

import graphql

from .. import iterables, schema
from ..core import Args


class Schema(object):
    def __init__(self, query_type, mutation_type, graphql_schema):
        self.query_type = query_type
        self.mutation_type = mutation_type
        self.graphql_schema = graphql_schema


def create_graphql_schema(query_type, mutation_type=None):
    graphql_types = {}

    def to_graphql_type(graph_type):
        if graph_type not in graphql_types:
            graphql_types[graph_type] = generate_graphql_type(graph_type)

        return graphql_types[graph_type]

    def generate_graphql_type(graph_type):
        if graph_type == schema.Int:
            return graphql.GraphQLNonNull(graphql.GraphQLInt)
        elif graph_type == schema.String:
            return graphql.GraphQLNonNull(graphql.GraphQLString)

        elif isinstance(graph_type, schema.ListType):
            return graphql.GraphQLNonNull(graphql.GraphQLList(to_graphql_type(graph_type.element_type)))

        elif isinstance(graph_type, schema.NullableType):
            return to_graphql_type(graph_type.element_type).of_type

        elif isinstance(graph_type, schema.ObjectType):
            return graphql.GraphQLNonNull(graphql.GraphQLObjectType(
                name=graph_type.name,
                fields=to_graphql_fields(graph_type.fields),
                description=graph_type.description,
            ))

        else:
            raise ValueError("unsupported type: {}".format(graph_type))

    def to_graphql_fields(graph_fields):
        return lambda: iterables.to_dict(
            (to_graphql_name(field.name), to_graphql_field(field))
            for field in graph_fields
        )

    def to_graphql_field(graph_field):
        return graphql.GraphQLField(
            type_=to_graphql_type(graph_field.type),
            args=iterables.to_dict(
                (to_graphql_name(param.name), to_graphql_argument(param))
                for param in graph_field.params
            ),
            resolve=field_resolver(graph_field),
            description=graph_field.description,
        )

    def to_graphql_argument(param):
        return graphql.GraphQLArgument(
            type_=to_graphql_type(param.type),
            description=param.description,
            out_name=param.name,
        )

    graphql_query_type = to_graphql_type(query_type).of_type
    if mutation_type is None:
        graphql_mutation_type = None
    else:
        graphql_mutation_type = to_graphql_type(mutation_type).of_type

    return Schema(
        query_type=query_type,
        mutation_type=mutation_type,
        graphql_schema=graphql.GraphQLSchema(
            query=graphql_query_type,
            mutation=graphql_mutation_type,
        ),
    )


def field_resolver(graph_field):
    # The graph for the current request is passed to graphql-core as the context.
    # Arguments left out of the document are passed as None.
    def resolve(source, info, **args):
        values = dict((param.name, None) for param in graph_field.params)
        values.update(args)
        return info.context.resolve(graph_field, source, Args(values))

    return resolve


def to_graphql_name(value):
    return value[0].lower() + re.sub(r"_(.)", lambda match: match.group(1).upper(), value[1:]).rstrip("_")
