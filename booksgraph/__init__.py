from .core import define_graph, dependencies, GraphError, resolver
from .schema import (
    field,
    Int,
    ListType,
    NullableType,
    ObjectType,
    param,
    String,
)


__all__ = [
    "define_graph",
    "dependencies",
    "GraphError",
    "resolver",

    "field",
    "Int",
    "ListType",
    "NullableType",
    "ObjectType",
    "param",
    "String",
]
