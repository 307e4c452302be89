import booksgraph as g

from .. import entities
from ..graphql import executor
from . import authors, books, root


resolvers = (
    authors.resolvers,
    books.resolvers,
    root.resolvers,
)


_graph_definition = g.define_graph(resolvers=resolvers)


def create_graph(*, store):
    return _graph_definition.create_graph(
        {
            entities.Store: store,
        }
    )


Author = authors.Author
Book = books.Book
Query = root.Query
Mutation = root.Mutation


execute = executor(query_type=Query, mutation_type=Mutation)
