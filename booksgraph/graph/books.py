import booksgraph as g

from .. import entities
from . import authors


Book = g.ObjectType("Book", description="This represents a book written by an author", fields=lambda: (
    g.field("id", type=g.Int),
    g.field("name", type=g.String),
    g.field("author_id", type=g.Int),
    g.field("author", type=g.NullableType(authors.Author)),
))


@g.resolver(Book, "author")
@g.dependencies(store=entities.Store)
def book_resolve_author(graph, book, args, *, store):
    return store.find_by_id(entities.Author, book.author_id)


resolvers = (
    book_resolve_author,
)
