import booksgraph as g

from .. import entities
from . import books


Author = g.ObjectType("Author", description="This represents an author", fields=lambda: (
    g.field("id", type=g.Int),
    g.field("name", type=g.String),
    g.field("books", type=g.NullableType(g.ListType(g.NullableType(books.Book)))),
))


@g.resolver(Author, "books")
@g.dependencies(store=entities.Store)
def author_resolve_books(graph, author, args, *, store):
    return store.find_all(entities.Book, lambda book: book.author_id == author.id)


resolvers = (
    author_resolve_books,
)
