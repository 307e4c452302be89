import booksgraph as g

from .. import entities
from . import authors, books


Query = g.ObjectType("Query", description="Root Query", fields=(
    g.field("books", g.NullableType(g.ListType(g.NullableType(books.Book))), description="A list of all books"),
    g.field("authors", g.NullableType(g.ListType(g.NullableType(authors.Author))), description="A list of all authors"),
    g.field(
        "book",
        g.NullableType(books.Book),
        params=(g.param("id", g.NullableType(g.Int)), ),
        description="A single book",
    ),
    g.field(
        "author",
        g.NullableType(authors.Author),
        params=(g.param("id", g.NullableType(g.Int)), ),
        description="A single author",
    ),
))


Mutation = g.ObjectType("Mutation", description="Root Mutation", fields=(
    g.field(
        "add_book",
        g.NullableType(books.Book),
        params=(
            g.param("author_id", g.Int),
            g.param("name", g.String),
        ),
        description="Adds a single book to the list of books",
    ),
    g.field(
        "add_author",
        g.NullableType(authors.Author),
        params=(
            g.param("name", g.String),
        ),
        description="Adds a single author to the list of authors",
    ),
))


@g.resolver(Query, "books")
@g.dependencies(store=entities.Store)
def root_resolve_books(graph, root, args, *, store):
    return store.list_all(entities.Book)


@g.resolver(Query, "authors")
@g.dependencies(store=entities.Store)
def root_resolve_authors(graph, root, args, *, store):
    return store.list_all(entities.Author)


@g.resolver(Query, "book")
@g.dependencies(store=entities.Store)
def root_resolve_book(graph, root, args, *, store):
    return store.find_by_id(entities.Book, args.id)


@g.resolver(Query, "author")
@g.dependencies(store=entities.Store)
def root_resolve_author(graph, root, args, *, store):
    return store.find_by_id(entities.Author, args.id)


@g.resolver(Mutation, "add_book")
@g.dependencies(store=entities.Store)
def mutation_resolve_add_book(graph, root, args, *, store):
    # The author is not required to exist.
    book = entities.Book(
        id=store.next_id(entities.Book),
        name=args.name,
        author_id=args.author_id,
    )
    return store.append(entities.Book, book)


@g.resolver(Mutation, "add_author")
@g.dependencies(store=entities.Store)
def mutation_resolve_add_author(graph, root, args, *, store):
    author = entities.Author(
        id=store.next_id(entities.Author),
        name=args.name,
    )
    return store.append(entities.Author, author)


resolvers = (
    root_resolve_books,
    root_resolve_authors,
    root_resolve_book,
    root_resolve_author,
    mutation_resolve_add_book,
    mutation_resolve_add_author,
)
