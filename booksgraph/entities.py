import logging

from . import GraphError, iterables


logger = logging.getLogger(__name__)


class Author(object):
    def __init__(self, id, name):
        self.id = id
        self.name = name

    def __eq__(self, other):
        if isinstance(other, Author):
            return (self.id, self.name) == (other.id, other.name)
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __repr__(self):
        return "Author(id={!r}, name={!r})".format(self.id, self.name)


class Book(object):
    def __init__(self, id, name, author_id):
        self.id = id
        self.name = name
        self.author_id = author_id

    def __eq__(self, other):
        if isinstance(other, Book):
            return (self.id, self.name, self.author_id) == (other.id, other.name, other.author_id)
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __repr__(self):
        return "Book(id={!r}, name={!r}, author_id={!r})".format(self.id, self.name, self.author_id)


class Store(object):
    """
    In-memory storage of authors and books.

    Entities are kept in insertion order and looked up by linear scan.
    Identifiers are assigned by callers using ``next_id()``, which is not
    safe against concurrent appends.
    """

    def __init__(self, authors=(), books=()):
        self._entities = {
            Author: list(authors),
            Book: list(books),
        }

    def list_all(self, kind):
        return list(self._entities_of_kind(kind))

    def find_by_id(self, kind, id):
        return iterables.find(lambda entity: entity.id == id, self._entities_of_kind(kind), default=None)

    def find_all(self, kind, predicate):
        return iterables.find_all(predicate, self._entities_of_kind(kind))

    def next_id(self, kind):
        return len(self._entities_of_kind(kind)) + 1

    def append(self, kind, entity):
        self._entities_of_kind(kind).append(entity)
        logger.info("added %r", entity)
        return entity

    def _entities_of_kind(self, kind):
        entities = self._entities.get(kind)
        if entities is None:
            raise StoreError("unknown kind of entity: {!r}".format(kind))
        else:
            return entities


class StoreError(GraphError):
    pass


SAMPLE_AUTHORS = (
    (1, "J. K. Rowling"),
    (2, "J. R. R. Tolkien"),
    (3, "Brent Weeks"),
)

SAMPLE_BOOKS = (
    (1, "Harry Potter and the Chamber of Secrets", 1),
    (2, "Harry Potter and the Prisoner of Azkaban", 1),
    (3, "Harry Potter and the Goblet of Fire", 1),
    (4, "The Fellowship of the Ring", 2),
    (5, "The Two Towers", 2),
    (6, "The Return of the King", 2),
    (7, "The Way of Shadows", 3),
    (8, "Beyond the Shadows", 3),
)


def create_store():
    return Store(
        authors=[Author(id=id, name=name) for id, name in SAMPLE_AUTHORS],
        books=[Book(id=id, name=name, author_id=author_id) for id, name, author_id in SAMPLE_BOOKS],
    )
