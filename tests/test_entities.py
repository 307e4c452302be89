from precisely import assert_that, contains_exactly, equal_to, has_attrs, is_sequence
import pytest

from booksgraph import GraphError
from booksgraph.entities import Author, Book, create_store, Store, StoreError


def test_list_all_returns_entities_in_insertion_order():
    store = Store(
        authors=[Author(id=1, name="Ursula K. Le Guin"), Author(id=2, name="Iain M. Banks")],
    )

    result = store.list_all(Author)

    assert_that(result, is_sequence(
        has_attrs(id=1, name="Ursula K. Le Guin"),
        has_attrs(id=2, name="Iain M. Banks"),
    ))


def test_list_all_returns_copy_of_entities():
    store = Store(authors=[Author(id=1, name="Ursula K. Le Guin")])

    store.list_all(Author).append(Author(id=2, name="Iain M. Banks"))

    assert_that(store.list_all(Author), is_sequence(has_attrs(id=1)))


def test_find_by_id_returns_matching_entity():
    store = Store(
        books=[
            Book(id=1, name="A Wizard of Earthsea", author_id=1),
            Book(id=2, name="Consider Phlebas", author_id=2),
        ],
    )

    result = store.find_by_id(Book, 2)

    assert_that(result, equal_to(Book(id=2, name="Consider Phlebas", author_id=2)))


def test_find_by_id_returns_first_match_when_ids_are_duplicated():
    store = Store(
        authors=[Author(id=1, name="First"), Author(id=1, name="Second")],
    )

    result = store.find_by_id(Author, 1)

    assert_that(result, has_attrs(name="First"))


def test_find_by_id_returns_none_when_there_is_no_match():
    store = Store(authors=[Author(id=1, name="Ursula K. Le Guin")])

    result = store.find_by_id(Author, 42)

    assert_that(result, equal_to(None))


def test_find_all_returns_matching_entities_in_insertion_order():
    store = Store(
        books=[
            Book(id=1, name="A Wizard of Earthsea", author_id=1),
            Book(id=2, name="Consider Phlebas", author_id=2),
            Book(id=3, name="The Tombs of Atuan", author_id=1),
        ],
    )

    result = store.find_all(Book, lambda book: book.author_id == 1)

    assert_that(result, is_sequence(
        has_attrs(name="A Wizard of Earthsea"),
        has_attrs(name="The Tombs of Atuan"),
    ))


def test_next_id_is_one_more_than_number_of_entities():
    store = Store(authors=[Author(id=1, name="Ursula K. Le Guin")])

    assert_that(store.next_id(Author), equal_to(2))
    assert_that(store.next_id(Book), equal_to(1))


def test_append_adds_entity_to_end_of_entities():
    store = Store(authors=[Author(id=1, name="Ursula K. Le Guin")])

    result = store.append(Author, Author(id=2, name="Iain M. Banks"))

    assert_that(result, has_attrs(id=2, name="Iain M. Banks"))
    assert_that(store.list_all(Author), is_sequence(
        has_attrs(id=1),
        has_attrs(id=2),
    ))


def test_unknown_kind_of_entity_raises_store_error():
    store = Store()

    error = pytest.raises(StoreError, lambda: store.list_all(str))

    assert_that(str(error.value), equal_to("unknown kind of entity: <class 'str'>"))


def test_store_error_is_graph_error():
    assert issubclass(StoreError, GraphError)


def test_created_store_is_seeded_with_sample_authors_and_books():
    store = create_store()

    assert_that(store.list_all(Author), is_sequence(
        Author(id=1, name="J. K. Rowling"),
        Author(id=2, name="J. R. R. Tolkien"),
        Author(id=3, name="Brent Weeks"),
    ))
    assert_that(store.list_all(Book), contains_exactly(
        Book(id=1, name="Harry Potter and the Chamber of Secrets", author_id=1),
        Book(id=2, name="Harry Potter and the Prisoner of Azkaban", author_id=1),
        Book(id=3, name="Harry Potter and the Goblet of Fire", author_id=1),
        Book(id=4, name="The Fellowship of the Ring", author_id=2),
        Book(id=5, name="The Two Towers", author_id=2),
        Book(id=6, name="The Return of the King", author_id=2),
        Book(id=7, name="The Way of Shadows", author_id=3),
        Book(id=8, name="Beyond the Shadows", author_id=3),
    ))


def test_created_stores_do_not_share_entities():
    first = create_store()
    second = create_store()

    first.append(Author, Author(id=4, name="Robin Hobb"))

    assert_that(len(first.list_all(Author)), equal_to(4))
    assert_that(len(second.list_all(Author)), equal_to(3))
