"""Tests for the in-memory movie store."""

from __future__ import annotations

import threading

from movie_api.app.core.store import MovieStore
from movie_api.app.schemas.movie import Movie


def _movie(movie_id: str, **overrides) -> Movie:
    fields = {"id": movie_id, "name": f"Movie {movie_id}", "year": 2000, "was_good": False}
    fields.update(overrides)
    return Movie(**fields)


def test_get_after_insert_returns_equal_record(store, shawshank):
    """A stored movie is returned unchanged by ``get``."""
    returned = store.insert(shawshank)

    assert returned == shawshank
    assert store.get("1") == shawshank


def test_get_on_empty_store_is_absent(store):
    """A fresh store knows no ids."""
    for movie_id in ("1", "999", "", "shawshank"):
        assert store.get(movie_id) is None
    assert len(store) == 0


def test_update_unknown_id_does_not_create(store):
    """Updating an id that was never inserted reports absence."""
    assert store.update("42", _movie("42")) is None
    assert "42" not in store
    assert all(movie.id != "42" for movie in store.list())


def test_update_replaces_all_fields_and_keeps_path_id(store):
    """The stored record takes every field from the payload except the id."""
    store.insert(_movie("1", name="Old Name", year=2020, was_good=False))

    updated = store.update("1", _movie("other", name="New Name", year=2024, was_good=True))

    assert updated == Movie(id="1", name="New Name", year=2024, was_good=True)
    assert store.get("1") == updated
    assert "other" not in store
    assert len(store) == 1


def test_delete_is_terminal(store, shawshank):
    """After a delete the id is gone and a second delete reports absence."""
    store.insert(shawshank)

    assert store.delete("1") is True
    assert store.get("1") is None
    assert store.delete("1") is False


def test_list_reflects_inserts_in_insertion_order(store):
    """``list`` returns every record, ordered by first insertion."""
    first = _movie("2", name="Second id inserted first")
    second = _movie("1", name="First id inserted second")
    store.insert(first)
    store.insert(second)

    assert store.list() == [first, second]
    assert store.list() == store.list()


def test_insert_overwrites_existing_id(store):
    """Inserting an existing id replaces the record in place."""
    store.insert(_movie("1", year=1994))
    store.insert(_movie("2"))
    store.insert(_movie("1", year=2000))

    movies = store.list()
    assert [movie.id for movie in movies] == ["1", "2"]
    assert store.get("1").year == 2000


def test_list_is_a_snapshot(store):
    """Mutating the store after ``list`` does not change the returned list."""
    store.insert(_movie("1"))
    snapshot = store.list()

    store.insert(_movie("2"))
    store.delete("1")

    assert [movie.id for movie in snapshot] == ["1"]


def test_returned_records_are_copies(store, shawshank):
    """Changing a returned model leaves the stored record untouched."""
    store.insert(shawshank)
    shawshank.name = "Changed after insert"

    fetched = store.get("1")
    fetched.year = 1
    store.list()[0].was_good = False

    assert store.get("1") == Movie(id="1", name="Shawshank", year=1994, was_good=True)


def test_stores_are_isolated():
    """Two stores never share records."""
    first = MovieStore()
    second = MovieStore()
    first.insert(_movie("1"))

    assert second.get("1") is None


def test_concurrent_writers_keep_one_record_per_id():
    """Parallel inserts, updates and deletes leave a consistent mapping."""
    store = MovieStore()
    barrier = threading.Barrier(8)

    def worker(offset: int) -> None:
        barrier.wait()
        for i in range(200):
            movie_id = str(i % 50)
            store.insert(_movie(movie_id, year=offset))
            store.update(movie_id, _movie(movie_id, year=offset + 1))
            if i % 3 == 0:
                store.delete(movie_id)

    threads = [threading.Thread(target=worker, args=(n * 10,)) for n in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    movies = store.list()
    ids = [movie.id for movie in movies]
    assert len(ids) == len(set(ids)) == len(store)
