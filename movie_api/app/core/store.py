"""
In-memory movie store.

``MovieStore`` owns the mapping from movie id to record.  Every read
and write goes through a single exclusive lock, so the five operations
are mutually exclusive per store.  Records are copied on the way in and
on the way out; a caller holding a returned ``Movie`` cannot change the
stored state without going through the store again.

A store lives as long as the application that created it.  Nothing is
written to disk.
"""

import threading
from typing import Dict, List, Optional

from movie_api.app.schemas.movie import Movie


class MovieStore:
    """Thread-safe, insertion-ordered mapping of movie id to ``Movie``."""

    def __init__(self) -> None:
        self._movies: Dict[str, Movie] = {}
        self._lock = threading.Lock()

    def insert(self, movie: Movie) -> Movie:
        """Add ``movie`` or overwrite the record with the same id.

        An overwritten id keeps its original position in ``list()``.
        """
        stored = movie.model_copy()
        with self._lock:
            self._movies[stored.id] = stored
        return stored.model_copy()

    def get(self, movie_id: str) -> Optional[Movie]:
        """Return the record for ``movie_id`` or ``None`` if absent."""
        with self._lock:
            movie = self._movies.get(movie_id)
        return movie.model_copy() if movie is not None else None

    def list(self) -> List[Movie]:
        """Return a snapshot of all records in insertion order."""
        with self._lock:
            movies = list(self._movies.values())
        return [movie.model_copy() for movie in movies]

    def update(self, movie_id: str, movie: Movie) -> Optional[Movie]:
        """Replace the record at ``movie_id`` if it exists.

        The stored record always carries ``movie_id``, whatever id
        ``movie`` holds.  Returns ``None`` without creating anything when
        the id is unknown.
        """
        stored = movie.model_copy(update={"id": movie_id})
        with self._lock:
            if movie_id not in self._movies:
                return None
            self._movies[movie_id] = stored
        return stored.model_copy()

    def delete(self, movie_id: str) -> bool:
        """Remove the record at ``movie_id``; ``False`` if it was absent."""
        with self._lock:
            return self._movies.pop(movie_id, None) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    def __contains__(self, movie_id: object) -> bool:
        with self._lock:
            return movie_id in self._movies
