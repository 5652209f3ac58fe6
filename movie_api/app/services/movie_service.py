"""
Service layer for movies.

``MovieService`` maps the five movie operations onto a ``MovieStore``
handed to it at construction time.  It adds no business rules beyond
presence and absence: a missing record comes back as ``None`` (or
``False`` for deletes) and the API layer decides how to render it.
Mutations are logged at INFO level, misses at DEBUG.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from movie_api.app.core.store import MovieStore
from movie_api.app.schemas.movie import Movie, MovieUpdate

logger = logging.getLogger(__name__)


class MovieService:
    """Service class for managing movies held in a ``MovieStore``."""

    def __init__(self, store: MovieStore) -> None:
        self.store = store

    async def create_movie(self, data: Movie) -> Movie:
        """Store ``data`` and return the stored record.

        Creating a movie whose id already exists replaces the existing
        record.
        """
        movie = self.store.insert(data)
        logger.info("Stored movie %s", movie.id)
        return movie

    async def list_movies(self) -> List[Movie]:
        """Return every stored movie in insertion order."""
        return self.store.list()

    async def get_movie(self, movie_id: str) -> Optional[Movie]:
        """Retrieve a single movie by its id."""
        movie = self.store.get(movie_id)
        if movie is None:
            logger.debug("Movie %s not found", movie_id)
        return movie

    async def update_movie(self, movie_id: str, data: MovieUpdate) -> Optional[Movie]:
        """Replace an existing movie.

        Returns the updated movie or ``None`` if the record does not
        exist, in which case nothing is created.
        """
        movie = self.store.update(movie_id, data.to_movie(movie_id))
        if movie is None:
            logger.debug("Movie %s not found for update", movie_id)
            return None
        logger.info("Updated movie %s", movie_id)
        return movie

    async def delete_movie(self, movie_id: str) -> bool:
        """Delete a movie by id.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        deleted = self.store.delete(movie_id)
        if deleted:
            logger.info("Deleted movie %s", movie_id)
        else:
            logger.debug("Movie %s not found for delete", movie_id)
        return deleted
