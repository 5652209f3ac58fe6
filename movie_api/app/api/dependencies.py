"""
FastAPI dependencies shared by the API routers.

The movie store is created by ``create_app`` and kept on
``app.state.store``; handlers reach it through ``get_movie_service``
rather than through a module-level global, so every application
instance (and every test) owns an isolated store.
"""

from fastapi import Request

from movie_api.app.core.store import MovieStore
from movie_api.app.services.movie_service import MovieService


def get_store(request: Request) -> MovieStore:
    """Return the store bound to the running application."""
    return request.app.state.store


def get_movie_service(request: Request) -> MovieService:
    """Build a ``MovieService`` over the application's store."""
    return MovieService(get_store(request))
