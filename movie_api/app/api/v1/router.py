"""
Top-level router for version 1 of the API.

This router aggregates domain-specific routers under a unified prefix.
When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import movies

router = APIRouter()

# Movies are served under the singular ``/movie`` that existing clients
# use, and under the plural ``/movies``.  Both prefixes expose
# identical endpoints backed by the same store.
router.include_router(movies.router, prefix="/movie", tags=["movies"])
router.include_router(movies.router, prefix="/movies", tags=["movies"])
