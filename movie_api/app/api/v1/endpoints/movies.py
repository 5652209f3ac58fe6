"""
Movie endpoints for API v1.

These routes expose a CRUD API over the in-memory movie store.  Lookups
by id that find nothing answer with HTTP 404 and the JSON body
``{"detail": "movie not found"}``, the FastAPI error shape.  Older
clients of this API received the bare string ``"movie not found"``, and
an empty body for a failed delete; the status codes are unchanged.
Malformed bodies are rejected by FastAPI with HTTP 422 before reaching
the service.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from movie_api.app.api.dependencies import get_movie_service
from movie_api.app.schemas.movie import Movie, MovieUpdate
from movie_api.app.services.movie_service import MovieService

MOVIE_NOT_FOUND = "movie not found"

router = APIRouter()


@router.get("", response_model=List[Movie])
async def list_movies(service: MovieService = Depends(get_movie_service)) -> List[Movie]:
    """Return all movies in insertion order (possibly an empty list)."""
    return await service.list_movies()


@router.post("", response_model=Movie, status_code=status.HTTP_201_CREATED)
async def create_movie(
    movie_in: Movie,
    service: MovieService = Depends(get_movie_service),
) -> Movie:
    """Create a movie.

    A movie posted with an id that is already stored replaces the
    existing record.
    """
    return await service.create_movie(movie_in)


@router.get("/{movie_id}", response_model=Movie)
async def get_movie(
    movie_id: str,
    service: MovieService = Depends(get_movie_service),
) -> Movie:
    """Retrieve a single movie by id.

    Returns HTTP 404 if the movie is not found.
    """
    movie = await service.get_movie(movie_id)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MOVIE_NOT_FOUND)
    return movie


@router.put("/{movie_id}", response_model=Movie)
async def update_movie(
    movie_id: str,
    movie_in: MovieUpdate,
    service: MovieService = Depends(get_movie_service),
) -> Movie:
    """Replace an existing movie; the id in the path wins over the body."""
    movie = await service.update_movie(movie_id, movie_in)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MOVIE_NOT_FOUND)
    return movie


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie(
    movie_id: str,
    service: MovieService = Depends(get_movie_service),
) -> Response:
    """Delete a movie."""
    deleted = await service.delete_movie(movie_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MOVIE_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
