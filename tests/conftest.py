"""Shared fixtures for the Movie API tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from movie_api.app.core.store import MovieStore
from movie_api.app.main import create_app
from movie_api.app.schemas.movie import Movie


@pytest.fixture()
def store() -> MovieStore:
    """Return a fresh, empty store."""
    return MovieStore()


@pytest.fixture()
def client(store):
    """Return a TestClient for an app backed by the ``store`` fixture."""
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def shawshank() -> Movie:
    return Movie(id="1", name="Shawshank", year=1994, was_good=True)
