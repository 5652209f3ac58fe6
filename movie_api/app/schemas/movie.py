"""
Pydantic models for movie data.

``Movie`` is both the request body of the create operation and the
response body of every operation that returns a record.  The update
operation takes ``MovieUpdate``, whose ``id`` is optional because the
identifier always comes from the request path.

Every field validates strictly: a year sent as a string, a float or a
boolean, or a flag sent as ``"yes"`` or ``1``, is rejected rather than
converted.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Movie(BaseModel):
    """A stored movie record keyed by ``id``."""

    id: str = Field(..., min_length=1, strict=True, examples=["1"])
    name: str = Field(..., strict=True, examples=["The Shawshank Redemption"])
    # Years are stored as unsigned 16-bit values.
    year: int = Field(..., ge=0, le=65535, strict=True, examples=[1994])
    was_good: bool = Field(..., strict=True, examples=[True])

    model_config = {
        "from_attributes": True,
    }


class MovieUpdate(BaseModel):
    """Schema for replacing a movie.

    Every field of the record is replaced.  An ``id`` in the body is
    accepted for symmetry with ``Movie`` but ignored.
    """

    id: Optional[str] = Field(None, strict=True)
    name: str = Field(..., strict=True)
    year: int = Field(..., ge=0, le=65535, strict=True)
    was_good: bool = Field(..., strict=True)

    def to_movie(self, movie_id: str) -> Movie:
        """Build the replacement record for ``movie_id``."""
        return Movie(id=movie_id, name=self.name, year=self.year, was_good=self.was_good)
