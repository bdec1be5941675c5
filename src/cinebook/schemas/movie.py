"""Pydantic schemas for movie data."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class MovieBase(BaseModel):
    """Base movie schema with common fields."""

    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    genre: str | None = None
    director: str | None = None
    age_rating: str | None = None
    release_date: date | None = None
    duration_minutes: int = Field(gt=0)
    poster_url: str | None = None
    recommended: bool = False


class MovieCreate(MovieBase):
    pass


class MovieUpdate(BaseModel):
    """Partial movie update; only the fields sent are changed."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    genre: str | None = None
    director: str | None = None
    age_rating: str | None = None
    release_date: date | None = None
    duration_minutes: int | None = Field(default=None, gt=0)
    poster_url: str | None = None
    recommended: bool | None = None


class MovieResponse(MovieBase):
    """Movie response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
