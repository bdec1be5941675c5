"""Movie API endpoints."""

import logging

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinebook.database import get_db
from cinebook.errors import NotFoundError
from cinebook.models.movie import Movie
from cinebook.schemas.movie import MovieCreate, MovieResponse, MovieUpdate

logger = logging.getLogger(__name__)
router = APIRouter()


async def _get_movie_or_404(db: AsyncSession, movie_id: str) -> Movie:
    movie = await db.get(Movie, movie_id)
    if not movie:
        raise NotFoundError(f"Movie with id {movie_id} not found", resource="movie", movie_id=movie_id)
    return movie


@router.post("/movies", response_model=MovieResponse, status_code=201)
async def create_movie(payload: MovieCreate, db: AsyncSession = Depends(get_db)) -> Movie:
    movie = Movie(**payload.model_dump())
    db.add(movie)
    await db.flush()
    logger.info(f"Created movie {movie.id} ({movie.title})")
    return movie


@router.get("/movies", response_model=list[MovieResponse])
async def list_movies(
    q: str | None = Query(None, description="Search in title, genre and director"),
    recommended: bool | None = Query(None, description="Only recommended movies"),
    db: AsyncSession = Depends(get_db),
) -> list[Movie]:
    """List movies ordered by title, optionally filtered."""
    stmt = select(Movie).order_by(Movie.title)
    if q:
        pattern = f"%{q.strip()}%"
        stmt = stmt.where(
            Movie.title.ilike(pattern) | Movie.genre.ilike(pattern) | Movie.director.ilike(pattern)
        )
    if recommended is not None:
        stmt = stmt.where(Movie.recommended.is_(recommended))
    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.get("/movies/{movie_id}", response_model=MovieResponse)
async def get_movie(movie_id: str, db: AsyncSession = Depends(get_db)) -> Movie:
    return await _get_movie_or_404(db, movie_id)


@router.patch("/movies/{movie_id}", response_model=MovieResponse)
async def update_movie(
    movie_id: str,
    update: MovieUpdate,
    db: AsyncSession = Depends(get_db),
) -> Movie:
    movie = await _get_movie_or_404(db, movie_id)
    for field, value in update.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(movie, field, value)
    await db.flush()
    return movie


@router.delete("/movies/{movie_id}", status_code=204)
async def delete_movie(movie_id: str, db: AsyncSession = Depends(get_db)) -> Response:
    movie = await _get_movie_or_404(db, movie_id)
    await db.delete(movie)
    logger.info(f"Deleted movie {movie_id}")
    return Response(status_code=204)
