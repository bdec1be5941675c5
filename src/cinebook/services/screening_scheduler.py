"""Screening scheduling with hall overlap detection."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from cinebook.config import settings
from cinebook.database import unit_of_work
from cinebook.errors import BadRequestError, ConflictError, NotFoundError
from cinebook.models.hall import Hall
from cinebook.models.movie import Movie
from cinebook.models.screening import Screening
from cinebook.repositories import HallRepository, MovieRepository, ScreeningRepository
from cinebook.schemas.screening import ScreeningCreate, ScreeningUpdate

logger = logging.getLogger(__name__)


@dataclass
class ScreeningCandidate:
    """A screening slot to be checked against a hall's schedule."""

    movie_id: str
    theater_id: str
    hall_id: str
    start_time: datetime


def overlaps(a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime) -> bool:
    """
    Half-open interval intersection of [a_start, a_end) and [b_start, b_end).

    Intervals that only touch (one ends exactly when the other starts) do not
    overlap.
    """
    return a_start < b_end and b_start < a_end


def screening_window(
    start_time: datetime,
    duration_minutes: int,
    buffer_minutes: int = 0,
) -> tuple[datetime, datetime]:
    """Return the [start, end) slot a screening occupies in its hall."""
    if start_time.tzinfo is None:
        start_time = start_time.replace(tzinfo=timezone.utc)
    return start_time, start_time + timedelta(minutes=duration_minutes + buffer_minutes)


class ScreeningScheduler:
    """
    Creates, moves and removes screenings while keeping each hall's schedule
    free of overlapping slots.

    A slot lasts the movie's runtime plus the configured cleaning buffer.
    """

    def __init__(
        self,
        movies: MovieRepository | None = None,
        halls: HallRepository | None = None,
        screenings: ScreeningRepository | None = None,
        cleaning_buffer_minutes: int | None = None,
    ) -> None:
        self.movies = movies or MovieRepository()
        self.halls = halls or HallRepository()
        self.screenings = screenings or ScreeningRepository()
        self.cleaning_buffer_minutes = (
            settings.cleaning_buffer_minutes
            if cleaning_buffer_minutes is None
            else cleaning_buffer_minutes
        )

    async def get_screening(self, screening_id: str, db: AsyncSession | None = None) -> Screening:
        async with unit_of_work(db) as session:
            return await self._get_screening_or_raise(session, screening_id)

    async def validate_no_overlap(
        self,
        db: AsyncSession,
        candidate: ScreeningCandidate,
        excluding_screening_id: str | None = None,
    ) -> Movie:
        """
        Check that ``candidate`` fits in its hall's schedule.

        The hall row is locked for the rest of the transaction so that two
        concurrent writers cannot both pass the check for the same hall.

        Returns:
            The candidate's movie

        Raises:
            NotFoundError: movie or hall does not exist
            BadRequestError: the movie has no positive duration
            ConflictError: the slot overlaps another screening in the hall
        """
        movie = await self._get_movie_or_raise(db, candidate.movie_id)
        await self._get_hall_or_raise(db, candidate.theater_id, candidate.hall_id)

        if not isinstance(movie.duration_minutes, int) or movie.duration_minutes < 1:
            raise BadRequestError(
                f"Movie {movie.id} has an invalid duration",
                movie_id=movie.id,
                duration_minutes=movie.duration_minutes,
            )

        new_start, new_end = screening_window(
            candidate.start_time, movie.duration_minutes, self.cleaning_buffer_minutes
        )

        existing = await self.screenings.list_for_hall(
            db,
            candidate.theater_id,
            candidate.hall_id,
            exclude_id=excluding_screening_id,
        )
        for screening in existing:
            start, end = screening_window(
                screening.start_time,
                screening.movie.duration_minutes,
                self.cleaning_buffer_minutes,
            )
            if overlaps(new_start, new_end, start, end):
                logger.warning(
                    f"Schedule conflict in hall {candidate.theater_id}/{candidate.hall_id}: "
                    f"{new_start.isoformat()} overlaps screening {screening.id}"
                )
                raise ConflictError(
                    f"Hall is occupied: overlaps with screening '{screening.movie.title}' "
                    f"from {start.isoformat()} to {end.isoformat()}",
                    screening_id=screening.id,
                    start_time=start.isoformat(),
                    end_time=end.isoformat(),
                )

        return movie

    async def create_screening(
        self,
        payload: ScreeningCreate,
        db: AsyncSession | None = None,
    ) -> Screening:
        """Schedule a new screening after checking the hall is free."""
        async with unit_of_work(db) as session:
            await self.validate_no_overlap(
                session,
                ScreeningCandidate(
                    movie_id=payload.movie_id,
                    theater_id=payload.theater_id,
                    hall_id=payload.hall_id,
                    start_time=payload.start_time,
                ),
            )
            screening = await self.screenings.add(session, Screening(**payload.model_dump()))
            logger.info(
                f"Scheduled screening {screening.id} in {screening.theater_id}/{screening.hall_id} "
                f"at {screening.start_time.isoformat()}"
            )
            return screening

    async def update_screening(
        self,
        screening_id: str,
        update: ScreeningUpdate,
        db: AsyncSession | None = None,
    ) -> Screening:
        """
        Apply a partial update, re-validating the slot.

        Fields missing from the update keep their current values; the
        screening's own slot is ignored when looking for overlaps.
        """
        async with unit_of_work(db) as session:
            screening = await self._get_screening_or_raise(session, screening_id)
            changes = update.model_dump(exclude_unset=True, exclude_none=True)

            candidate = ScreeningCandidate(
                movie_id=changes.get("movie_id", screening.movie_id),
                theater_id=changes.get("theater_id", screening.theater_id),
                hall_id=changes.get("hall_id", screening.hall_id),
                start_time=changes.get("start_time", screening.start_time),
            )
            await self.validate_no_overlap(session, candidate, excluding_screening_id=screening_id)

            for field, value in changes.items():
                setattr(screening, field, value)
            await session.flush()
            logger.info(f"Updated screening {screening_id}: {sorted(changes)}")
            return screening

    async def delete_screening(self, screening_id: str, db: AsyncSession | None = None) -> None:
        async with unit_of_work(db) as session:
            screening = await self._get_screening_or_raise(session, screening_id)
            await self.screenings.delete(session, screening)
            logger.info(f"Deleted screening {screening_id}")

    async def _get_screening_or_raise(self, db: AsyncSession, screening_id: str) -> Screening:
        screening = await self.screenings.get(db, screening_id)
        if not screening:
            raise NotFoundError(
                f"Screening with id {screening_id} not found",
                resource="screening",
                screening_id=screening_id,
            )
        return screening

    async def _get_movie_or_raise(self, db: AsyncSession, movie_id: str) -> Movie:
        movie = await self.movies.get(db, movie_id)
        if not movie:
            raise NotFoundError("Movie not found", resource="movie", movie_id=movie_id)
        return movie

    async def _get_hall_or_raise(self, db: AsyncSession, theater_id: str, hall_id: str) -> Hall:
        hall = await self.halls.get(db, theater_id, hall_id, for_update=True)
        if not hall:
            raise NotFoundError(
                "Hall not found",
                resource="hall",
                theater_id=theater_id,
                hall_id=hall_id,
            )
        return hall
