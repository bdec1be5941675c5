"""Screening persistence."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from cinebook.models.screening import Screening


class ScreeningRepository:
    async def get(self, db: AsyncSession, screening_id: str) -> Screening | None:
        return await db.get(Screening, screening_id)

    async def list_for_hall(
        self,
        db: AsyncSession,
        theater_id: str,
        hall_id: str,
        *,
        exclude_id: str | None = None,
    ) -> list[Screening]:
        """All screenings of a hall with their movie loaded, ordered by start time."""
        stmt = (
            select(Screening)
            .options(selectinload(Screening.movie))
            .where(Screening.theater_id == theater_id, Screening.hall_id == hall_id)
            .order_by(Screening.start_time)
        )
        if exclude_id is not None:
            stmt = stmt.where(Screening.id != exclude_id)
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def add(self, db: AsyncSession, screening: Screening) -> Screening:
        db.add(screening)
        await db.flush()
        return screening

    async def delete(self, db: AsyncSession, screening: Screening) -> None:
        await db.delete(screening)
        await db.flush()
