"""Hall lookups."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinebook.models.hall import Hall


class HallRepository:
    async def get(
        self,
        db: AsyncSession,
        theater_id: str,
        hall_id: str,
        *,
        for_update: bool = False,
    ) -> Hall | None:
        """
        Fetch a hall by its composite key.

        With ``for_update`` the row is locked until the transaction ends, which
        serialises concurrent schedule changes for the same hall.
        """
        stmt = select(Hall).where(Hall.theater_id == theater_id, Hall.hall_id == hall_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await db.execute(stmt)
        return result.scalar_one_or_none()
