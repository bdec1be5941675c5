"""Movie lookups."""

from sqlalchemy.ext.asyncio import AsyncSession

from cinebook.models.movie import Movie


class MovieRepository:
    async def get(self, db: AsyncSession, movie_id: str) -> Movie | None:
        return await db.get(Movie, movie_id)
