"""Database connection, session management and unit of work."""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from cinebook.config import settings

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    future=True,
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for FastAPI to provide database sessions.

    The request's work is committed when the endpoint returns and rolled back
    if it raises.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def unit_of_work(db: AsyncSession | None = None) -> AsyncIterator[AsyncSession]:
    """
    Run a block of reads and writes as one transaction.

    When ``db`` is given the caller owns the transaction and the session is
    yielded as-is, so several service calls can share one atomic unit.
    Otherwise a new session is opened, committed on success and rolled back
    on any exception.
    """
    if db is not None:
        yield db
        return

    async with AsyncSessionLocal() as session:
        async with session.begin():
            yield session
