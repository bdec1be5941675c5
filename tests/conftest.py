"""Shared test fixtures."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI

from cinebook.api.errors import register_exception_handlers
from cinebook.api.routes import bookings, health, movies, screenings, theaters


@pytest.fixture
def test_app() -> FastAPI:
    """FastAPI app with the API routers and error handlers but no admin mount."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(health.router)
    app.include_router(movies.router, prefix="/api")
    app.include_router(theaters.router, prefix="/api")
    app.include_router(screenings.router, prefix="/api")
    app.include_router(bookings.router, prefix="/api")
    return app


@pytest.fixture
def db() -> AsyncMock:
    """Mock AsyncSession; ``add`` is synchronous on the real session."""
    session = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    return session
