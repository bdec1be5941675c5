"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cinebook.admin.app import setup_admin
from cinebook.api.errors import register_exception_handlers
from cinebook.api.routes import bookings, health, movies, screenings, theaters
from cinebook.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="CineBook API",
    description="Cinema scheduling and seat booking backend",
    version="0.1.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(movies.router, prefix="/api", tags=["movies"])
app.include_router(theaters.router, prefix="/api", tags=["theaters"])
app.include_router(screenings.router, prefix="/api", tags=["screenings"])
app.include_router(bookings.router, prefix="/api", tags=["bookings"])

# Back office
setup_admin(app)
