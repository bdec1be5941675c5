"""Pydantic schemas for API requests and responses."""

from cinebook.schemas.booking import (
    BookingCreate,
    BookingResponse,
    BookingSeatsUpdate,
    BookingWithSeatsResponse,
    SeatBookingResponse,
)
from cinebook.schemas.movie import MovieCreate, MovieResponse, MovieUpdate
from cinebook.schemas.screening import (
    ScreeningCreate,
    ScreeningResponse,
    ScreeningSeatsResponse,
    ScreeningUpdate,
)
from cinebook.schemas.theater import (
    HallCreate,
    HallResponse,
    HallUpdate,
    TheaterCreate,
    TheaterResponse,
    TheaterUpdate,
)

__all__ = [
    "BookingCreate",
    "BookingResponse",
    "BookingSeatsUpdate",
    "BookingWithSeatsResponse",
    "SeatBookingResponse",
    "MovieCreate",
    "MovieResponse",
    "MovieUpdate",
    "ScreeningCreate",
    "ScreeningResponse",
    "ScreeningSeatsResponse",
    "ScreeningUpdate",
    "HallCreate",
    "HallResponse",
    "HallUpdate",
    "TheaterCreate",
    "TheaterResponse",
    "TheaterUpdate",
]
