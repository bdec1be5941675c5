"""SQLAlchemy ORM models."""

from cinebook.models.base import Base
from cinebook.models.booking import Booking, BookingStatus
from cinebook.models.hall import Hall
from cinebook.models.movie import Movie
from cinebook.models.screening import SCREENING_QUALITIES, Screening
from cinebook.models.seat_booking import SeatBooking
from cinebook.models.theater import Theater

__all__ = [
    "Base",
    "Booking",
    "BookingStatus",
    "Hall",
    "Movie",
    "SCREENING_QUALITIES",
    "Screening",
    "SeatBooking",
    "Theater",
]
