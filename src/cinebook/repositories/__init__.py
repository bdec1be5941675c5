"""Data access for the scheduling and booking services.

Repositories hold no state: every method receives the session of the unit
of work it runs in.
"""

from cinebook.repositories.booking import BookingRepository
from cinebook.repositories.hall import HallRepository
from cinebook.repositories.movie import MovieRepository
from cinebook.repositories.screening import ScreeningRepository

__all__ = ["BookingRepository", "HallRepository", "MovieRepository", "ScreeningRepository"]
