"""FastAPI dependency providers for the business services."""

from cinebook.services.booking_service import BookingService
from cinebook.services.screening_scheduler import ScreeningScheduler
from cinebook.services.seat_booking_guard import SeatBookingGuard


def get_screening_scheduler() -> ScreeningScheduler:
    return ScreeningScheduler()


def get_seat_booking_guard() -> SeatBookingGuard:
    return SeatBookingGuard()


def get_booking_service() -> BookingService:
    return BookingService()
