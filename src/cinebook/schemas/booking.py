"""Pydantic schemas for bookings and seat reservations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BookingCreate(BaseModel):
    """
    Booking request.

    Seat ids are checked for emptiness and duplicates by the seat booking
    guard before any database access.
    """

    user_id: str = Field(min_length=1)
    screening_id: str = Field(min_length=1)
    seat_ids: list[str]


class BookingSeatsUpdate(BaseModel):
    seat_ids: list[str]


class SeatBookingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    screening_id: str
    seat_id: str
    booking_id: str


class BookingResponse(BaseModel):
    """Booking response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    screening_id: str
    seats_number: int
    total_price: float
    status: str
    booking_date: datetime | None = None


class BookingWithSeatsResponse(BaseModel):
    """Booking together with the seats it reserved."""

    booking: BookingResponse
    seats: list[SeatBookingResponse]
    total_seats: int
