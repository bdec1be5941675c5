"""Booking API endpoints."""

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinebook.api.deps import get_booking_service, get_seat_booking_guard
from cinebook.database import get_db
from cinebook.models.booking import Booking, BookingStatus
from cinebook.schemas.booking import (
    BookingCreate,
    BookingResponse,
    BookingSeatsUpdate,
    BookingWithSeatsResponse,
    SeatBookingResponse,
)
from cinebook.services.booking_service import BookingService
from cinebook.services.seat_booking_guard import SeatBookingGuard, validate_seat_request

router = APIRouter()


@router.post("/bookings", response_model=BookingWithSeatsResponse, status_code=201)
async def create_booking(
    payload: BookingCreate,
    db: AsyncSession = Depends(get_db),
    guard: SeatBookingGuard = Depends(get_seat_booking_guard),
) -> BookingWithSeatsResponse:
    """
    Book seats for a screening.

    Responds 400 for an empty or duplicated seat selection, 404 for an
    unknown screening or seat and 409 when any seat is already taken. On
    error nothing is reserved.
    """
    seat_ids = validate_seat_request(payload.seat_ids)
    booking = await guard.create_booking_with_seats(
        payload.user_id, payload.screening_id, seat_ids, db=db
    )
    seats = [
        SeatBookingResponse(screening_id=booking.screening_id, seat_id=seat_id, booking_id=booking.id)
        for seat_id in seat_ids
    ]
    return BookingWithSeatsResponse(
        booking=BookingResponse.model_validate(booking),
        seats=seats,
        total_seats=len(seats),
    )


@router.get("/bookings", response_model=list[BookingResponse])
async def list_bookings(
    user_id: str | None = Query(None),
    screening_id: str | None = Query(None),
    status: BookingStatus | None = Query(None),
    db: AsyncSession = Depends(get_db),
) -> list[Booking]:
    """List bookings, newest first."""
    stmt = select(Booking).order_by(Booking.booking_date.desc())
    if user_id:
        stmt = stmt.where(Booking.user_id == user_id)
    if screening_id:
        stmt = stmt.where(Booking.screening_id == screening_id)
    if status:
        stmt = stmt.where(Booking.status == status.value)
    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.get("/bookings/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: str,
    db: AsyncSession = Depends(get_db),
    service: BookingService = Depends(get_booking_service),
) -> Booking:
    return await service.get_booking(booking_id, db=db)


@router.patch("/bookings/{booking_id}/seats", response_model=BookingWithSeatsResponse)
async def update_booking_seats(
    booking_id: str,
    payload: BookingSeatsUpdate,
    db: AsyncSession = Depends(get_db),
    guard: SeatBookingGuard = Depends(get_seat_booking_guard),
) -> BookingWithSeatsResponse:
    seat_ids = validate_seat_request(payload.seat_ids)
    booking, seats = await guard.replace_seats(booking_id, seat_ids, db=db)
    return BookingWithSeatsResponse(
        booking=BookingResponse.model_validate(booking),
        seats=[SeatBookingResponse.model_validate(seat) for seat in seats],
        total_seats=len(seats),
    )


@router.post("/bookings/{booking_id}/use", response_model=BookingResponse)
async def mark_booking_used(
    booking_id: str,
    db: AsyncSession = Depends(get_db),
    service: BookingService = Depends(get_booking_service),
) -> Booking:
    return await service.mark_as_used(booking_id, db=db)


@router.post("/bookings/{booking_id}/cancel", response_model=BookingResponse)
async def cancel_booking(
    booking_id: str,
    db: AsyncSession = Depends(get_db),
    service: BookingService = Depends(get_booking_service),
) -> Booking:
    return await service.cancel(booking_id, db=db)


@router.delete("/bookings/{booking_id}", status_code=204)
async def delete_booking(
    booking_id: str,
    db: AsyncSession = Depends(get_db),
    service: BookingService = Depends(get_booking_service),
) -> Response:
    await service.delete_booking(booking_id, db=db)
    return Response(status_code=204)
