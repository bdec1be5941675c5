"""Seat validation and atomic booking creation."""

import logging
import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cinebook.database import unit_of_work
from cinebook.errors import BadRequestError, ConflictError, NotFoundError
from cinebook.models.booking import Booking, BookingStatus
from cinebook.models.screening import Screening
from cinebook.models.seat_booking import SeatBooking
from cinebook.repositories import BookingRepository, HallRepository, ScreeningRepository

logger = logging.getLogger(__name__)


def validate_seat_request(seat_ids: list[str]) -> list[str]:
    """
    Reject malformed seat selections before any database work.

    Raises:
        BadRequestError: empty selection, blank seat id or duplicated seat id
    """
    if not seat_ids:
        raise BadRequestError("No seats selected")
    if any(not isinstance(seat_id, str) or not seat_id.strip() for seat_id in seat_ids):
        raise BadRequestError("Seat ids must be non-empty strings")

    seen: set[str] = set()
    duplicates: list[str] = []
    for seat_id in seat_ids:
        if seat_id in seen and seat_id not in duplicates:
            duplicates.append(seat_id)
        seen.add(seat_id)
    if duplicates:
        raise BadRequestError(
            f"Duplicate seat ids: {', '.join(duplicates)}",
            seat_ids=duplicates,
        )
    return seat_ids


class SeatBookingGuard:
    """
    Guards seat reservations for screenings.

    Seats are pre-checked against the hall layout and existing reservations
    for a friendly error; the (screening_id, seat_id) key of the seat table
    is what actually prevents a seat being sold twice when two requests race.
    """

    def __init__(
        self,
        screenings: ScreeningRepository | None = None,
        halls: HallRepository | None = None,
        bookings: BookingRepository | None = None,
    ) -> None:
        self.screenings = screenings or ScreeningRepository()
        self.halls = halls or HallRepository()
        self.bookings = bookings or BookingRepository()

    async def check_seats_exist(
        self,
        db: AsyncSession,
        screening_id: str,
        seat_ids: list[str],
    ) -> None:
        """Raise NotFoundError unless every seat is part of the screening's hall layout."""
        screening = await self._get_screening_or_raise(db, screening_id)
        hall = await self.halls.get(db, screening.theater_id, screening.hall_id)
        if not hall:
            raise NotFoundError(
                "Hall not found for this screening",
                resource="hall",
                theater_id=screening.theater_id,
                hall_id=screening.hall_id,
            )

        valid_seats = hall.seat_ids()
        for seat_id in seat_ids:
            if seat_id not in valid_seats:
                raise NotFoundError(
                    f"Invalid seat ID: {seat_id}",
                    resource="seat",
                    seat_id=seat_id,
                )

    async def check_seats_available(
        self,
        db: AsyncSession,
        screening_id: str,
        seat_ids: list[str],
        *,
        exclude_booking_id: str | None = None,
    ) -> None:
        """Raise ConflictError if any of the seats is already reserved for the screening."""
        taken = await self.bookings.booked_seats(
            db, screening_id, seat_ids, exclude_booking_id=exclude_booking_id
        )
        if taken:
            booked = [seat.seat_id for seat in taken]
            raise ConflictError(
                f"The following seats are already booked: {', '.join(booked)}",
                seat_ids=booked,
            )

    async def create_booking_with_seats(
        self,
        user_id: str,
        screening_id: str,
        seat_ids: list[str],
        db: AsyncSession | None = None,
    ) -> Booking:
        """
        Reserve ``seat_ids`` for a user in a single transaction.

        Either the booking and all of its seat rows are written, or nothing
        is. ``seat_ids`` is expected to have passed ``validate_seat_request``.
        """
        async with unit_of_work(db) as session:
            screening = await self._get_screening_or_raise(session, screening_id)
            await self.check_seats_exist(session, screening_id, seat_ids)
            await self.check_seats_available(session, screening_id, seat_ids)

            booking = Booking(
                id=str(uuid.uuid4()),
                user_id=user_id,
                screening_id=screening_id,
                seats_number=len(seat_ids),
                total_price=round(float(screening.price) * len(seat_ids), 2),
                status=BookingStatus.PENDING.value,
            )
            seats = [
                SeatBooking(screening_id=screening_id, seat_id=seat_id, booking_id=booking.id)
                for seat_id in seat_ids
            ]
            try:
                await self.bookings.add_with_seats(session, booking, seats)
            except IntegrityError as exc:
                logger.warning(
                    f"Seat race lost for screening {screening_id}, seats {seat_ids}: {exc.orig}"
                )
                raise ConflictError(
                    "Seats are no longer available",
                    seat_ids=list(seat_ids),
                ) from exc

            logger.info(
                f"Created booking {booking.id} for user {user_id}: "
                f"{len(seat_ids)} seat(s) on screening {screening_id}"
            )
            return booking

    async def replace_seats(
        self,
        booking_id: str,
        seat_ids: list[str],
        db: AsyncSession | None = None,
    ) -> tuple[Booking, list[SeatBooking]]:
        """
        Swap the seats held by a booking, keeping price and seat count in step.

        Seats the booking already holds count as available to it.
        """
        async with unit_of_work(db) as session:
            booking = await self.bookings.get(session, booking_id)
            if not booking:
                raise NotFoundError(
                    f"Booking with id {booking_id} not found",
                    resource="booking",
                    booking_id=booking_id,
                )
            screening = await self._get_screening_or_raise(session, booking.screening_id)
            await self.check_seats_exist(session, screening.id, seat_ids)
            await self.check_seats_available(
                session, screening.id, seat_ids, exclude_booking_id=booking_id
            )

            try:
                seats = await self.bookings.replace_seats(session, booking, seat_ids)
            except IntegrityError as exc:
                logger.warning(f"Seat race lost while updating booking {booking_id}: {exc.orig}")
                raise ConflictError(
                    "Seats are no longer available",
                    seat_ids=list(seat_ids),
                ) from exc

            booking.seats_number = len(seat_ids)
            booking.total_price = round(float(screening.price) * len(seat_ids), 2)
            await session.flush()
            logger.info(f"Booking {booking_id} now holds seats {seat_ids}")
            return booking, seats

    async def _get_screening_or_raise(self, db: AsyncSession, screening_id: str) -> Screening:
        screening = await self.screenings.get(db, screening_id)
        if not screening:
            raise NotFoundError(
                "Screening not found",
                resource="screening",
                screening_id=screening_id,
            )
        return screening
