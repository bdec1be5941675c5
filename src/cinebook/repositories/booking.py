"""Booking and seat reservation persistence."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinebook.models.booking import Booking
from cinebook.models.seat_booking import SeatBooking


class BookingRepository:
    async def get(self, db: AsyncSession, booking_id: str) -> Booking | None:
        return await db.get(Booking, booking_id)

    async def booked_seats(
        self,
        db: AsyncSession,
        screening_id: str,
        seat_ids: list[str] | None = None,
        *,
        exclude_booking_id: str | None = None,
    ) -> list[SeatBooking]:
        """
        Seat rows already reserved for a screening.

        Restricted to ``seat_ids`` when given, and ignoring the seats held by
        ``exclude_booking_id``.
        """
        stmt = select(SeatBooking).where(SeatBooking.screening_id == screening_id)
        if seat_ids is not None:
            stmt = stmt.where(SeatBooking.seat_id.in_(seat_ids))
        if exclude_booking_id is not None:
            stmt = stmt.where(SeatBooking.booking_id != exclude_booking_id)
        result = await db.execute(stmt.order_by(SeatBooking.seat_id))
        return list(result.scalars().all())

    async def seats_for_booking(self, db: AsyncSession, booking_id: str) -> list[SeatBooking]:
        stmt = (
            select(SeatBooking)
            .where(SeatBooking.booking_id == booking_id)
            .order_by(SeatBooking.seat_id)
        )
        result = await db.execute(stmt)
        return list(result.scalars().all())

    async def add_with_seats(
        self,
        db: AsyncSession,
        booking: Booking,
        seats: list[SeatBooking],
    ) -> Booking:
        """
        Insert a booking and its seat rows.

        Flushes so a uniqueness violation on (screening_id, seat_id) is raised
        here as ``IntegrityError`` rather than at commit.
        """
        db.add(booking)
        await db.flush()
        db.add_all(seats)
        await db.flush()
        return booking

    async def replace_seats(
        self,
        db: AsyncSession,
        booking: Booking,
        seat_ids: list[str],
    ) -> list[SeatBooking]:
        """Make ``seat_ids`` the exact set of seats held by ``booking``."""
        current = await self.seats_for_booking(db, booking.id)
        held = {seat.seat_id for seat in current}
        for seat in current:
            if seat.seat_id not in seat_ids:
                await db.delete(seat)
        await db.flush()
        db.add_all(
            [
                SeatBooking(screening_id=booking.screening_id, seat_id=seat_id, booking_id=booking.id)
                for seat_id in seat_ids
                if seat_id not in held
            ]
        )
        await db.flush()
        return await self.seats_for_booking(db, booking.id)

    async def delete(self, db: AsyncSession, booking: Booking) -> None:
        await db.delete(booking)
        await db.flush()
