"""Booking lookups and status changes."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from cinebook.database import unit_of_work
from cinebook.errors import BadRequestError, NotFoundError
from cinebook.models.booking import Booking, BookingStatus
from cinebook.repositories import BookingRepository

logger = logging.getLogger(__name__)


class BookingService:
    """
    Booking lifecycle.

    A booking starts ``pending`` and is later marked ``used`` (ticket
    scanned) or ``canceled``. Setting a booking to the status it already has
    is rejected; other transitions are not restricted.
    """

    def __init__(self, bookings: BookingRepository | None = None) -> None:
        self.bookings = bookings or BookingRepository()

    async def get_booking(self, booking_id: str, db: AsyncSession | None = None) -> Booking:
        async with unit_of_work(db) as session:
            return await self._get_booking_or_raise(session, booking_id)

    async def mark_as_used(self, booking_id: str, db: AsyncSession | None = None) -> Booking:
        return await self._set_status(booking_id, BookingStatus.USED, db)

    async def cancel(self, booking_id: str, db: AsyncSession | None = None) -> Booking:
        return await self._set_status(booking_id, BookingStatus.CANCELED, db)

    async def delete_booking(self, booking_id: str, db: AsyncSession | None = None) -> None:
        """Delete a booking; its seat rows go with it and the seats are free again."""
        async with unit_of_work(db) as session:
            booking = await self._get_booking_or_raise(session, booking_id)
            await self.bookings.delete(session, booking)
            logger.info(f"Deleted booking {booking_id}")

    async def _set_status(
        self,
        booking_id: str,
        status: BookingStatus,
        db: AsyncSession | None,
    ) -> Booking:
        async with unit_of_work(db) as session:
            booking = await self._get_booking_or_raise(session, booking_id)
            if booking.status == status.value:
                raise BadRequestError(
                    f"Booking is already {status.value}",
                    booking_id=booking_id,
                    status=status.value,
                )
            previous = booking.status
            booking.status = status.value
            await session.flush()
            logger.info(f"Booking {booking_id} status {previous} -> {status.value}")
            return booking

    async def _get_booking_or_raise(self, db: AsyncSession, booking_id: str) -> Booking:
        booking = await self.bookings.get(db, booking_id)
        if not booking:
            raise NotFoundError(
                f"Booking with id {booking_id} not found",
                resource="booking",
                booking_id=booking_id,
            )
        return booking
