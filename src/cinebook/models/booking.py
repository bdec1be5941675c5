"""Booking model: one user's reservation for one screening."""

import enum
import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinebook.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from cinebook.models.screening import Screening
    from cinebook.models.seat_booking import SeatBooking


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    USED = "used"
    CANCELED = "canceled"


class Booking(Base, TimestampMixin):
    """
    Booking model.

    ``seats_number`` always equals the number of SeatBooking rows the booking
    owns; both are written in the same transaction.
    """

    __tablename__ = "bookings"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    screening_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("screenings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    seats_number: Mapped[int] = mapped_column(Integer, nullable=False)
    total_price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=BookingStatus.PENDING.value,
        index=True,
    )
    booking_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        nullable=False,
    )

    # Relationships
    screening: Mapped["Screening"] = relationship(back_populates="bookings")
    seats: Mapped[list["SeatBooking"]] = relationship(
        back_populates="booking",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id!r}, screening_id={self.screening_id!r}, "
            f"seats={self.seats_number}, status={self.status!r})>"
        )
