"""SeatBooking model binding one seat of one screening to a booking."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinebook.models.base import Base

if TYPE_CHECKING:
    from cinebook.models.booking import Booking

# Width of seat_bookings.seat_id; hall layouts may not hold longer seat ids
SEAT_ID_MAX_LENGTH = 16


class SeatBooking(Base):
    """
    Seat reservation row.

    The primary key (screening_id, seat_id) is what guarantees a seat is
    sold at most once per screening, including under concurrent requests.
    """

    __tablename__ = "seat_bookings"

    screening_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("screenings.id", ondelete="CASCADE"),
        primary_key=True,
    )
    seat_id: Mapped[str] = mapped_column(String(SEAT_ID_MAX_LENGTH), primary_key=True)
    booking_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("bookings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    booking: Mapped["Booking"] = relationship(back_populates="seats")

    def __repr__(self) -> str:
        return f"<SeatBooking(screening_id={self.screening_id!r}, seat_id={self.seat_id!r})>"
