"""Hall model with its fixed seat layout."""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinebook.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from cinebook.models.screening import Screening
    from cinebook.models.theater import Theater


def layout_seat_ids(layout: list[list[str | int]] | None) -> set[str]:
    """Flatten a seat grid into the set of bookable seat identifiers."""
    seats: set[str] = set()
    for row in layout or []:
        for cell in row:
            if cell in (None, "", 0):
                continue
            seats.add(str(cell))
    return seats


class Hall(Base, TimestampMixin):
    """
    Screening hall inside a theater.

    Identified by (theater_id, hall_id). ``seats_layout`` is a 2-D grid, one
    list per row, where each cell is a seat identifier. Cells holding ``0``
    or an empty value mark gaps in the row (aisles) rather than seats.
    """

    __tablename__ = "halls"

    theater_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("theaters.id", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True,
    )
    hall_id: Mapped[str] = mapped_column(String(16), primary_key=True)
    seats_layout: Mapped[list[list[str | int]]] = mapped_column(JSONB, nullable=False)

    # Relationships
    theater: Mapped["Theater"] = relationship(back_populates="halls")
    screenings: Mapped[list["Screening"]] = relationship(
        back_populates="hall",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Hall(theater_id={self.theater_id!r}, hall_id={self.hall_id!r})>"

    def seat_ids(self) -> set[str]:
        return layout_seat_ids(self.seats_layout)

    @property
    def capacity(self) -> int:
        return len(self.seat_ids())
