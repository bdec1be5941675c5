"""Screening model: one showing of a movie in a hall."""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    ForeignKeyConstraint,
    Numeric,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinebook.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from cinebook.models.booking import Booking
    from cinebook.models.hall import Hall
    from cinebook.models.movie import Movie

SCREENING_QUALITIES = ("2D", "3D", "IMAX", "4DX", "Dolby")


class Screening(Base, TimestampMixin):
    """
    Film screening.

    Links a movie to a hall at a specific start time. The end of the slot is
    not stored: it is derived from the movie's duration when scheduling.
    """

    __tablename__ = "screenings"
    __table_args__ = (
        ForeignKeyConstraint(
            ["theater_id", "hall_id"],
            ["halls.theater_id", "halls.hall_id"],
            ondelete="CASCADE",
            onupdate="CASCADE",
            name="fk_screenings_hall",
        ),
        CheckConstraint("price >= 0", name="ck_screenings_price_non_negative"),
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    # Foreign keys
    movie_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    theater_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    hall_id: Mapped[str] = mapped_column(String(16), nullable=False)

    # Screening details
    start_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
    )
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    quality: Mapped[str] = mapped_column(String(10), nullable=False)

    # Relationships
    movie: Mapped["Movie"] = relationship(back_populates="screenings")
    hall: Mapped["Hall"] = relationship(back_populates="screenings")
    bookings: Mapped[list["Booking"]] = relationship(
        back_populates="screening",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return (
            f"<Screening(id={self.id!r}, "
            f"movie_id={self.movie_id!r}, "
            f"hall={self.theater_id}/{self.hall_id}, "
            f"start_time={self.start_time})>"
        )
