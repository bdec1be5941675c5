"""Movie model."""

import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinebook.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from cinebook.models.screening import Screening


class Movie(Base, TimestampMixin):
    """
    Movie model.

    ``duration_minutes`` drives how long a screening occupies its hall.
    """

    __tablename__ = "movies"
    __table_args__ = (
        CheckConstraint("duration_minutes > 0", name="ck_movies_duration_positive"),
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    genre: Mapped[str | None] = mapped_column(String(100), nullable=True)
    director: Mapped[str | None] = mapped_column(String(255), nullable=True)
    age_rating: Mapped[str | None] = mapped_column(String(20), nullable=True)
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    poster_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    recommended: Mapped[bool] = mapped_column(default=False, nullable=False)

    # Relationships
    screenings: Mapped[list["Screening"]] = relationship(
        back_populates="movie",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id!r}, title={self.title!r}, duration={self.duration_minutes})>"
