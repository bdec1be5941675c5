"""Theater model for cinema venues."""

from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinebook.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from cinebook.models.hall import Hall


class Theater(Base, TimestampMixin):
    """Cinema venue. Identified by a short human-chosen slug."""

    __tablename__ = "theaters"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    halls: Mapped[list["Hall"]] = relationship(
        back_populates="theater",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Theater(id={self.id!r}, name={self.name!r}, city={self.city!r})>"
