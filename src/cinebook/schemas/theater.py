"""Pydantic schemas for theaters and their halls."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cinebook.models.seat_booking import SEAT_ID_MAX_LENGTH

SLUG_PATTERN = r"^[a-zA-Z0-9_-]+$"

SeatsLayout = list[list[str | int]]


def validate_seats_layout(layout: SeatsLayout) -> SeatsLayout:
    """
    Check a hall's seat grid.

    The layout must be a non-empty list of non-empty rows; every cell is a
    non-empty string or a non-negative number, and no seat id may be longer
    than the seat reservation table can store.
    """
    if not layout:
        raise ValueError("seats_layout must contain at least one row")
    for row in layout:
        if not row:
            raise ValueError("seats_layout rows must not be empty")
        for cell in row:
            if isinstance(cell, str) and not cell.strip():
                raise ValueError("seat identifiers must be non-empty strings")
            if isinstance(cell, int) and cell < 0:
                raise ValueError("numeric seat cells must be non-negative")
            if len(str(cell)) > SEAT_ID_MAX_LENGTH:
                raise ValueError(
                    f"seat identifier {cell!r} is longer than {SEAT_ID_MAX_LENGTH} characters"
                )
    return layout


class TheaterCreate(BaseModel):
    id: str = Field(min_length=2, max_length=36, pattern=SLUG_PATTERN)
    name: str = Field(min_length=1, max_length=200)
    address: str
    postal_code: str
    city: str
    phone: str | None = None
    email: str | None = None


class TheaterUpdate(BaseModel):
    """Partial theater update; the id cannot be changed."""

    name: str | None = Field(default=None, min_length=1, max_length=200)
    address: str | None = None
    postal_code: str | None = None
    city: str | None = None
    phone: str | None = None
    email: str | None = None


class TheaterResponse(TheaterCreate):
    """Theater response schema."""

    model_config = ConfigDict(from_attributes=True)


class HallCreate(BaseModel):
    """Hall creation payload."""

    hall_id: str = Field(min_length=1, max_length=16, pattern=SLUG_PATTERN)
    seats_layout: SeatsLayout

    @field_validator("seats_layout")
    @classmethod
    def validate_layout(cls, layout: SeatsLayout) -> SeatsLayout:
        return validate_seats_layout(layout)


class HallUpdate(BaseModel):
    seats_layout: SeatsLayout

    @field_validator("seats_layout")
    @classmethod
    def validate_layout(cls, layout: SeatsLayout) -> SeatsLayout:
        return validate_seats_layout(layout)


class HallResponse(BaseModel):
    """Hall response schema."""

    model_config = ConfigDict(from_attributes=True)

    theater_id: str
    hall_id: str
    seats_layout: SeatsLayout
    capacity: int
