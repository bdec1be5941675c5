"""Pydantic schemas for screening data."""

from datetime import datetime, timezone
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

Quality = Literal["2D", "3D", "IMAX", "4DX", "Dolby"]


def _assume_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# Naive datetimes sent by clients are read as UTC
UtcDatetime = Annotated[datetime, AfterValidator(_assume_utc)]


class ScreeningCreate(BaseModel):
    """Request to schedule a screening."""

    movie_id: str = Field(min_length=1)
    theater_id: str = Field(min_length=1)
    hall_id: str = Field(min_length=1)
    start_time: UtcDatetime
    price: float = Field(ge=0)
    quality: Quality


class ScreeningUpdate(BaseModel):
    """Partial screening update; only the fields sent are changed."""

    movie_id: str | None = Field(default=None, min_length=1)
    theater_id: str | None = Field(default=None, min_length=1)
    hall_id: str | None = Field(default=None, min_length=1)
    start_time: UtcDatetime | None = None
    price: float | None = Field(default=None, ge=0)
    quality: Quality | None = None


class ScreeningResponse(BaseModel):
    """Screening response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    movie_id: str
    theater_id: str
    hall_id: str
    start_time: datetime
    price: float
    quality: str


class ScreeningSeatsResponse(BaseModel):
    """Seat occupancy for one screening."""

    screening_id: str
    capacity: int
    booked: list[str]
    available: list[str]
