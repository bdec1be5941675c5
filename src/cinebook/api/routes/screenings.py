"""Screening API endpoints."""

from datetime import date, datetime, time, timedelta, timezone

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cinebook.api.deps import get_screening_scheduler
from cinebook.database import get_db
from cinebook.errors import NotFoundError
from cinebook.models.hall import Hall
from cinebook.models.screening import Screening
from cinebook.models.seat_booking import SeatBooking
from cinebook.schemas.screening import (
    ScreeningCreate,
    ScreeningResponse,
    ScreeningSeatsResponse,
    ScreeningUpdate,
)
from cinebook.services.screening_scheduler import ScreeningScheduler

router = APIRouter()


@router.post("/screenings", response_model=ScreeningResponse, status_code=201)
async def create_screening(
    payload: ScreeningCreate,
    db: AsyncSession = Depends(get_db),
    scheduler: ScreeningScheduler = Depends(get_screening_scheduler),
) -> Screening:
    """
    Schedule a screening.

    Responds 404 when the movie or hall does not exist and 409 when the slot
    overlaps another screening in the same hall.
    """
    return await scheduler.create_screening(payload, db=db)


@router.get("/screenings", response_model=list[ScreeningResponse])
async def list_screenings(
    movie_id: str | None = Query(None),
    theater_id: str | None = Query(None),
    hall_id: str | None = Query(None),
    date_param: date | None = Query(None, alias="date", description="Day to search (YYYY-MM-DD, UTC)"),
    quality: str | None = Query(None),
    price_min: float | None = Query(None, ge=0),
    price_max: float | None = Query(None, ge=0),
    db: AsyncSession = Depends(get_db),
) -> list[Screening]:
    """Search screenings, ordered by start time."""
    stmt = select(Screening).order_by(Screening.start_time)
    if movie_id:
        stmt = stmt.where(Screening.movie_id == movie_id)
    if theater_id:
        stmt = stmt.where(Screening.theater_id == theater_id)
    if hall_id:
        stmt = stmt.where(Screening.hall_id == hall_id)
    if quality:
        stmt = stmt.where(Screening.quality == quality)
    if price_min is not None:
        stmt = stmt.where(Screening.price >= price_min)
    if price_max is not None:
        stmt = stmt.where(Screening.price <= price_max)
    if date_param:
        day_start = datetime.combine(date_param, time(0, 0), tzinfo=timezone.utc)
        stmt = stmt.where(
            Screening.start_time >= day_start,
            Screening.start_time < day_start + timedelta(days=1),
        )

    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.get("/screenings/{screening_id}", response_model=ScreeningResponse)
async def get_screening(
    screening_id: str,
    db: AsyncSession = Depends(get_db),
    scheduler: ScreeningScheduler = Depends(get_screening_scheduler),
) -> Screening:
    return await scheduler.get_screening(screening_id, db=db)


@router.patch("/screenings/{screening_id}", response_model=ScreeningResponse)
async def update_screening(
    screening_id: str,
    update: ScreeningUpdate,
    db: AsyncSession = Depends(get_db),
    scheduler: ScreeningScheduler = Depends(get_screening_scheduler),
) -> Screening:
    return await scheduler.update_screening(screening_id, update, db=db)


@router.delete("/screenings/{screening_id}", status_code=204)
async def delete_screening(
    screening_id: str,
    db: AsyncSession = Depends(get_db),
    scheduler: ScreeningScheduler = Depends(get_screening_scheduler),
) -> Response:
    await scheduler.delete_screening(screening_id, db=db)
    return Response(status_code=204)


@router.get("/screenings/{screening_id}/seats", response_model=ScreeningSeatsResponse)
async def get_screening_seats(
    screening_id: str,
    db: AsyncSession = Depends(get_db),
    scheduler: ScreeningScheduler = Depends(get_screening_scheduler),
) -> ScreeningSeatsResponse:
    """Booked and free seats of the screening's hall."""
    screening = await scheduler.get_screening(screening_id, db=db)
    hall = await db.get(Hall, (screening.theater_id, screening.hall_id))
    if not hall:
        raise NotFoundError("Hall not found for this screening", resource="hall")

    result = await db.execute(
        select(SeatBooking.seat_id).where(SeatBooking.screening_id == screening_id)
    )
    booked = set(result.scalars().all())
    seats = hall.seat_ids()

    return ScreeningSeatsResponse(
        screening_id=screening_id,
        capacity=len(seats),
        booked=sorted(booked),
        available=sorted(seats - booked),
    )
