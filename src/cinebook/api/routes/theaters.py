"""Theater and hall API endpoints."""

import logging

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from cinebook.database import get_db
from cinebook.errors import ConflictError, NotFoundError
from cinebook.models.hall import Hall, layout_seat_ids
from cinebook.models.screening import Screening
from cinebook.models.seat_booking import SeatBooking
from cinebook.models.theater import Theater
from cinebook.repositories import HallRepository
from cinebook.schemas.theater import (
    HallCreate,
    HallResponse,
    HallUpdate,
    TheaterCreate,
    TheaterResponse,
    TheaterUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter()
halls = HallRepository()


async def _get_theater_or_404(
    db: AsyncSession,
    theater_id: str,
    *,
    for_update: bool = False,
) -> Theater:
    theater = await db.get(Theater, theater_id, with_for_update=for_update or None)
    if not theater:
        raise NotFoundError(
            f"Theater with id {theater_id} not found",
            resource="theater",
            theater_id=theater_id,
        )
    return theater


async def _get_hall_or_404(
    db: AsyncSession,
    theater_id: str,
    hall_id: str,
    *,
    for_update: bool = False,
) -> Hall:
    hall = await halls.get(db, theater_id, hall_id, for_update=for_update)
    if not hall:
        raise NotFoundError(
            "Hall not found",
            resource="hall",
            theater_id=theater_id,
            hall_id=hall_id,
        )
    return hall


@router.post("/theaters", response_model=TheaterResponse, status_code=201)
async def create_theater(payload: TheaterCreate, db: AsyncSession = Depends(get_db)) -> Theater:
    if await db.get(Theater, payload.id):
        raise ConflictError(f"Theater {payload.id} already exists", theater_id=payload.id)
    theater = Theater(**payload.model_dump())
    db.add(theater)
    try:
        await db.flush()
    except IntegrityError as exc:
        logger.warning(f"Concurrent create of theater {payload.id}: {exc.orig}")
        raise ConflictError(
            f"Theater {payload.id} already exists", theater_id=payload.id
        ) from exc
    logger.info(f"Created theater {theater.id}")
    return theater


@router.get("/theaters", response_model=list[TheaterResponse])
async def list_theaters(
    city: str | None = Query(None, description="City to filter theaters"),
    db: AsyncSession = Depends(get_db),
) -> list[Theater]:
    stmt = select(Theater).order_by(Theater.name)
    if city:
        stmt = stmt.where(Theater.city == city)
    result = await db.execute(stmt)
    return list(result.scalars().all())


@router.get("/theaters/{theater_id}", response_model=TheaterResponse)
async def get_theater(theater_id: str, db: AsyncSession = Depends(get_db)) -> Theater:
    return await _get_theater_or_404(db, theater_id)


@router.patch("/theaters/{theater_id}", response_model=TheaterResponse)
async def update_theater(
    theater_id: str,
    update: TheaterUpdate,
    db: AsyncSession = Depends(get_db),
) -> Theater:
    theater = await _get_theater_or_404(db, theater_id, for_update=True)
    changes = update.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in changes.items():
        setattr(theater, field, value)
    await db.flush()
    logger.info(f"Updated theater {theater_id}: {sorted(changes)}")
    return theater


@router.delete("/theaters/{theater_id}", status_code=204)
async def delete_theater(theater_id: str, db: AsyncSession = Depends(get_db)) -> Response:
    """Delete a theater together with its halls, their screenings and bookings."""
    theater = await _get_theater_or_404(db, theater_id)
    await db.delete(theater)
    await db.flush()
    logger.info(f"Deleted theater {theater_id}")
    return Response(status_code=204)


@router.post("/theaters/{theater_id}/halls", response_model=HallResponse, status_code=201)
async def create_hall(
    theater_id: str,
    payload: HallCreate,
    db: AsyncSession = Depends(get_db),
) -> Hall:
    """Add a hall with its seat layout to a theater."""
    await _get_theater_or_404(db, theater_id)
    if await db.get(Hall, (theater_id, payload.hall_id)):
        raise ConflictError(
            f"Hall {payload.hall_id} already exists in theater {theater_id}",
            theater_id=theater_id,
            hall_id=payload.hall_id,
        )
    hall = Hall(theater_id=theater_id, **payload.model_dump())
    db.add(hall)
    try:
        await db.flush()
    except IntegrityError as exc:
        logger.warning(f"Concurrent create of hall {theater_id}/{payload.hall_id}: {exc.orig}")
        raise ConflictError(
            f"Hall {payload.hall_id} already exists in theater {theater_id}",
            theater_id=theater_id,
            hall_id=payload.hall_id,
        ) from exc
    logger.info(f"Created hall {theater_id}/{hall.hall_id} with {hall.capacity} seats")
    return hall


@router.get("/theaters/{theater_id}/halls", response_model=list[HallResponse])
async def list_halls(theater_id: str, db: AsyncSession = Depends(get_db)) -> list[Hall]:
    await _get_theater_or_404(db, theater_id)
    result = await db.execute(
        select(Hall).where(Hall.theater_id == theater_id).order_by(Hall.hall_id)
    )
    return list(result.scalars().all())


@router.get("/theaters/{theater_id}/halls/{hall_id}", response_model=HallResponse)
async def get_hall(theater_id: str, hall_id: str, db: AsyncSession = Depends(get_db)) -> Hall:
    hall = await db.get(Hall, (theater_id, hall_id))
    if not hall:
        raise NotFoundError(
            "Hall not found",
            resource="hall",
            theater_id=theater_id,
            hall_id=hall_id,
        )
    return hall


@router.patch("/theaters/{theater_id}/halls/{hall_id}", response_model=HallResponse)
async def update_hall(
    theater_id: str,
    hall_id: str,
    update: HallUpdate,
    db: AsyncSession = Depends(get_db),
) -> Hall:
    """
    Replace a hall's seat layout.

    The hall row stays locked until the request commits, so bookings and
    schedule changes for the hall wait for the new layout. Responds 409 if the
    new layout drops a seat that is booked for one of the hall's screenings.
    """
    hall = await _get_hall_or_404(db, theater_id, hall_id, for_update=True)

    result = await db.execute(
        select(SeatBooking.seat_id)
        .join(Screening, Screening.id == SeatBooking.screening_id)
        .where(Screening.theater_id == theater_id, Screening.hall_id == hall_id)
        .distinct()
    )
    booked = set(result.scalars().all())
    dropped = sorted(booked - layout_seat_ids(update.seats_layout))
    if dropped:
        raise ConflictError(
            f"Layout removes booked seats: {', '.join(dropped)}",
            seat_ids=dropped,
        )

    hall.seats_layout = update.seats_layout
    await db.flush()
    logger.info(f"Updated layout of hall {theater_id}/{hall_id}: {hall.capacity} seats")
    return hall


@router.delete("/theaters/{theater_id}/halls/{hall_id}", status_code=204)
async def delete_hall(
    theater_id: str,
    hall_id: str,
    db: AsyncSession = Depends(get_db),
) -> Response:
    """Delete a hall together with its screenings and their bookings."""
    hall = await _get_hall_or_404(db, theater_id, hall_id, for_update=True)
    await db.delete(hall)
    await db.flush()
    logger.info(f"Deleted hall {theater_id}/{hall_id}")
    return Response(status_code=204)
