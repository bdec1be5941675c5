"""Tests for the screening endpoints."""

from collections.abc import AsyncIterator
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from cinebook.api.deps import get_screening_scheduler
from cinebook.database import get_db
from cinebook.errors import ConflictError, NotFoundError
from cinebook.models.hall import Hall
from cinebook.models.screening import Screening


def make_screening(**overrides) -> Screening:
    data = {
        "id": "scr-1",
        "movie_id": "dune",
        "theater_id": "grand-rex",
        "hall_id": "1",
        "start_time": datetime(2026, 10, 19, 14, 0, tzinfo=timezone.utc),
        "price": 9.5,
        "quality": "IMAX",
    }
    data.update(overrides)
    return Screening(**data)


PAYLOAD = {
    "movie_id": "dune",
    "theater_id": "grand-rex",
    "hall_id": "1",
    "start_time": "2026-10-19T14:00:00Z",
    "price": 9.5,
    "quality": "IMAX",
}


@pytest.fixture
def scheduler() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
async def client(test_app: FastAPI, db: AsyncMock, scheduler: AsyncMock) -> AsyncIterator[AsyncClient]:
    async def override_db():
        yield db

    test_app.dependency_overrides[get_db] = override_db
    test_app.dependency_overrides[get_screening_scheduler] = lambda: scheduler
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac
    test_app.dependency_overrides.clear()


class TestCreateScreening:
    async def test_created(self, client: AsyncClient, scheduler: AsyncMock) -> None:
        scheduler.create_screening.return_value = make_screening()

        response = await client.post("/api/screenings", json=PAYLOAD)

        assert response.status_code == 201
        assert response.json()["id"] == "scr-1"
        assert response.json()["quality"] == "IMAX"
        payload = scheduler.create_screening.await_args.args[0]
        assert payload.start_time == datetime(2026, 10, 19, 14, 0, tzinfo=timezone.utc)

    async def test_overlap_is_409_with_error_body(self, client: AsyncClient, scheduler: AsyncMock) -> None:
        scheduler.create_screening.side_effect = ConflictError(
            "Hall is occupied",
            screening_id="scr-0",
            start_time="2026-10-19T13:00:00+00:00",
            end_time="2026-10-19T15:00:00+00:00",
        )

        response = await client.post("/api/screenings", json=PAYLOAD)

        assert response.status_code == 409
        assert response.json() == {
            "error": "ConflictError",
            "message": "Hall is occupied",
            "status": 409,
            "details": {
                "screening_id": "scr-0",
                "start_time": "2026-10-19T13:00:00+00:00",
                "end_time": "2026-10-19T15:00:00+00:00",
            },
        }

    async def test_unknown_movie_is_404(self, client: AsyncClient, scheduler: AsyncMock) -> None:
        scheduler.create_screening.side_effect = NotFoundError(
            "Movie not found", resource="movie", movie_id="dune"
        )

        response = await client.post("/api/screenings", json=PAYLOAD)

        assert response.status_code == 404
        assert response.json()["details"]["resource"] == "movie"

    async def test_bad_quality_is_400(self, client: AsyncClient, scheduler: AsyncMock) -> None:
        response = await client.post("/api/screenings", json={**PAYLOAD, "quality": "8K"})

        assert response.status_code == 400
        assert response.json()["error"] == "ValidationError"
        scheduler.create_screening.assert_not_awaited()

    async def test_missing_start_time_is_400(self, client: AsyncClient) -> None:
        body = {k: v for k, v in PAYLOAD.items() if k != "start_time"}

        response = await client.post("/api/screenings", json=body)

        assert response.status_code == 400


class TestReadUpdateDelete:
    async def test_list(self, client: AsyncClient, db: AsyncMock) -> None:
        result = MagicMock()
        result.scalars.return_value.all.return_value = [
            make_screening(),
            make_screening(id="scr-2", start_time=datetime(2026, 10, 19, 18, 0, tzinfo=timezone.utc)),
        ]
        db.execute.return_value = result

        response = await client.get(
            "/api/screenings", params={"theater_id": "grand-rex", "date": "2026-10-19"}
        )

        assert response.status_code == 200
        assert [s["id"] for s in response.json()] == ["scr-1", "scr-2"]

    async def test_get_unknown_is_404(self, client: AsyncClient, scheduler: AsyncMock) -> None:
        scheduler.get_screening.side_effect = NotFoundError("Screening with id x not found")

        response = await client.get("/api/screenings/x")

        assert response.status_code == 404
        assert response.json()["message"] == "Screening with id x not found"

    async def test_patch_passes_partial_update(self, client: AsyncClient, scheduler: AsyncMock) -> None:
        scheduler.update_screening.return_value = make_screening(price=12.0)

        response = await client.patch("/api/screenings/scr-1", json={"price": 12.0})

        assert response.status_code == 200
        assert response.json()["price"] == 12.0
        screening_id, update = scheduler.update_screening.await_args.args
        assert screening_id == "scr-1"
        assert update.model_dump(exclude_unset=True) == {"price": 12.0}

    async def test_delete(self, client: AsyncClient, scheduler: AsyncMock) -> None:
        response = await client.delete("/api/screenings/scr-1")

        assert response.status_code == 204
        scheduler.delete_screening.assert_awaited_once()

    async def test_seat_map(self, client: AsyncClient, db: AsyncMock, scheduler: AsyncMock) -> None:
        scheduler.get_screening.return_value = make_screening()
        db.get.return_value = Hall(
            theater_id="grand-rex", hall_id="1", seats_layout=[["A1", "A2", 0, "A3"]]
        )
        result = MagicMock()
        result.scalars.return_value.all.return_value = ["A2"]
        db.execute.return_value = result

        response = await client.get("/api/screenings/scr-1/seats")

        assert response.status_code == 200
        assert response.json() == {
            "screening_id": "scr-1",
            "capacity": 3,
            "booked": ["A2"],
            "available": ["A1", "A3"],
        }
