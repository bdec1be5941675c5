"""Tests for model helpers, request schemas and error serialisation."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from cinebook.errors import BadRequestError, ConflictError, NotFoundError
from cinebook.models.hall import Hall
from cinebook.models.seat_booking import SEAT_ID_MAX_LENGTH, SeatBooking
from cinebook.schemas.booking import BookingCreate
from cinebook.schemas.screening import ScreeningCreate, ScreeningUpdate
from cinebook.schemas.theater import HallCreate, HallUpdate


class TestHallSeats:
    def test_aisles_and_blanks_are_not_seats(self) -> None:
        hall = Hall(theater_id="grand-rex", hall_id="1", seats_layout=[["A1", 0, "A2"], ["", "B1"]])

        assert hall.seat_ids() == {"A1", "A2", "B1"}
        assert hall.capacity == 3

    def test_numeric_seat_ids_are_stringified(self) -> None:
        hall = Hall(theater_id="grand-rex", hall_id="2", seats_layout=[[1, 2, 0, 3]])

        assert hall.seat_ids() == {"1", "2", "3"}

    def test_missing_layout_has_no_seats(self) -> None:
        hall = Hall(theater_id="grand-rex", hall_id="3", seats_layout=None)

        assert hall.capacity == 0


class TestHallCreate:
    def test_accepts_layout_with_aisles(self) -> None:
        hall = HallCreate(hall_id="1", seats_layout=[["A1", 0, "A2"]])

        assert hall.seats_layout == [["A1", 0, "A2"]]

    @pytest.mark.parametrize(
        "layout",
        [[], [[]], [["A1", " "]], [["A1", -1]], [["BALCONY-LEFT-ROW-A-01", "A2"]]],
        ids=["no-rows", "empty-row", "blank-seat", "negative-cell", "seat-id-too-long"],
    )
    def test_rejects_malformed_layouts(self, layout) -> None:
        with pytest.raises(ValidationError):
            HallCreate(hall_id="1", seats_layout=layout)

    def test_rejects_non_slug_hall_id(self) -> None:
        with pytest.raises(ValidationError):
            HallCreate(hall_id="hall 1", seats_layout=[["A1"]])

    def test_every_accepted_seat_id_fits_the_reservation_table(self) -> None:
        longest = "R" * SEAT_ID_MAX_LENGTH
        hall = HallCreate(hall_id="1", seats_layout=[[longest, "A2"]])

        column_width = SeatBooking.__table__.c.seat_id.type.length
        assert column_width == SEAT_ID_MAX_LENGTH
        assert all(len(str(cell)) <= column_width for row in hall.seats_layout for cell in row)

    def test_layout_update_uses_the_same_rules(self) -> None:
        with pytest.raises(ValidationError):
            HallUpdate(seats_layout=[["R" * (SEAT_ID_MAX_LENGTH + 1)]])


class TestScreeningSchemas:
    def payload(self, **overrides):
        data = {
            "movie_id": "dune",
            "theater_id": "grand-rex",
            "hall_id": "1",
            "start_time": "2026-10-19T14:00:00",
            "price": 9.5,
            "quality": "IMAX",
        }
        data.update(overrides)
        return data

    def test_naive_start_time_is_read_as_utc(self) -> None:
        screening = ScreeningCreate(**self.payload())

        assert screening.start_time == datetime(2026, 10, 19, 14, 0, tzinfo=timezone.utc)

    def test_offset_start_time_is_kept(self) -> None:
        screening = ScreeningCreate(**self.payload(start_time="2026-10-19T16:00:00+02:00"))

        assert screening.start_time.utcoffset() == timedelta(hours=2)
        assert screening.start_time == datetime(2026, 10, 19, 14, 0, tzinfo=timezone.utc)

    def test_unknown_quality_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScreeningCreate(**self.payload(quality="8K"))

    def test_negative_price_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScreeningCreate(**self.payload(price=-1))

    def test_update_only_reports_fields_sent(self) -> None:
        update = ScreeningUpdate(start_time="2026-10-19T18:00:00")

        assert update.model_dump(exclude_unset=True) == {
            "start_time": datetime(2026, 10, 19, 18, 0, tzinfo=timezone.utc)
        }


class TestBookingCreate:
    def test_requires_user_and_screening(self) -> None:
        with pytest.raises(ValidationError):
            BookingCreate(user_id="", screening_id="evening", seat_ids=["A1"])

    def test_seat_list_is_not_validated_by_schema(self) -> None:
        booking = BookingCreate(user_id="user-1", screening_id="evening", seat_ids=["A1", "A1"])

        assert booking.seat_ids == ["A1", "A1"]


class TestServiceErrors:
    def test_to_dict_includes_details(self) -> None:
        error = ConflictError("Seats taken", seat_ids=["A1"])

        assert error.to_dict() == {
            "error": "ConflictError",
            "message": "Seats taken",
            "status": 409,
            "details": {"seat_ids": ["A1"]},
        }

    def test_to_dict_omits_empty_details(self) -> None:
        assert "details" not in BadRequestError("No seats selected").to_dict()

    def test_status_codes(self) -> None:
        assert BadRequestError("x").status_code == 400
        assert NotFoundError("x").status_code == 404
        assert ConflictError("x").status_code == 409

    def test_message_is_exception_text(self) -> None:
        assert str(NotFoundError("Movie not found")) == "Movie not found"
