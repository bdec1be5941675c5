"""Unit tests for screening interval arithmetic."""

from datetime import datetime, timedelta, timezone

import pytest

from cinebook.services.screening_scheduler import overlaps, screening_window

T0 = datetime(2026, 10, 19, 18, 0, tzinfo=timezone.utc)


def at(hour: int, minute: int = 0) -> datetime:
    return T0.replace(hour=hour, minute=minute)


class TestOverlaps:
    @pytest.mark.parametrize(
        ("a", "b"),
        [
            ((at(18), at(20)), (at(19), at(21))),
            ((at(18), at(20)), (at(20), at(22))),
            ((at(18), at(20)), (at(18, 30), at(19))),
            ((at(10), at(11)), (at(12), at(13))),
        ],
    )
    def test_symmetric(self, a, b) -> None:
        assert overlaps(*a, *b) == overlaps(*b, *a)

    def test_interval_overlaps_itself(self) -> None:
        assert overlaps(at(18), at(20), at(18), at(20))

    def test_touching_intervals_do_not_overlap(self) -> None:
        assert not overlaps(at(18), at(20), at(20), at(22))
        assert not overlaps(at(20), at(22), at(18), at(20))

    def test_one_minute_intersection_overlaps(self) -> None:
        assert overlaps(at(18), at(20), at(19, 59), at(22))

    def test_containment_overlaps(self) -> None:
        assert overlaps(at(18), at(22), at(19), at(20))
        assert overlaps(at(19), at(20), at(18), at(22))

    def test_disjoint_intervals(self) -> None:
        assert not overlaps(at(10), at(11), at(12), at(13))


class TestScreeningWindow:
    def test_end_is_start_plus_duration(self) -> None:
        start, end = screening_window(at(18), 120)
        assert start == at(18)
        assert end == at(20)

    def test_cleaning_buffer_extends_end(self) -> None:
        _, end = screening_window(at(18), 120, buffer_minutes=15)
        assert end == at(20, 15)

    def test_naive_start_is_read_as_utc(self) -> None:
        start, end = screening_window(datetime(2026, 10, 19, 18, 0), 90)
        assert start.tzinfo is timezone.utc
        assert end - start == timedelta(minutes=90)
