"""
Tests for MonthlySummaryService.
"""

import pytest

from day_booking_api.app.core.errors import ErrorKind, InputError
from day_booking_api.app.services.summary_service import MonthlySummaryService


class TestSummary:
    def test_groups_days_in_order(self, summary_service: MonthlySummaryService, book) -> None:
        """Should list only booked days, ascending, with clients by id."""
        wed_1 = book("2024-06-05", "Carla", phone="555", notes="vip")
        mon = book("2024-06-03", "Ana")
        wed_2 = book("2024-06-05", "Bea")

        rows = summary_service.summary(2024, 6)

        assert [(r.day.isoformat(), r.count) for r in rows] == [("2024-06-03", 1), ("2024-06-05", 2)]
        assert [c.id for c in rows[1].clients] == [wed_1.id, wed_2.id]
        assert rows[0].clients[0].id == mon.id

    def test_null_contact_fields_render_empty(self, summary_service: MonthlySummaryService, book) -> None:
        book("2024-06-03", "Ana", phone="555", notes="  ")
        client = summary_service.summary(2024, 6)[0].clients[0]
        assert client.name == "Ana"
        assert client.phone == "555"
        assert client.notes == ""

    def test_counts_sum_to_bookings_in_month(self, summary_service: MonthlySummaryService, book) -> None:
        """Should count exactly the bookings in [first, first of next month)."""
        inside = ["2024-06-03", "2024-06-03", "2024-06-14", "2024-06-28", "2024-06-28", "2024-06-28"]
        for i, day in enumerate(inside):
            book(day, f"Client {i}")
        for day in ("2024-05-31", "2024-07-01"):
            book(day, "Outside")

        rows = summary_service.summary(2024, 6)

        assert sum(r.count for r in rows) == len(inside)
        assert all(r.count == len(r.clients) for r in rows)

    def test_december_wraps(self, summary_service: MonthlySummaryService, book) -> None:
        book("2024-12-31", "Ana")
        book("2025-01-01", "Bea")
        rows = summary_service.summary(2024, 12)
        assert [r.day.isoformat() for r in rows] == ["2024-12-31"]

    def test_empty_month(self, summary_service: MonthlySummaryService) -> None:
        assert summary_service.summary(2024, 6) == []

    @pytest.mark.parametrize("year,month", [(None, 6), (2024, None), (None, None)])
    def test_missing_parameters(self, summary_service: MonthlySummaryService, year, month) -> None:
        with pytest.raises(InputError) as excinfo:
            summary_service.summary(year, month)
        assert excinfo.value.kind is ErrorKind.MISSING_PARAMETER

    def test_invalid_month(self, summary_service: MonthlySummaryService) -> None:
        with pytest.raises(InputError) as excinfo:
            summary_service.summary(2024, 13)
        assert excinfo.value.kind is ErrorKind.INVALID_DATE

    def test_numeric_strings_are_accepted(self, summary_service: MonthlySummaryService, book) -> None:
        book("2024-06-03", "Ana")
        assert [r.count for r in summary_service.summary("2024", " 6 ")] == [1]

    @pytest.mark.parametrize("year,month", [("2024", "June"), ("twenty", 6), (2024, 6.5)])
    def test_non_numeric_parameters(self, summary_service: MonthlySummaryService, year, month) -> None:
        """Should tag non-integer year or month as InvalidDate instead of crashing."""
        with pytest.raises(InputError) as excinfo:
            summary_service.summary(year, month)
        assert excinfo.value.kind is ErrorKind.INVALID_DATE
