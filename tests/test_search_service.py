"""
Tests for BookingSearchService.
"""

import pytest

from day_booking_api.app.core.errors import ErrorKind, InputError
from day_booking_api.app.services.search_service import BookingSearchService


class TestSearch:
    def test_month_filter_and_ordering(self, search_service: BookingSearchService, book) -> None:
        """Should return only June 2024 names containing "ana", by day then id."""
        late = book("2024-06-10", "Mariana")
        early_b = book("2024-06-03", "ANA")
        early_a_id = book("2024-06-03", "Juliana").id
        book("2024-06-03", "Bea")
        book("2024-05-31", "Ana")
        book("2024-07-01", "Ana")
        book("2023-06-05", "Ana")

        rows = search_service.search("ana", 2024, 6)

        assert [r.id for r in rows] == [early_b.id, early_a_id, late.id]
        assert all(r.day.year == 2024 and r.day.month == 6 for r in rows)

    def test_year_filter(self, search_service: BookingSearchService, book) -> None:
        first = book("2024-05-31", "Ana")
        second = book("2024-12-31", "Ana")
        book("2025-01-01", "Ana")
        book("2023-06-05", "Ana")
        assert [r.id for r in search_service.search("ana", 2024)] == [first.id, second.id]

    def test_december_includes_last_day_only(self, search_service: BookingSearchService, book) -> None:
        last_day = book("2024-12-31", "Ana")
        book("2025-01-01", "Ana")
        book("2024-11-29", "Ana")
        assert [r.id for r in search_service.search("Ana", 2024, 12)] == [last_day.id]

    def test_unrestricted(self, search_service: BookingSearchService, book) -> None:
        rows = [book(day, "Ana") for day in ("2025-01-01", "2023-06-05", "2024-06-03")]
        found = search_service.search("ana")
        assert [r.id for r in found] == [rows[1].id, rows[2].id, rows[0].id]

    def test_case_insensitive_beyond_ascii(self, search_service: BookingSearchService, book) -> None:
        """Should casefold non-ASCII letters on both sides."""
        row = book("2024-06-03", "JULIÁNA")
        assert [r.id for r in search_service.search("ána")] == [row.id]

    def test_pattern_is_literal(self, search_service: BookingSearchService, book) -> None:
        """Should not treat % or _ as wildcards."""
        book("2024-06-03", "Ana")
        assert search_service.search("%") == []
        assert search_service.search("A_a") == []

    def test_no_match(self, search_service: BookingSearchService, book) -> None:
        book("2024-06-03", "Bea")
        assert search_service.search("ana", 2024, 6) == []

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_name_is_required(self, search_service: BookingSearchService, name) -> None:
        with pytest.raises(InputError) as excinfo:
            search_service.search(name, 2024, 6)
        assert excinfo.value.kind is ErrorKind.MISSING_PARAMETER

    def test_month_without_year(self, search_service: BookingSearchService) -> None:
        with pytest.raises(InputError) as excinfo:
            search_service.search("ana", month=6)
        assert excinfo.value.kind is ErrorKind.MISSING_PARAMETER

    def test_pattern_is_matched_as_given(self, search_service: BookingSearchService, book) -> None:
        """Should keep surrounding spaces in the pattern when matching."""
        book("2024-06-03", "Juliana")
        maria = book("2024-06-04", "Maria Ana")
        assert [r.id for r in search_service.search(" ana")] == [maria.id]

    def test_string_year_and_month(self, search_service: BookingSearchService, book) -> None:
        row = book("2024-06-03", "Ana")
        book("2024-07-01", "Ana")
        assert [r.id for r in search_service.search("ana", "2024", "6")] == [row.id]
        with pytest.raises(InputError) as excinfo:
            search_service.search("ana", "next year")
        assert excinfo.value.kind is ErrorKind.INVALID_DATE
