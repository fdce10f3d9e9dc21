"""
Name search over bookings.

Matching is a case-insensitive substring test.  Both the stored name
and the pattern are casefolded in Python (via the ``casefold`` SQL
function registered by ``Database.connect``), so ``"ána"`` also finds
``"JULIÁNA"``, which SQLite's ASCII-only ``lower()`` would miss.
"""

from typing import Any, List

from day_booking_api.app.core.db import Database
from day_booking_api.app.schemas.booking import BookingRead
from day_booking_api.app.services.booking_repository import BOOKING_COLUMNS, row_to_booking
from day_booking_api.app.services.validation import date_range, require_parameter


class BookingSearchService:
    def __init__(self, database: Database) -> None:
        self.database = database

    def search(
        self,
        name: Any,
        year: Any = None,
        month: Any = None,
    ) -> List[BookingRead]:
        """Find bookings whose name contains ``name``.

        With ``year`` and ``month`` the search is limited to that month,
        with ``year`` alone to that calendar year.  Results are ordered
        by day, then by id.  The pattern must not be blank, but it is
        matched as given, surrounding spaces included.
        """
        require_parameter(name, "name")
        pattern = str(name)
        clauses = ["instr(casefold(name), ?) > 0"]
        params: list = [pattern.casefold()]
        day_range = date_range(year, month)
        if day_range is not None:
            range_clause, range_params = day_range.as_sql()
            clauses.append(range_clause)
            params.extend(range_params)
        query = (
            f"SELECT {BOOKING_COLUMNS} FROM bookings WHERE {' AND '.join(clauses)} "
            "ORDER BY day ASC, id ASC"
        )
        with self.database.connection() as conn:
            rows = conn.execute(query, tuple(params)).fetchall()
        return [row_to_booking(row) for row in rows]
