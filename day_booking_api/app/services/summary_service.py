"""
Monthly booking summary.

For one calendar month the service returns, for every day that has at
least one booking, the number of bookings and the clients booked on
it.  Rows are fetched in ``day, id`` order with a single query and
grouped in Python.
"""

from __future__ import annotations

from itertools import groupby
from typing import Any, List

from day_booking_api.app.core.db import Database
from day_booking_api.app.schemas.booking import DaySummary, SummaryClient
from day_booking_api.app.services.validation import month_range, require_int_parameter


class MonthlySummaryService:
    def __init__(self, database: Database) -> None:
        self.database = database

    def summary(self, year: Any, month: Any) -> List[DaySummary]:
        """Return per-day counts and clients for ``year``/``month``.

        The range is ``[YYYY-MM-01, first of next month)``.  Days without
        bookings are omitted; phone and notes are rendered as ``""``
        when unset.
        """
        year = require_int_parameter(year, "year")
        month = require_int_parameter(month, "month")
        range_clause, params = month_range(year, month).as_sql()
        with self.database.connection() as conn:
            rows = conn.execute(
                "SELECT id, day, name, phone, notes FROM bookings "
                f"WHERE {range_clause} ORDER BY day ASC, id ASC",
                tuple(params),
            ).fetchall()

        summaries: List[DaySummary] = []
        for day, group in groupby(rows, key=lambda row: row["day"]):
            clients = [
                SummaryClient(
                    id=row["id"],
                    name=row["name"],
                    phone=row["phone"] or "",
                    notes=row["notes"] or "",
                )
                for row in group
            ]
            summaries.append(DaySummary(day=day, count=len(clients), clients=clients))
        return summaries
