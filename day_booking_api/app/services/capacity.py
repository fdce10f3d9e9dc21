"""
Per-day capacity guard.

Both functions run on the cursor of the reservation transaction, which
already holds SQLite's write lock, so the count they see cannot change
before the insert commits.
"""

import logging
import sqlite3

from day_booking_api.app.core.config import DAY_CAPACITY
from day_booking_api.app.core.errors import CapacityExceededError

logger = logging.getLogger(__name__)


def count_for_day(cursor: sqlite3.Cursor, day: str) -> int:
    row = cursor.execute("SELECT COUNT(*) AS c FROM bookings WHERE day = ?", (day,)).fetchone()
    return int(row["c"]) if row else 0


def ensure_capacity(cursor: sqlite3.Cursor, day: str) -> int:
    """Return the current count for ``day`` or refuse when it is full."""
    count = count_for_day(cursor, day)
    if count >= DAY_CAPACITY:
        logger.warning("Day %s is full (%s bookings)", day, count)
        raise CapacityExceededError(f"Maximum {DAY_CAPACITY} clients per day")
    return count


def remaining_slots(count_after_insert: int) -> int:
    return max(DAY_CAPACITY - count_after_insert, 0)
