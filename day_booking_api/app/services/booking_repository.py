"""
Business logic and persistence for day bookings.

``BookingRepository`` is the only code that writes to the ``bookings``
table.  A reservation runs the capacity guard and the insert inside one
``BEGIN IMMEDIATE`` transaction: two clients racing for the last slot
of a day are serialized by SQLite's write lock, and the second one sees
the day as full.  The ``bookings_day_capacity`` trigger rejects an
over-capacity insert as a last resort and is reported the same way.
"""

import logging
import sqlite3
from typing import Any, List, Tuple

from day_booking_api.app.core.db import Database
from day_booking_api.app.core.errors import NotFoundError
from day_booking_api.app.schemas.booking import BookingCreate, BookingRead, BookingUpdate
from day_booking_api.app.services.capacity import count_for_day, ensure_capacity, remaining_slots
from day_booking_api.app.services.validation import (
    require_parameter,
    validate_booking_id,
    validate_changes,
    validate_new_booking,
)

logger = logging.getLogger(__name__)

BOOKING_COLUMNS = "id, day, name, phone, notes, created_at"


def row_to_booking(row: sqlite3.Row) -> BookingRead:
    return BookingRead(
        id=row["id"],
        day=row["day"],
        name=row["name"],
        phone=row["phone"],
        notes=row["notes"],
        created_at=row["created_at"],
    )


class BookingRepository:
    """CRUD operations on bookings backed by a ``Database``."""

    def __init__(self, database: Database) -> None:
        self.database = database

    def create(self, payload: BookingCreate) -> Tuple[BookingRead, int]:
        """Reserve a slot and return the new booking with the slots left.

        Raises ``InputError`` for invalid input and
        ``CapacityExceededError`` when the day already holds the
        maximum number of bookings.  The remaining count is taken after
        the insert, under the same lock, so it is exact at commit time.
        """
        booking = validate_new_booking(payload)
        day = booking.day.isoformat()
        with self.database.transaction() as cursor:
            ensure_capacity(cursor, day)
            cursor.execute(
                "INSERT INTO bookings (day, name, phone, notes) VALUES (?, ?, ?, ?)",
                (day, booking.name, booking.phone, booking.notes),
            )
            booking_id = cursor.lastrowid
            row = cursor.execute(
                f"SELECT {BOOKING_COLUMNS} FROM bookings WHERE id = ?",
                (booking_id,),
            ).fetchone()
            remaining = remaining_slots(count_for_day(cursor, day))
        logger.info("Booked client %s on %s (%s slots left)", booking_id, day, remaining)
        return row_to_booking(row), remaining

    def list_for_day(self, day: Any) -> List[BookingRead]:
        """All bookings for exactly ``day``, in insertion order."""
        day = require_parameter(day, "day")
        with self.database.connection() as conn:
            rows = conn.execute(
                f"SELECT {BOOKING_COLUMNS} FROM bookings WHERE day = ? ORDER BY id ASC",
                (day,),
            ).fetchall()
        return [row_to_booking(row) for row in rows]

    def get(self, booking_id: Any) -> BookingRead:
        booking_id = validate_booking_id(booking_id)
        with self.database.connection() as conn:
            row = conn.execute(
                f"SELECT {BOOKING_COLUMNS} FROM bookings WHERE id = ?",
                (booking_id,),
            ).fetchone()
        if row is None:
            raise NotFoundError(f"Client {booking_id} not found")
        return row_to_booking(row)

    def update(self, booking_id: Any, payload: BookingUpdate) -> BookingRead:
        """Change name, phone or notes of an existing booking.

        Only the fields present in ``payload`` are written.  The day of
        a booking never changes.
        """
        booking_id = validate_booking_id(booking_id)
        changes = validate_changes(payload)
        assignments = ", ".join(f"{column} = ?" for column in changes.fields)
        with self.database.transaction() as cursor:
            cursor.execute(
                f"UPDATE bookings SET {assignments} WHERE id = ?",
                (*changes.fields.values(), booking_id),
            )
            if cursor.rowcount == 0:
                raise NotFoundError(f"Client {booking_id} not found")
            row = cursor.execute(
                f"SELECT {BOOKING_COLUMNS} FROM bookings WHERE id = ?",
                (booking_id,),
            ).fetchone()
        logger.info("Updated client %s (%s)", booking_id, ", ".join(changes.fields))
        return row_to_booking(row)

    def delete(self, booking_id: Any) -> int:
        """Physically remove a booking, freeing its slot."""
        booking_id = validate_booking_id(booking_id)
        with self.database.transaction() as cursor:
            cursor.execute("DELETE FROM bookings WHERE id = ?", (booking_id,))
            if cursor.rowcount == 0:
                raise NotFoundError(f"Client {booking_id} not found")
        logger.info("Deleted client %s", booking_id)
        return booking_id
