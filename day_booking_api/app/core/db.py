"""
SQLite database integration and simple migration system.

The ``Database`` object owns everything the services need from the
store: where the file lives, how connections are configured, how
transactions are opened and which migrations have been applied.  One
instance is created per application and handed to the services through
FastAPI dependencies (``get_database``), so tests can point the whole
stack at a temporary file.

Connections are opened in autocommit mode (``isolation_level=None``)
and transactions are started explicitly.  Reservations use ``BEGIN
IMMEDIATE`` so that SQLite's write lock is held from the capacity count
until the insert commits.

Applied migration versions are stored in the ``migrations`` table and
new ones are executed in order by ``init_db``.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from fastapi import Request

from .config import DAY_CAPACITY, settings
from .errors import BookingError, CapacityExceededError, StoreError

logger = logging.getLogger(__name__)

# Message raised by the ``bookings_day_capacity`` trigger.
CAPACITY_TRIGGER_MESSAGE = "day capacity exceeded"

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: bookings table, day index and capacity trigger
    (
        1,
        f"""
        CREATE TABLE IF NOT EXISTS bookings (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            day TEXT NOT NULL CHECK (date(day) = day AND strftime('%w', day) NOT IN ('0', '6')),
            name TEXT NOT NULL CHECK (length(trim(name)) > 0),
            phone TEXT,
            notes TEXT,
            created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ', 'now'))
        );

        CREATE INDEX IF NOT EXISTS idx_bookings_day ON bookings(day);

        -- Rejects the insert of a row beyond the per-day capacity, even
        -- for writers that bypass the repository.
        CREATE TRIGGER IF NOT EXISTS bookings_day_capacity
        BEFORE INSERT ON bookings
        WHEN (SELECT COUNT(*) FROM bookings WHERE day = NEW.day) >= {DAY_CAPACITY}
        BEGIN
            SELECT RAISE(ABORT, '{CAPACITY_TRIGGER_MESSAGE}');
        END;
        """,
    ),
    # Migration 2: free-form notes
    (
        2,
        """
        CREATE TABLE IF NOT EXISTS notes (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            title TEXT NOT NULL,
            created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ', 'now'))
        );
        """,
    ),
]


def resolve_database_path(db_url: str) -> str:
    """Return an absolute path for ``db_url``.

    Absolute paths are used as is; relative ones are resolved against
    the package root (``day_booking_api/``).
    """
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent
    return str((base_dir / db_url).resolve())


def _casefold(value):
    if isinstance(value, str):
        return value.casefold()
    return value


def translate_error(exc: sqlite3.Error) -> BookingError:
    """Map a ``sqlite3`` exception onto the booking error taxonomy."""
    message = str(exc)
    if isinstance(exc, sqlite3.IntegrityError) and CAPACITY_TRIGGER_MESSAGE in message:
        return CapacityExceededError(f"Maximum {DAY_CAPACITY} clients per day")
    logger.error("Store failure: %s", message)
    return StoreError(message)


class Database:
    """Connection factory for the booking store."""

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.path = resolve_database_path(url or settings.database_url)
        self.timeout = settings.database_timeout if timeout is None else timeout

    def connect(self) -> sqlite3.Connection:
        """Open a new connection.

        Rows are returned as ``sqlite3.Row`` and a ``casefold`` SQL
        function is registered for case-insensitive matching of
        non-ASCII names, which SQLite's ``lower()`` does not handle.
        """
        conn = sqlite3.connect(self.path, timeout=self.timeout, isolation_level=None)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        conn.create_function("casefold", 1, _casefold, deterministic=True)
        return conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection and close it on exit.

        ``sqlite3`` errors raised inside the block are re-raised as
        ``StoreError`` (or ``CapacityExceededError`` for the trigger).
        """
        try:
            conn = self.connect()
        except sqlite3.Error as exc:
            raise translate_error(exc) from exc
        try:
            yield conn
        except sqlite3.Error as exc:
            raise translate_error(exc) from exc
        finally:
            conn.close()

    @contextmanager
    def transaction(self, immediate: bool = True) -> Iterator[sqlite3.Cursor]:
        """Run the block inside one transaction and yield its cursor.

        With ``immediate`` the write lock is taken up front, so
        concurrent writers queue (up to ``timeout`` seconds) instead of
        both reading the same state.  Any exception rolls back.
        """
        with self.connection() as conn:
            conn.execute("BEGIN IMMEDIATE" if immediate else "BEGIN")
            try:
                yield conn.cursor()
            except BaseException:
                conn.rollback()
                raise
            conn.commit()

    def init_db(self) -> None:
        """Create the database file and apply pending migrations."""
        with self.connection() as conn:
            conn.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
            row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version <= current_version:
                    continue
                # executescript commits any open transaction first, so the
                # script carries its own BEGIN/COMMIT.
                conn.executescript(
                    "BEGIN IMMEDIATE;\n"
                    f"{sql}\n"
                    f"INSERT OR IGNORE INTO migrations (version) VALUES ({version});\n"
                    "COMMIT;"
                )
                logger.info("Applied migration %s to %s", version, self.path)
                current_version = version


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the application's database."""
    return request.app.state.database
