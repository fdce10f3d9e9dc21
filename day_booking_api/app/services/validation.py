"""
Input validation for bookings.

These are pure functions: they never touch the database.  Each one
either returns the cleaned value or raises ``InputError`` tagged with
the reason, so endpoints can report exactly what to fix.

``validate_new_booking`` and ``validate_changes`` turn the loosely typed
request schemas into ``NewBooking`` / ``BookingChanges`` values, which
are the only shapes the repository accepts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import MAXYEAR, MINYEAR, date
from typing import Any, Dict, List, Optional, Tuple

from day_booking_api.app.core.errors import ErrorKind, InputError
from day_booking_api.app.schemas.booking import BookingCreate, BookingUpdate

_DAY_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_ID_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)

# SQLite INTEGER is a signed 64-bit value.
_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1

# Fields of a booking that may change after creation, in SQL order.
UPDATABLE_FIELDS = ("name", "phone", "notes")


class _Unset:
    """Marker for a field that was not present in the request."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass(frozen=True)
class NewBooking:
    day: date
    name: str
    phone: Optional[str] = None
    notes: Optional[str] = None


@dataclass
class BookingChanges:
    """Validated column -> value mapping for an update."""

    fields: Dict[str, Optional[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class DayRange:
    """Half-open ``[start, end)`` range of ``YYYY-MM-DD`` strings.

    ``end`` is ``None`` when the range runs past the last representable
    year.  ISO day strings sort chronologically, so the bounds can be
    compared directly against the ``day`` column.
    """

    start: str
    end: Optional[str]

    def as_sql(self, column: str = "day") -> Tuple[str, List[str]]:
        if self.end is None:
            return f"{column} >= ?", [self.start]
        return f"{column} >= ? AND {column} < ?", [self.start, self.end]


def validate_day(raw: Any) -> date:
    """Parse a ``YYYY-MM-DD`` string into a Monday–Friday date."""
    if not isinstance(raw, str) or not _DAY_PATTERN.fullmatch(raw):
        raise InputError(ErrorKind.INVALID_FORMAT, "Invalid day format. Use YYYY-MM-DD")
    try:
        day = date.fromisoformat(raw)
    except ValueError:
        raise InputError(ErrorKind.INVALID_DATE, f"Invalid date: {raw}") from None
    if day.isoweekday() > 5:
        raise InputError(ErrorKind.WEEKEND, "Clients can only be booked Monday to Friday")
    return day


def validate_name(raw: Any) -> str:
    if not isinstance(raw, str) or not raw.strip():
        raise InputError(ErrorKind.REQUIRED, "name is required")
    return raw.strip()


def validate_contact_field(raw: Any, field_name: str = "phone") -> Any:
    """Normalise an optional contact field.

    ``UNSET`` (absent) and ``None`` (explicit clear) are returned as
    they are.  Strings are trimmed and a blank string becomes ``None``.
    Any other type is rejected.
    """
    if raw is UNSET or raw is None:
        return raw
    if not isinstance(raw, str):
        raise InputError(ErrorKind.WRONG_TYPE, f"{field_name} must be a string or null")
    return raw.strip() or None


def validate_booking_id(raw: Any) -> int:
    if isinstance(raw, bool):
        raise InputError(ErrorKind.INVALID_ID, "Invalid id")
    if isinstance(raw, str) and _ID_PATTERN.fullmatch(raw.strip()):
        raw = int(raw.strip())
    if not isinstance(raw, int):
        raise InputError(ErrorKind.INVALID_ID, f"Invalid id: {raw!r}")
    if not _ID_MIN <= raw <= _ID_MAX:
        raise InputError(ErrorKind.INVALID_ID, f"Invalid id: {raw} is out of range")
    return raw


def require_parameter(raw: Any, name: str) -> Any:
    """Reject a missing or blank parameter; strings come back trimmed."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise InputError(ErrorKind.MISSING_PARAMETER, f"{name} is required")
    if isinstance(raw, str):
        return raw.strip()
    return raw


def require_int_parameter(raw: Any, name: str) -> int:
    """Like ``require_parameter``, but the value must be a whole number.

    Digit strings are converted; anything else is ``InvalidDate``.
    """
    raw = require_parameter(raw, name)
    if isinstance(raw, str) and _ID_PATTERN.fullmatch(raw):
        return int(raw)
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise InputError(ErrorKind.INVALID_DATE, f"{name} must be an integer")
    return raw


def _check_year(year: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        raise InputError(ErrorKind.INVALID_DATE, f"year must be between {MINYEAR} and {MAXYEAR}")


def _first_of_month(year: int, month: int) -> Optional[str]:
    if year > MAXYEAR:
        return None
    return date(year, month, 1).isoformat()


def month_range(year: int, month: int) -> DayRange:
    """Return ``[year-month-01, first of next month)``; December wraps."""
    _check_year(year)
    if not 1 <= month <= 12:
        raise InputError(ErrorKind.INVALID_DATE, "month must be between 1 and 12")
    if month == 12:
        end = _first_of_month(year + 1, 1)
    else:
        end = _first_of_month(year, month + 1)
    return DayRange(date(year, month, 1).isoformat(), end)


def year_range(year: int) -> DayRange:
    _check_year(year)
    return DayRange(date(year, 1, 1).isoformat(), _first_of_month(year + 1, 1))


def date_range(year: Any, month: Any) -> Optional[DayRange]:
    """Pick the search range for the given filters (``None`` = unrestricted)."""
    if year is None:
        if month is not None:
            raise InputError(ErrorKind.MISSING_PARAMETER, "year is required when month is given")
        return None
    year = require_int_parameter(year, "year")
    if month is None:
        return year_range(year)
    return month_range(year, require_int_parameter(month, "month"))


def validate_new_booking(payload: BookingCreate) -> NewBooking:
    if payload.day is None:
        raise InputError(ErrorKind.REQUIRED, "day is required")
    day = validate_day(payload.day)
    name = validate_name(payload.name)
    phone = validate_contact_field(payload.phone, "phone")
    notes = validate_contact_field(payload.notes, "notes")
    return NewBooking(day=day, name=name, phone=phone, notes=notes)


def validate_changes(payload: BookingUpdate) -> BookingChanges:
    """Validate each field present in ``payload`` independently."""
    provided = payload.model_fields_set
    changes = BookingChanges()
    for name in UPDATABLE_FIELDS:
        if name not in provided:
            continue
        value = getattr(payload, name)
        if name == "name":
            changes.fields[name] = validate_name(value)
        else:
            changes.fields[name] = validate_contact_field(value, name)
    if not changes.fields:
        raise InputError(ErrorKind.NO_CHANGES, "No fields to update")
    return changes
