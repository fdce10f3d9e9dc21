"""
Pydantic models for day bookings.

Request models accept raw JSON values (``Any``) on purpose: the
booking validator inspects the values itself so that a wrong type, a
blank name or a weekend day each come back with their own error kind
instead of a generic 422.  Response models are strictly typed.
"""

from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class BookingCreate(BaseModel):
    """Body of ``POST /clients``."""

    day: Any = Field(None, description="Business day as YYYY-MM-DD", examples=["2024-06-03"])
    name: Any = Field(None, description="Client name; surrounding whitespace is trimmed", examples=["Ana"])
    phone: Any = Field(None, description="Optional phone; blank is stored as null")
    notes: Any = Field(None, description="Optional free-form notes; blank is stored as null")


class BookingUpdate(BaseModel):
    """Body of ``PUT /clients/{id}``.

    Only fields present in the request are changed; ``null`` clears
    ``phone`` or ``notes``.  The booking's ``day`` cannot be changed and
    unknown keys are ignored.
    """

    name: Any = None
    phone: Any = None
    notes: Any = None

    model_config = {"extra": "ignore"}


class BookingRead(BaseModel):
    id: int
    day: date
    name: str
    phone: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime

    model_config = {
        "from_attributes": True,
    }


class BookingCreated(BaseModel):
    ok: bool = True
    row: BookingRead
    # Free slots left on ``row.day`` once this booking committed.
    remaining: int


class BookingList(BaseModel):
    ok: bool = True
    rows: List[BookingRead]


class BookingUpdated(BaseModel):
    ok: bool = True
    id: int
    row: BookingRead


class BookingDeleted(BaseModel):
    ok: bool = True
    id: int


class SummaryClient(BaseModel):
    """A booking as listed in the monthly summary (nulls rendered as ``""``)."""

    id: int
    name: str
    phone: str = ""
    notes: str = ""


class DaySummary(BaseModel):
    day: date
    count: int
    clients: List[SummaryClient]


class SummaryList(BaseModel):
    ok: bool = True
    rows: List[DaySummary]
