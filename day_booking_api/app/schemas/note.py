"""
Pydantic schemas for notes.

A note is a free-form title with a creation timestamp.  Notes have no
relation to bookings.
"""

from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    title: Any = Field(None, examples=["Call the supplier"])


class NoteRead(BaseModel):
    id: int
    title: str
    created_at: datetime


class NoteCreated(BaseModel):
    ok: bool = True
    row: NoteRead


class NoteList(BaseModel):
    ok: bool = True
    rows: List[NoteRead]
