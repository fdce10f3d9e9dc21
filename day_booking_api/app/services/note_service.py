"""
Service layer for notes.

Notes are free-form titles kept next to the bookings; they have no
rules beyond a non-blank title.
"""

from __future__ import annotations

import logging
from typing import List

from day_booking_api.app.core.db import Database
from day_booking_api.app.core.errors import ErrorKind, InputError
from day_booking_api.app.schemas.note import NoteCreate, NoteRead


class NoteService:
    def __init__(self, database: Database) -> None:
        self.database = database

    def create_note(self, data: NoteCreate) -> NoteRead:
        logger = logging.getLogger(__name__)
        if not isinstance(data.title, str) or not data.title.strip():
            raise InputError(ErrorKind.REQUIRED, "title is required")
        with self.database.transaction() as cursor:
            cursor.execute("INSERT INTO notes (title) VALUES (?)", (data.title.strip(),))
            note_id = cursor.lastrowid
            row = cursor.execute(
                "SELECT id, title, created_at FROM notes WHERE id = ?",
                (note_id,),
            ).fetchone()
        logger.info("Created note %s", note_id)
        return NoteRead(**dict(row))

    def list_notes(self) -> List[NoteRead]:
        """Return all notes, newest first."""
        with self.database.connection() as conn:
            rows = conn.execute("SELECT id, title, created_at FROM notes ORDER BY id DESC").fetchall()
        return [NoteRead(**dict(row)) for row in rows]
