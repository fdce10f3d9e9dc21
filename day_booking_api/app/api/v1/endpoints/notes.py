"""
Note endpoints for API v1.
"""

from fastapi import APIRouter, Depends, status

from day_booking_api.app.api.v1.deps import get_note_service, http_error
from day_booking_api.app.core.errors import BookingError
from day_booking_api.app.schemas.note import NoteCreate, NoteCreated, NoteList
from day_booking_api.app.services.note_service import NoteService

router = APIRouter()


@router.post("", response_model=NoteCreated, status_code=status.HTTP_201_CREATED)
def create_note(
    note: NoteCreate | None = None,
    service: NoteService = Depends(get_note_service),
) -> NoteCreated:
    try:
        return NoteCreated(row=service.create_note(note or NoteCreate()))
    except BookingError as e:
        raise http_error(e) from e


@router.get("", response_model=NoteList)
def list_notes(service: NoteService = Depends(get_note_service)) -> NoteList:
    try:
        return NoteList(rows=service.list_notes())
    except BookingError as e:
        raise http_error(e) from e
