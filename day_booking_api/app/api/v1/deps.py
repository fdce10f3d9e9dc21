"""
Shared dependencies for v1 endpoints.

Services are built per request from the application's ``Database`` so
handlers never reach for a module-level connection.  ``http_error``
converts a tagged ``BookingError`` into the matching ``HTTPException``.
"""

from fastapi import Depends, HTTPException, status

from day_booking_api.app.core.db import Database, get_database
from day_booking_api.app.core.errors import BookingError, ErrorKind
from day_booking_api.app.services.booking_repository import BookingRepository
from day_booking_api.app.services.info_service import InfoService
from day_booking_api.app.services.note_service import NoteService
from day_booking_api.app.services.search_service import BookingSearchService
from day_booking_api.app.services.summary_service import MonthlySummaryService

_STATUS_BY_KIND = {
    ErrorKind.CAPACITY_EXCEEDED: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def http_error(exc: BookingError) -> HTTPException:
    # Every input error kind maps to 400.
    return HTTPException(
        status_code=_STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST),
        detail=exc.to_dict(),
    )


def get_booking_repository(database: Database = Depends(get_database)) -> BookingRepository:
    return BookingRepository(database)


def get_search_service(database: Database = Depends(get_database)) -> BookingSearchService:
    return BookingSearchService(database)


def get_summary_service(database: Database = Depends(get_database)) -> MonthlySummaryService:
    return MonthlySummaryService(database)


def get_note_service(database: Database = Depends(get_database)) -> NoteService:
    return NoteService(database)


def get_info_service(database: Database = Depends(get_database)) -> InfoService:
    return InfoService(database)
