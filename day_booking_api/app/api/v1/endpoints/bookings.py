"""
Client booking endpoints for API v1.

These routes register clients on business days, list and search them,
change or remove a booking and report a monthly summary.  All rules
(weekday check, per-day capacity, field normalisation) live in the
services; handlers only translate tagged errors into HTTP responses.

Handlers are plain ``def`` functions: FastAPI runs them in its thread
pool, so concurrent requests really do reach the store in parallel.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status

from day_booking_api.app.api.v1.deps import (
    get_booking_repository,
    get_search_service,
    get_summary_service,
    http_error,
)
from day_booking_api.app.core.errors import BookingError
from day_booking_api.app.schemas.booking import (
    BookingCreate,
    BookingCreated,
    BookingDeleted,
    BookingList,
    BookingRead,
    BookingUpdate,
    BookingUpdated,
    SummaryList,
)
from day_booking_api.app.services.booking_repository import BookingRepository
from day_booking_api.app.services.search_service import BookingSearchService
from day_booking_api.app.services.summary_service import MonthlySummaryService

router = APIRouter()


@router.post("", response_model=BookingCreated, status_code=status.HTTP_201_CREATED)
def create_client(
    booking: BookingCreate | None = None,
    repository: BookingRepository = Depends(get_booking_repository),
) -> BookingCreated:
    """Register a client on a business day.

    Returns the created row and how many slots remain on that day.
    A full day answers 409; invalid input answers 400.
    """
    try:
        row, remaining = repository.create(booking or BookingCreate())
    except BookingError as e:
        raise http_error(e) from e
    return BookingCreated(row=row, remaining=remaining)


@router.get("", response_model=BookingList)
def list_clients(
    day: Optional[str] = Query(None, description="Day to list (YYYY-MM-DD)"),
    repository: BookingRepository = Depends(get_booking_repository),
) -> BookingList:
    """List the clients booked on ``day`` in booking order."""
    try:
        return BookingList(rows=repository.list_for_day(day))
    except BookingError as e:
        raise http_error(e) from e


@router.get("/search", response_model=BookingList)
def search_clients(
    name: Optional[str] = Query(None, description="Case-insensitive name fragment"),
    year: Optional[int] = Query(None, description="Restrict to this year"),
    month: Optional[int] = Query(None, description="Restrict to this month (1-12); needs year"),
    service: BookingSearchService = Depends(get_search_service),
) -> BookingList:
    try:
        return BookingList(rows=service.search(name, year=year, month=month))
    except BookingError as e:
        raise http_error(e) from e


@router.get("/summary", response_model=SummaryList)
def monthly_summary(
    year: Optional[int] = Query(None),
    month: Optional[int] = Query(None, description="1-12"),
    service: MonthlySummaryService = Depends(get_summary_service),
) -> SummaryList:
    """Per-day booking counts and clients for one month."""
    try:
        return SummaryList(rows=service.summary(year, month))
    except BookingError as e:
        raise http_error(e) from e


@router.get("/{client_id}", response_model=BookingRead)
def get_client(
    client_id: str = Path(..., description="ID of the booking"),
    repository: BookingRepository = Depends(get_booking_repository),
) -> BookingRead:
    try:
        return repository.get(client_id)
    except BookingError as e:
        raise http_error(e) from e


@router.put("/{client_id}", response_model=BookingUpdated)
def update_client(
    client_id: str = Path(..., description="ID of the booking"),
    update: BookingUpdate | None = None,
    repository: BookingRepository = Depends(get_booking_repository),
) -> BookingUpdated:
    """Change the name, phone or notes of a booking.

    Omitted fields keep their value; ``null`` clears phone or notes.
    An empty body answers 400 ``NoChanges``.
    """
    try:
        row = repository.update(client_id, update or BookingUpdate())
    except BookingError as e:
        raise http_error(e) from e
    return BookingUpdated(id=row.id, row=row)


@router.delete("/{client_id}", response_model=BookingDeleted)
def delete_client(
    client_id: str = Path(..., description="ID of the booking"),
    repository: BookingRepository = Depends(get_booking_repository),
) -> BookingDeleted:
    """Delete a booking; its slot becomes available again."""
    try:
        deleted_id = repository.delete(client_id)
    except BookingError as e:
        raise http_error(e) from e
    return BookingDeleted(id=deleted_id)
