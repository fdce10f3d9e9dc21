"""Pytest configuration and shared fixtures for the booking service tests."""

from typing import Any, Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from day_booking_api.app.core.db import Database
from day_booking_api.app.main import create_app
from day_booking_api.app.schemas.booking import BookingCreate, BookingRead
from day_booking_api.app.services.booking_repository import BookingRepository
from day_booking_api.app.services.note_service import NoteService
from day_booking_api.app.services.search_service import BookingSearchService
from day_booking_api.app.services.summary_service import MonthlySummaryService


@pytest.fixture
def database(tmp_path) -> Database:
    """A migrated database in a temporary file."""
    db = Database(str(tmp_path / "bookings.db"), timeout=30)
    db.init_db()
    return db


@pytest.fixture
def repository(database: Database) -> BookingRepository:
    return BookingRepository(database)


@pytest.fixture
def search_service(database: Database) -> BookingSearchService:
    return BookingSearchService(database)


@pytest.fixture
def summary_service(database: Database) -> MonthlySummaryService:
    return MonthlySummaryService(database)


@pytest.fixture
def note_service(database: Database) -> NoteService:
    return NoteService(database)


@pytest.fixture
def book(repository: BookingRepository) -> Callable[..., BookingRead]:
    """Create a booking and return the stored row.

    Usage:
        ana = book("2024-06-03", "Ana", phone="555")
    """

    def _book(day: str, name: str, **fields: Any) -> BookingRead:
        row, _ = repository.create(BookingCreate(day=day, name=name, **fields))
        return row

    return _book


@pytest.fixture
def client(database: Database) -> Iterator[TestClient]:
    """HTTP client for an app serving the temporary database."""
    app = create_app(database)
    with TestClient(app) as test_client:
        yield test_client
