"""
Health and version endpoints for API v1.

``/health`` answers without touching the database so it can be used as
a liveness probe; ``/version`` queries the store and therefore also
shows whether the database file is reachable.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from day_booking_api.app.api.v1.deps import get_info_service, http_error
from day_booking_api.app.core.errors import BookingError
from day_booking_api.app.services.info_service import InfoService

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
def health(service: InfoService = Depends(get_info_service)) -> Dict[str, Any]:
    return service.health()


@router.get("/version", response_model=Dict[str, Any])
def version(service: InfoService = Depends(get_info_service)) -> Dict[str, Any]:
    """Return the SQLite version of the store."""
    try:
        return service.version()
    except BookingError as e:
        raise http_error(e) from e
