"""Day booking API client.

A thin wrapper around the HTTP API of the booking service, built on the
``requests`` library.  Every public method returns a tuple
``(data, error)``: on success ``error`` is ``None``; on failure ``data``
is empty and ``error`` is a dictionary with the keys ``status_code``,
``error`` (the service's error kind, e.g. ``"CapacityExceeded"``) and
``message``.

Any object with the ``requests.Session.request`` signature can be
injected as ``session``; the test-suite passes FastAPI's ``TestClient``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class DayBookingClient:
    """Client for the ``/api/v1`` routes of the booking service."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Root URL of the service, e.g. ``http://localhost:8000``.
                The ``/api/v1`` prefix is added by the client.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/") + "/api/v1"
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        url = f"{self.base_url}{path}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "error": None, "message": str(exc)}

        if response.status_code >= 400:
            error = self._parse_error(response)
            logger.error("API request failed (%s): %s", error["status_code"], error["message"])
            return None, error
        if response.content:
            return response.json(), None
        return None, None

    @staticmethod
    def _parse_error(response: Any) -> ApiError:
        kind = None
        message = ""
        try:
            detail = response.json().get("detail")
        except ValueError:
            detail = None
        if isinstance(detail, dict):
            kind = detail.get("error")
            message = detail.get("message") or ""
        elif detail is not None:
            message = str(detail)
        if not message:
            message = response.text or f"HTTP {response.status_code}"
        return {"status_code": response.status_code, "error": kind, "message": message}

    # ------------------------------------------------------------------
    # Booking operations
    # ------------------------------------------------------------------
    def create_booking(
        self,
        day: str,
        name: str,
        phone: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Book ``name`` on ``day``.

        Returns:
            A tuple ``(result, error)`` where ``result`` holds ``row`` (the
            created booking) and ``remaining`` (slots left that day).
        """
        payload = {"day": day, "name": name, "phone": phone, "notes": notes}
        return self._request("POST", "/clients", json_body=payload)

    def list_bookings(self, day: str) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._request("GET", "/clients", params={"day": day})
        if error:
            return [], error
        return data.get("rows", []), None

    def get_booking(self, booking_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"/clients/{booking_id}")

    def update_booking(
        self, booking_id: int, **fields: Any
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Update ``name``, ``phone`` and/or ``notes`` of a booking.

        Only keyword arguments that are passed are sent, so
        ``update_booking(7, phone=None)`` clears the phone and leaves the
        other fields alone.
        """
        data, error = self._request("PUT", f"/clients/{booking_id}", json_body=fields)
        if error:
            return None, error
        return data.get("row"), None

    def delete_booking(self, booking_id: int) -> Tuple[bool, Optional[ApiError]]:
        _, error = self._request("DELETE", f"/clients/{booking_id}")
        return error is None, error

    def search(
        self, name: str, year: Optional[int] = None, month: Optional[int] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        data, error = self._request(
            "GET", "/clients/search", params={"name": name, "year": year, "month": month}
        )
        if error:
            return [], error
        return data.get("rows", []), None

    def summary(self, year: int, month: int) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Return the monthly summary rows (``day``, ``count``, ``clients``)."""
        data, error = self._request("GET", "/clients/summary", params={"year": year, "month": month})
        if error:
            return [], error
        return data.get("rows", []), None

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", "/health")
