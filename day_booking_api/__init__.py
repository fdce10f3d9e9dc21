"""
Top‑level package for the Day Booking API.

The service itself lives in ``day_booking_api.app``; ``client`` holds a
small HTTP client for talking to a running instance.
"""

__all__ = []
