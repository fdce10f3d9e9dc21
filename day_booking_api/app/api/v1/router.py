"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When a new domain is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import bookings, info, notes

router = APIRouter()

router.include_router(bookings.router, prefix="/clients", tags=["clients"])
router.include_router(notes.router, prefix="/notes", tags=["notes"])
# Defines ``/health`` and ``/version`` at the root of the version prefix.
router.include_router(info.router, tags=["info"])
