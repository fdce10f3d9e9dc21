"""
Endpoint modules for API v1: ``bookings`` (``/clients``), ``notes`` and
``info`` (health and version).  Each defines an ``APIRouter`` that is
included by ``router.py``.
"""
