"""
Application package.

Contains the FastAPI entrypoint (``main``), shared infrastructure
(``core``: configuration, logging, database, errors), request and
response models (``schemas``), business logic (``services``) and the
versioned HTTP routes (``api/v1``).
"""

from .main import app, create_app  # noqa: F401
