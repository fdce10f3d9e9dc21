"""
Health and version information.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from day_booking_api.app.core.config import settings
from day_booking_api.app.core.db import Database


class InfoService:
    def __init__(self, database: Database) -> None:
        self.database = database

    def health(self) -> Dict[str, Any]:
        # Does not touch the store: reports that the process is serving.
        return {
            "ok": True,
            "service": settings.project_name,
            "time": datetime.now(timezone.utc).isoformat(),
        }

    def version(self) -> Dict[str, Any]:
        """Return the SQLite library version reported by the store."""
        with self.database.connection() as conn:
            row = conn.execute("SELECT sqlite_version() AS version").fetchone()
        return {"ok": True, "version": row["version"] if row else None}
