"""Daily pageview counter repository."""

from __future__ import annotations

import logging

from .base import BaseRepository

logger = logging.getLogger(__name__)


class PageviewRepository(BaseRepository):
    """Upsert and query operations for the pageviews table."""

    def increment(self, domain: str, page: str, date: str) -> None:
        """Add one view to the (domain, page, date) counter in a single statement."""
        with self.get_connection() as conn:
            conn.execute(
                """
                INSERT INTO pageviews (domain, page, date, view_count) VALUES (?, ?, ?, 1)
                ON CONFLICT (domain, page, date) DO UPDATE SET view_count = view_count + 1
                """,
                (domain, page, date),
            )

    def get_pageviews(self, domain: str | None = None) -> list[dict]:
        """Fetch daily rows newest first, optionally restricted to one domain."""
        query = "SELECT domain, page, date, view_count FROM pageviews"
        params: tuple = ()
        if domain is not None:
            query += " WHERE domain = ?"
            params = (domain,)
        query += " ORDER BY date DESC"

        with self.get_connection() as conn:
            rows = conn.execute(query, params).fetchall()
            return [dict(row) for row in rows]

    def get_view_count(self, domain: str, page: str, date: str) -> int | None:
        with self.get_connection() as conn:
            row = conn.execute(
                "SELECT view_count FROM pageviews WHERE domain = ? AND page = ? AND date = ?",
                (domain, page, date),
            ).fetchone()
            return int(row[0]) if row else None
