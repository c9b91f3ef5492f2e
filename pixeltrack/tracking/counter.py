"""View counter — records one page view against today's daily row."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from ..database.manager import DatabaseManager

logger = logging.getLogger(__name__)

UNKNOWN_DOMAIN = "unknown"
UNKNOWN_PAGE = "/unknown"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RecordOutcome:
    """Result of a RecordView call, kept for logging even though callers ignore it."""

    recorded: bool
    domain: str
    page: str
    date: str
    error: str | None = None


class ViewCounter:
    """Records page views as atomic upserts on the daily pageviews table.

    Failures never propagate: the pixel response must go out regardless, so a
    store error is logged and returned as ``recorded=False``.
    """

    def __init__(self, db_manager: DatabaseManager, clock: Callable[[], datetime] | None = None) -> None:
        self.db = db_manager
        self.clock = clock or utc_now

    def today(self) -> str:
        """Current UTC calendar date as YYYY-MM-DD."""
        return self.clock().astimezone(timezone.utc).strftime("%Y-%m-%d")

    def record_view(self, domain: str | None, page: str | None) -> RecordOutcome:
        domain = domain or UNKNOWN_DOMAIN
        page = page or UNKNOWN_PAGE
        date = self.today()

        try:
            self.db.pageviews_repo.increment(domain, page, date)
        except sqlite3.Error as e:
            # Dropped view: surfaced in the log only, the pixel is still served
            logger.error(f"Failed to record view for {domain!r} {page!r} on {date}: {e}")
            return RecordOutcome(False, domain, page, date, error=str(e))

        return RecordOutcome(True, domain, page, date)
