"""Migration m001: Aggregate the per-event pageviews log into daily counters.

The first deployment stored one row per view (`ts INTEGER, domain, page`).
The daily schema keeps one row per (domain, page, date) with a running
`view_count`. Stores created before versioning existed may already hold the
daily table; those are adopted as-is.

Runs inside the runner's transaction: a failure at any step leaves the
legacy table untouched.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)

# Column names that only exist in the event-log layout
LEGACY_TIMESTAMP_COLUMNS = ("ts", "timestamp")

CREATE_PAGEVIEWS = """
    CREATE TABLE IF NOT EXISTS pageviews (
        domain TEXT NOT NULL,
        page TEXT NOT NULL,
        date TEXT NOT NULL,
        view_count INTEGER NOT NULL DEFAULT 1,
        PRIMARY KEY (domain, page, date)
    )
"""


def _legacy_timestamp_column(conn: Any) -> str | None:
    """Return the event-log timestamp column of `pageviews`, if it has one."""
    columns = [row[1] for row in conn.execute("PRAGMA table_info(pageviews)").fetchall()]
    for name in LEGACY_TIMESTAMP_COLUMNS:
        if name in columns:
            return name
    return None


def up(conn: Any) -> None:
    ts_column = _legacy_timestamp_column(conn)
    if ts_column is None:
        # Fresh store, or daily table created before schema_version existed
        conn.execute(CREATE_PAGEVIEWS)
        return

    legacy_rows = conn.execute("SELECT COUNT(*) FROM pageviews").fetchone()[0]
    logger.info(f"Migrating {legacy_rows} pageview events to daily counters...")

    conn.execute("ALTER TABLE pageviews RENAME TO pageviews_old")
    conn.execute(CREATE_PAGEVIEWS)
    conn.execute(f"""
        INSERT INTO pageviews (domain, page, date, view_count)
        SELECT COALESCE(NULLIF(domain, ''), 'unknown'), COALESCE(NULLIF(page, ''), '/unknown'),
               date("{ts_column}", 'unixepoch'), COUNT(*)
        FROM pageviews_old
        GROUP BY COALESCE(NULLIF(domain, ''), 'unknown'), COALESCE(NULLIF(page, ''), '/unknown'),
                 date("{ts_column}", 'unixepoch')
    """)

    # Every event must be accounted for before the log is dropped
    migrated = conn.execute("SELECT COALESCE(SUM(view_count), 0) FROM pageviews").fetchone()[0]
    if migrated != legacy_rows:
        raise RuntimeError(
            f"Aggregation verification failed: expected {legacy_rows} views, "
            f"got {migrated}. Legacy table preserved."
        )

    conn.execute("DROP TABLE pageviews_old")
    logger.info(f"Migration completed: {legacy_rows} events folded into daily rows")
