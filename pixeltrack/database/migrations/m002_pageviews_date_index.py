"""Migration m002: Index pageviews by date for newest-first exports."""

from typing import Any


def up(conn: Any) -> None:
    conn.execute("CREATE INDEX IF NOT EXISTS idx_pageviews_date ON pageviews(date)")
    conn.execute("CREATE INDEX IF NOT EXISTS idx_pageviews_domain_date ON pageviews(domain, date)")


def down(conn: Any) -> None:
    conn.execute("DROP INDEX IF EXISTS idx_pageviews_domain_date")
    conn.execute("DROP INDEX IF EXISTS idx_pageviews_date")
