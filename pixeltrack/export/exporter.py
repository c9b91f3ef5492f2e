"""
Stats exporter for PixelTrack
Summarizes daily pageview rows and writes them out as JSON or CSV
"""
import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from ..database.manager import DatabaseManager

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ["domain", "page", "date", "view_count"]
EXPORT_FORMATS = ("json", "csv")


@dataclass
class ExportSummary:
    unique_pages: int = 0
    total_views: int = 0
    total_records: int = 0


@dataclass
class ExportResult:
    summary: ExportSummary
    pageviews: List[Dict] = field(default_factory=list)

    def to_dict(self) -> Dict:
        """Wire shape served by /stats.json"""
        return {
            "summary": asdict(self.summary),
            "pageviews": self.pageviews,
        }


class StatsExporter:
    """
    Read-only snapshot of the daily counters plus summary statistics
    """

    def __init__(self, db_manager: DatabaseManager):
        self.db = db_manager

    def export(self, domain: Optional[str] = None) -> ExportResult:
        """
        Export daily rows, newest date first

        Args:
            domain: Exact (case-sensitive) domain to restrict to, or None for all

        Returns:
            ExportResult with summary and per-row records

        Query errors propagate to the caller; there is no partial result.
        """
        rows = self.db.pageviews_repo.get_pageviews(domain)

        pages = set()
        total_views = 0
        pageviews = []
        for row in rows:
            pages.add(row["page"])
            total_views += row["view_count"]
            pageviews.append({col: row[col] for col in EXPORT_COLUMNS})

        summary = ExportSummary(
            unique_pages=len(pages),
            total_views=total_views,
            total_records=len(pageviews),
        )
        logger.debug(f"Exported {summary.total_records} rows (domain={domain!r})")
        return ExportResult(summary=summary, pageviews=pageviews)


def to_dataframe(result: ExportResult) -> pd.DataFrame:
    """Per-row records as a DataFrame with a stable column order"""
    return pd.DataFrame(result.pageviews, columns=EXPORT_COLUMNS)


def render_json(result: ExportResult) -> str:
    """Pretty-printed JSON body"""
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


def write_export(result: ExportResult, filepath: Path, fmt: str = "json") -> Path:
    """
    Write an export to disk

    Args:
        result: Export to write
        filepath: Destination file
        fmt: 'json' (summary + rows) or 'csv' (rows only)

    Returns:
        Path of the written file
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"format must be one of {EXPORT_FORMATS}")

    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "csv":
        to_dataframe(result).to_csv(filepath, index=False)
    else:
        filepath.write_text(render_json(result), encoding="utf-8")

    logger.info(f"Wrote {result.summary.total_records} rows to {filepath}")
    return filepath
