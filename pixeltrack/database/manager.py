"""
Database Manager for PixelTrack
Owns the single SQLite connection and serializes every operation against it
"""
import sqlite3
import threading
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from ..config import config
from .migrations.runner import MigrationRunner
from .repos import PageviewRepository

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Database manager for the aggregated pageview store

    All access goes through one connection guarded by one lock, so at most
    one schema/counter/export operation runs against the store at a time.
    """

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize database manager

        Args:
            db_path: Path to database file, or ":memory:"
        """
        self.db_path = db_path or config.DB_PATH
        self._lock = threading.Lock()

        if str(self.db_path) != ':memory:':
            # Create database directory if needed
            Path(self.db_path).parent.mkdir(exist_ok=True, parents=True)

        # isolation_level=None: transactions are opened explicitly below
        self._conn = sqlite3.connect(
            str(self.db_path), check_same_thread=False, isolation_level=None
        )
        self._conn.row_factory = sqlite3.Row
        self.pageviews_repo = PageviewRepository(self)

        try:
            self._conn.execute("PRAGMA journal_mode = WAL")
            self._conn.execute("PRAGMA synchronous = NORMAL")
            self._conn.execute("PRAGMA busy_timeout = 5000")

            # Schema must be settled before the manager is handed to any caller
            self.ensure_schema()
        except Exception:
            self._conn.close()
            raise

    @contextmanager
    def get_connection(self):
        """Context manager yielding the locked connection inside a transaction"""
        with self._lock:
            conn = self._conn
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield conn
                conn.commit()
            except Exception as e:
                conn.rollback()
                logger.error(f"Database error: {e}")
                raise

    def ensure_schema(self) -> int:
        """Bring the store up to the aggregated schema. Returns migrations applied."""
        with self._lock:
            return MigrationRunner(self._conn).run_pending()

    def get_schema_version(self) -> int:
        """Return the latest applied migration number"""
        with self._lock:
            return MigrationRunner(self._conn).get_current_version()

    def table_exists(self, name: str) -> bool:
        with self._lock:
            row = self._conn.execute(
                "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?",
                (name,),
            ).fetchone()
            return row is not None

    def close(self) -> None:
        """Close the underlying connection"""
        with self._lock:
            self._conn.close()
