"""
Shared pytest fixtures for PixelTrack tests.
"""

import sqlite3
from datetime import datetime, timezone

import pytest

# 2024-03-01 00:00:00 UTC and the following day
DAY1_TS = 1709251200
DAY2_TS = DAY1_TS + 86400
DAY1 = "2024-03-01"
DAY2 = "2024-03-02"


@pytest.fixture
def tmp_db(tmp_path):
    """Fresh, fully migrated database for each test."""
    from pixeltrack.database.manager import DatabaseManager

    db = DatabaseManager(db_path=tmp_path / "test.db")
    yield db
    db.close()


@pytest.fixture
def legacy_db_path(tmp_path):
    """Database file in the pre-aggregation event-log layout."""
    path = tmp_path / "legacy.db"
    conn = sqlite3.connect(str(path))
    conn.execute("CREATE TABLE pageviews (ts INTEGER NOT NULL, domain TEXT NOT NULL, page TEXT NOT NULL)")
    conn.executemany(
        "INSERT INTO pageviews (ts, domain, page) VALUES (?, ?, ?)",
        [
            (DAY1_TS + 3600, "d1.com", "/a"),
            (DAY1_TS + 86399, "d1.com", "/a"),
            (DAY2_TS + 60, "d1.com", "/a"),
            (DAY1_TS + 7200, "d2.com", "/b"),
        ],
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def fixed_clock():
    """Mutable UTC clock: set ``fixed_clock.now`` to move time."""

    class _Clock:
        now = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

        def __call__(self):
            return self.now

    return _Clock()


@pytest.fixture
def seed_pageviews(tmp_db):
    """Insert (domain, page, date, view_count) rows directly into tmp_db."""

    def _seed(rows):
        with tmp_db.get_connection() as conn:
            conn.executemany(
                "INSERT INTO pageviews (domain, page, date, view_count) VALUES (?, ?, ?, ?)",
                rows,
            )

    return _seed


@pytest.fixture
def app(tmp_db):
    """Flask app configured for testing with isolated DB."""
    from app import create_app

    flask_app = create_app(tmp_db)
    flask_app.config["TESTING"] = True
    yield flask_app


@pytest.fixture
def client(app):
    """Flask test client with isolated DB."""
    with app.test_client() as c:
        yield c
