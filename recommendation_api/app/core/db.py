"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), applying migrations on application start
(``init_db``) and a per‑request connection dependency for FastAPI
routes (``get_db``).  It uses SQLite as a lightweight embedded
database; to switch to another DBMS you would replace connection
logic and adapt SQL syntax accordingly.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import AsyncIterator, Iterator

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        -- AUTOINCREMENT keeps ids of deleted rows from being handed out again.
        CREATE TABLE IF NOT EXISTS recommendations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL UNIQUE,
            youtube_link TEXT NOT NULL,
            score INTEGER NOT NULL DEFAULT 0,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
    # Migration 2: index used by top and random selection
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_recommendations_score ON recommendations(score);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # recommendation_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  ``check_same_thread`` is disabled because FastAPI may run a
    request's dependencies and handler on different threads; a
    connection is still never shared between requests.
    """
    db_path = get_database_path()
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


async def get_db() -> AsyncIterator[sqlite3.Connection]:
    """FastAPI dependency yielding one connection per request."""
    conn = get_connection()
    try:
        yield conn
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  If you add a new migration, append it with an
    incremented version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
