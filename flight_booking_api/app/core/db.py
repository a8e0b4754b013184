"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager (``get_cursor``) and
the schema bootstrap (``init_db``) used by the SQLite record store.
SQLite is only used when ``DATABASE_URL`` is set; otherwise the
services keep their records in memory.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


# Range of SQLite INTEGER values; Python ints outside it cannot be bound.
SQLITE_MIN_INTEGER = -(2 ** 63)
SQLITE_MAX_INTEGER = 2 ** 63 - 1

TABLES: dict[str, str] = {
    "users": """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT,
            email TEXT
        );
    """,
    "flights": """
        CREATE TABLE IF NOT EXISTS flights (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            origin TEXT,
            destination TEXT,
            -- Untyped so integer and fractional prices read back unchanged.
            price,
            user_id INTEGER
        );
    """,
}


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    If ``database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    if os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


def get_connection(database_url: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  ``check_same_thread`` is disabled because the store may be
    used from the threadpool as well as the event loop thread; access
    is serialised by the store's lock.
    """
    conn = sqlite3.connect(get_database_path(database_url), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_url: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(database_url)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(database_url: str, table: str) -> None:
    """Create ``table`` if it does not exist yet."""
    with get_cursor(database_url) as cursor:
        cursor.executescript(TABLES[table])
