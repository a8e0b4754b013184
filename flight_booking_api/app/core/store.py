"""
Record stores backing the collection services.

A record store holds an ordered collection of records of one entity
type keyed by an integer ``id``.  Two implementations are provided:

* ``InMemoryRecordStore`` keeps records in a list for the lifetime of
  the process.
* ``SQLiteRecordStore`` keeps records in one SQLite table.

Both assign ids from a monotonically increasing counter (SQLite's
``AUTOINCREMENT`` in the persistent case), so ids are never reused
after a deletion.  Every operation runs under a single lock owned by
the store.  Records are plain dictionaries; callers always receive
copies, never references into the store.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Optional

from flight_booking_api.app.core import db
from flight_booking_api.app.core.errors import InternalError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class RecordStore:
    """Interface shared by all record stores."""

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = tuple(fields)
        self._lock = threading.Lock()

    def _clean(self, data: Record) -> Record:
        """Keep only known fields, filling missing ones with ``None``."""
        return {name: data.get(name) for name in self.fields}

    def insert(self, data: Record) -> Record:
        raise NotImplementedError

    def list(self) -> List[Record]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[Record]:
        raise NotImplementedError

    def replace_by_id(self, record_id: int, data: Record) -> Optional[Record]:
        raise NotImplementedError

    def delete_by_id(self, record_id: int) -> None:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError


class InMemoryRecordStore(RecordStore):
    """Ordered in-memory collection with its own id counter."""

    def __init__(self, fields: Iterable[str]) -> None:
        super().__init__(fields)
        self._records: List[Record] = []
        self._next_id = 1

    def insert(self, data: Record) -> Record:
        with self._lock:
            record = {"id": self._next_id, **self._clean(data)}
            self._next_id += 1
            self._records.append(record)
            return dict(record)

    def list(self) -> List[Record]:
        with self._lock:
            return [dict(record) for record in self._records]

    def get_by_id(self, record_id: int) -> Optional[Record]:
        with self._lock:
            record = self._find(record_id)
            return dict(record) if record is not None else None

    def replace_by_id(self, record_id: int, data: Record) -> Optional[Record]:
        with self._lock:
            record = self._find(record_id)
            if record is None:
                return None
            record.update(self._clean(data))
            return dict(record)

    def delete_by_id(self, record_id: int) -> None:
        with self._lock:
            self._records = [r for r in self._records if r["id"] != record_id]

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def _find(self, record_id: int) -> Optional[Record]:
        for record in self._records:
            if record["id"] == record_id:
                return record
        return None


class SQLiteRecordStore(RecordStore):
    """Record store persisted in a single SQLite table.

    The table is created on construction if needed.  Column names
    match the store's field names.
    """

    def __init__(self, table: str, fields: Iterable[str], database_url: str) -> None:
        super().__init__(fields)
        self.table = table
        self.database_url = database_url
        db.init_db(database_url, table)

    def insert(self, data: Record) -> Record:
        values = self._clean(data)
        columns = ", ".join(self.fields)
        placeholders = ", ".join("?" for _ in self.fields)
        with self._lock, self._cursor() as cursor:
            cursor.execute(
                f"INSERT INTO {self.table} ({columns}) VALUES ({placeholders})",
                tuple(values[name] for name in self.fields),
            )
            return {"id": cursor.lastrowid, **values}

    def list(self) -> List[Record]:
        with self._lock, self._cursor() as cursor:
            rows = cursor.execute(f"SELECT * FROM {self.table} ORDER BY id ASC").fetchall()
            return [self._row_to_record(row) for row in rows]

    def get_by_id(self, record_id: int) -> Optional[Record]:
        if not self._storable_id(record_id):
            return None
        with self._lock, self._cursor() as cursor:
            row = cursor.execute(
                f"SELECT * FROM {self.table} WHERE id = ?", (record_id,)
            ).fetchone()
            return self._row_to_record(row) if row else None

    def replace_by_id(self, record_id: int, data: Record) -> Optional[Record]:
        if not self._storable_id(record_id):
            return None
        values = self._clean(data)
        assignments = ", ".join(f"{name} = ?" for name in self.fields)
        with self._lock, self._cursor() as cursor:
            cursor.execute(
                f"UPDATE {self.table} SET {assignments} WHERE id = ?",
                tuple(values[name] for name in self.fields) + (record_id,),
            )
            if cursor.rowcount == 0:
                return None
            return {"id": record_id, **values}

    def delete_by_id(self, record_id: int) -> None:
        if not self._storable_id(record_id):
            return
        with self._lock, self._cursor() as cursor:
            cursor.execute(f"DELETE FROM {self.table} WHERE id = ?", (record_id,))

    def count(self) -> int:
        with self._lock, self._cursor() as cursor:
            row = cursor.execute(f"SELECT COUNT(*) AS total FROM {self.table}").fetchone()
            return row["total"]

    @staticmethod
    def _storable_id(record_id: int) -> bool:
        """Ids SQLite cannot represent can never match a row."""
        return db.SQLITE_MIN_INTEGER <= record_id <= db.SQLITE_MAX_INTEGER

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, turning driver failures into ``InternalError``."""
        try:
            with db.get_cursor(self.database_url) as cursor:
                yield cursor
        except sqlite3.Error as exc:
            logger.error("SQLite error on %s: %s", self.table, exc)
            raise InternalError(f"Storage failure on {self.table}") from exc

    def _row_to_record(self, row: sqlite3.Row) -> Record:
        return {"id": row["id"], **{name: row[name] for name in self.fields}}


def build_store(table: str, fields: Iterable[str], database_url: str = "") -> RecordStore:
    """Return the store matching ``database_url``.

    An empty URL selects the in-memory store; anything else is taken
    as a SQLite database path.
    """
    if not database_url:
        logger.info("Using in-memory store for %s", table)
        return InMemoryRecordStore(fields)
    logger.info("Using SQLite store for %s at %s", table, database_url)
    return SQLiteRecordStore(table, fields, database_url)
