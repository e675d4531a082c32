"""
Storage backends for score history.

Both stores make insert-then-trim a single atomic step per identity, so
concurrent appends for the same identity never lose an entry. Eviction is
FIFO: the oldest entries beyond the cap are dropped.
"""

import sqlite3
import threading
from abc import ABC, abstractmethod
from collections import defaultdict
from pathlib import Path
from typing import Dict, List

from atscore.contexts.history.entry import ScoreHistoryEntry


class HistoryStore(ABC):
    """Append-only per-identity log of score history entries."""

    @abstractmethod
    def append(self, identity: str, entry: ScoreHistoryEntry, max_entries: int) -> List[ScoreHistoryEntry]:
        """
        Append an entry and trim the identity's log to max_entries.

        Returns:
            Evicted entries, oldest first (empty when under the cap)
        """

    @abstractmethod
    def recent(self, identity: str, limit: int) -> List[ScoreHistoryEntry]:
        """Up to ``limit`` entries, most recent first."""

    @abstractmethod
    def count(self, identity: str) -> int:
        """Number of retained entries for identity."""

    @abstractmethod
    def clear(self, identity: str) -> int:
        """Delete an identity's log, returning how many entries were removed."""


class InMemoryHistoryStore(HistoryStore):
    """
    Process-local store: a dict of lists guarded by one lock per identity.

    Appends for different identities never contend with each other.
    """

    def __init__(self):
        self._logs: Dict[str, List[ScoreHistoryEntry]] = defaultdict(list)
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, identity: str) -> threading.Lock:
        with self._locks_guard:
            if identity not in self._locks:
                self._locks[identity] = threading.Lock()
            return self._locks[identity]

    def append(self, identity: str, entry: ScoreHistoryEntry, max_entries: int) -> List[ScoreHistoryEntry]:
        with self._lock_for(identity):
            log = self._logs[identity]
            log.append(entry)
            overflow = len(log) - max_entries
            if overflow <= 0:
                return []
            evicted = log[:overflow]
            del log[:overflow]
            return evicted

    def recent(self, identity: str, limit: int) -> List[ScoreHistoryEntry]:
        with self._lock_for(identity):
            log = list(self._logs.get(identity, ()))
        return list(reversed(log))[:limit]

    def count(self, identity: str) -> int:
        with self._lock_for(identity):
            return len(self._logs.get(identity, ()))

    def clear(self, identity: str) -> int:
        with self._lock_for(identity):
            return len(self._logs.pop(identity, []))


class SQLiteHistoryStore(HistoryStore):
    """
    Persistent store backed by a SQLite file.

    Opens one connection per operation (connections are not shared between
    threads). Each append runs in a BEGIN IMMEDIATE transaction, which takes
    the database write lock before reading, so insert and trim cannot
    interleave with another writer.
    """

    def __init__(self, db_path: Path, busy_timeout: float = 30.0):
        """
        Open (creating if needed) a history database.

        Args:
            db_path: SQLite file path; parent directories are created
            busy_timeout: Seconds to wait for another writer's lock
        """
        self.db_path = Path(db_path)
        self.busy_timeout = busy_timeout
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = self._connect()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS history (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    identity TEXT NOT NULL,
                    score INTEGER NOT NULL,
                    filename TEXT NOT NULL,
                    sector TEXT NOT NULL,
                    timestamp TEXT NOT NULL
                )
            """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_history_identity ON history(identity, id)")
        finally:
            conn.close()

    def _connect(self) -> sqlite3.Connection:
        # Autocommit mode: transactions are opened explicitly
        conn = sqlite3.connect(str(self.db_path), timeout=self.busy_timeout, isolation_level=None)
        conn.row_factory = sqlite3.Row
        return conn

    @staticmethod
    def _to_entry(row: sqlite3.Row) -> ScoreHistoryEntry:
        return ScoreHistoryEntry.from_dict(dict(row))

    def append(self, identity: str, entry: ScoreHistoryEntry, max_entries: int) -> List[ScoreHistoryEntry]:
        conn = self._connect()
        try:
            conn.execute("BEGIN IMMEDIATE")
            conn.execute(
                "INSERT INTO history (identity, score, filename, sector, timestamp) VALUES (?, ?, ?, ?, ?)",
                (identity, entry.score, entry.filename, entry.sector, entry.timestamp.isoformat()),
            )
            rows = conn.execute(
                """
                SELECT id, score, filename, sector, timestamp FROM history
                WHERE identity = ?
                ORDER BY id DESC
                LIMIT -1 OFFSET ?
            """,
                (identity, max_entries),
            ).fetchall()
            if rows:
                conn.executemany("DELETE FROM history WHERE id = ?", [(row["id"],) for row in rows])
            conn.execute("COMMIT")
        except sqlite3.Error:
            if conn.in_transaction:
                conn.execute("ROLLBACK")
            raise
        finally:
            conn.close()

        return [self._to_entry(row) for row in reversed(rows)]

    def recent(self, identity: str, limit: int) -> List[ScoreHistoryEntry]:
        conn = self._connect()
        try:
            rows = conn.execute(
                """
                SELECT score, filename, sector, timestamp FROM history
                WHERE identity = ?
                ORDER BY id DESC
                LIMIT ?
            """,
                (identity, limit),
            ).fetchall()
        finally:
            conn.close()
        return [self._to_entry(row) for row in rows]

    def count(self, identity: str) -> int:
        conn = self._connect()
        try:
            (total,) = conn.execute("SELECT COUNT(*) FROM history WHERE identity = ?", (identity,)).fetchone()
        finally:
            conn.close()
        return total

    def clear(self, identity: str) -> int:
        conn = self._connect()
        try:
            cursor = conn.execute("DELETE FROM history WHERE identity = ?", (identity,))
            removed = cursor.rowcount
        finally:
            conn.close()
        return removed
