"""
Score history tracker.

Append-only, per-identity log of scoring runs with a FIFO cap. Identity is
always passed explicitly; the tracker holds no notion of a current user.

Usage:
    tracker = HistoryTracker(InMemoryHistoryStore(), max_entries=20)
    tracker.append_entry("user-42", ScoreHistoryEntry(score=71, filename="cv.pdf"))
    tracker.get_history("user-42", limit=5)
"""

import warnings
from pathlib import Path
from typing import List, Optional

from atscore.contexts.history.entry import ScoreHistoryEntry, ScoreTrend
from atscore.contexts.history.logger import (
    log_history_append,
    log_history_cleared,
    log_history_eviction,
)
from atscore.contexts.history.stores import HistoryStore, InMemoryHistoryStore, SQLiteHistoryStore
from atscore.exceptions import ConfigError, HistoryCapacityExceeded, InvalidLimitError
from atscore.utils.config import HistoryConfig


def _require_positive(value, name: str) -> int:
    # bool is an int subclass but never a meaningful limit
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidLimitError(value, name=name)
    return value


class HistoryTracker:
    """
    Per-identity score history with a maximum retained count.

    Attributes:
        store: Backend holding the logs
        max_entries: Entries retained per identity (oldest evicted first)
        default_limit: Entries returned by get_history() without a limit
    """

    def __init__(
        self,
        store: Optional[HistoryStore] = None,
        max_entries: int = 20,
        default_limit: int = 10,
    ):
        self.store = store if store is not None else InMemoryHistoryStore()
        self.max_entries = _require_positive(max_entries, "max_entries")
        self.default_limit = _require_positive(default_limit, "default_limit")

    @classmethod
    def from_config(cls, config: HistoryConfig, db_path: Optional[Path] = None) -> "HistoryTracker":
        """
        Build a tracker from HistoryConfig.

        Args:
            config: History settings
            db_path: Overrides config.db_path (and selects the sqlite backend)

        Raises:
            ConfigError: If the backend name is unknown
        """
        backend = "sqlite" if db_path is not None else config.backend
        if backend == "memory":
            store = InMemoryHistoryStore()
        elif backend == "sqlite":
            store = SQLiteHistoryStore(Path(db_path or config.db_path))
        else:
            raise ConfigError(f"Unknown history backend: {backend!r} (expected 'memory' or 'sqlite')")

        return cls(store, max_entries=config.max_entries, default_limit=config.default_limit)

    @staticmethod
    def _check_identity(identity: str) -> str:
        if not identity or not str(identity).strip():
            raise ValueError("History identity must be a non-empty string")
        return str(identity)

    def append_entry(self, identity: str, entry: ScoreHistoryEntry) -> List[ScoreHistoryEntry]:
        """
        Record an entry for identity.

        When the log exceeds max_entries the oldest entries are evicted and a
        HistoryCapacityExceeded warning is emitted; the append still succeeds.

        Returns:
            Evicted entries, oldest first
        """
        identity = self._check_identity(identity)
        evicted = self.store.append(identity, entry, self.max_entries)
        log_history_append(identity, entry)

        if evicted:
            log_history_eviction(identity, evicted, self.max_entries)
            warnings.warn(
                HistoryCapacityExceeded(
                    f"History for '{identity}' is capped at {self.max_entries} entries; "
                    f"evicted {len(evicted)} oldest"
                ),
                stacklevel=2,
            )
        return evicted

    def get_history(self, identity: str, limit: Optional[int] = None) -> List[ScoreHistoryEntry]:
        """
        Most recent entries first.

        Raises:
            InvalidLimitError: If limit is not a positive integer
        """
        identity = self._check_identity(identity)
        limit = self.default_limit if limit is None else _require_positive(limit, "limit")
        return self.store.recent(identity, limit)

    def latest(self, identity: str) -> Optional[ScoreHistoryEntry]:
        entries = self.get_history(identity, limit=1)
        return entries[0] if entries else None

    def trend(self, identity: str, limit: Optional[int] = None) -> Optional[ScoreTrend]:
        """Score trend over the most recent ``limit`` entries (None without history)."""
        return ScoreTrend.from_entries(self.get_history(identity, limit))

    def count(self, identity: str) -> int:
        return self.store.count(self._check_identity(identity))

    def clear(self, identity: str) -> int:
        identity = self._check_identity(identity)
        removed = self.store.clear(identity)
        log_history_cleared(identity, removed)
        return removed
