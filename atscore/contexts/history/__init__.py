"""
History Context

Responsibilities:
- Records one immutable entry per completed scoring run, keyed by identity
- Enforces a per-identity FIFO cap (oldest entries evicted first)
- Answers recency-ordered history and trend queries

Owns: ScoreHistoryEntry, ScoreTrend, HistoryTracker, history stores
Never: Computes scores or reads documents
"""

from atscore.contexts.history.entry import ScoreHistoryEntry, ScoreTrend
from atscore.contexts.history.stores import HistoryStore, InMemoryHistoryStore, SQLiteHistoryStore
from atscore.contexts.history.tracker import HistoryTracker

__all__ = [
    "ScoreHistoryEntry",
    "ScoreTrend",
    "HistoryStore",
    "InMemoryHistoryStore",
    "SQLiteHistoryStore",
    "HistoryTracker",
]
