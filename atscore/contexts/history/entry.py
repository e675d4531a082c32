"""
Score history data structures.

A ScoreHistoryEntry is immutable once created. ScoreTrend summarises a run
of entries for one identity.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from atscore.utils.timestamp import now


@dataclass(frozen=True)
class ScoreHistoryEntry:
    """One recorded scoring run."""

    score: int
    filename: str = "resume"
    sector: str = "General"
    timestamp: datetime = field(default_factory=now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "filename": self.filename,
            "sector": self.sector,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoreHistoryEntry":
        """
        Rebuild an entry from to_dict() output.

        Raises:
            KeyError: If "score" is missing
            ValueError: If the timestamp is not ISO 8601
        """
        timestamp = data.get("timestamp")
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp)

        return cls(
            score=int(data["score"]),
            filename=data.get("filename") or "resume",
            sector=data.get("sector") or "General",
            timestamp=timestamp or now(),
        )


@dataclass(frozen=True)
class ScoreTrend:
    """
    Score movement over a window of history.

    Attributes:
        count: Number of entries in the window
        first: Oldest score in the window
        latest: Most recent score
        delta: latest - first
        average: Mean score, rounded to one decimal
        best: Highest score
    """

    count: int
    first: int
    latest: int
    delta: int
    average: float
    best: int

    @classmethod
    def from_entries(cls, entries: Sequence[ScoreHistoryEntry]) -> Optional["ScoreTrend"]:
        """Build a trend from entries ordered most recent first (None if empty)."""
        if not entries:
            return None

        scores = [entry.score for entry in entries]
        return cls(
            count=len(scores),
            first=scores[-1],
            latest=scores[0],
            delta=scores[0] - scores[-1],
            average=round(sum(scores) / len(scores), 1),
            best=max(scores),
        )
