"""
atscore: ATS compatibility scoring for resumes.

    from atscore import score_resume

    result = score_resume(resume_text, jd_text)
    print(result.score, result.missing_keywords)
"""

from atscore.contexts.history.entry import ScoreHistoryEntry
from atscore.contexts.history.tracker import HistoryTracker
from atscore.contexts.scoring.pipeline import get_history, score_resume
from atscore.contexts.scoring.result import ScoreResult
from atscore.exceptions import (
    ConfigError,
    EmptyDocumentError,
    HistoryCapacityExceeded,
    InvalidLimitError,
    ScoringError,
    ScoringTimeoutError,
    UnreadableDocumentError,
)

__version__ = "0.1.0"

__all__ = [
    "score_resume",
    "get_history",
    "ScoreResult",
    "ScoreHistoryEntry",
    "HistoryTracker",
    "ScoringError",
    "EmptyDocumentError",
    "UnreadableDocumentError",
    "InvalidLimitError",
    "ScoringTimeoutError",
    "ConfigError",
    "HistoryCapacityExceeded",
]
