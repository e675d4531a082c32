"""
Score result data structure and its display breakdown.

The breakdown sub-scores are a presentation-layer derivation of the final
score (fixed offsets, then clamped). Nothing downstream reads them as input.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from atscore.utils.config import BreakdownRule
from atscore.utils.timestamp import now

BREAKDOWN_CATEGORIES = ("skills", "formatting", "keywords", "experience")


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def derive_breakdown(score: int, rules: Mapping[str, BreakdownRule]) -> Dict[str, int]:
    """
    Derive display sub-scores from the final score.

    Args:
        score: Final clamped score
        rules: Category name -> BreakdownRule (offset, floor, ceiling)

    Returns:
        Category name -> sub-score, in the rules' order
    """
    return {
        name: clamp(score + rule.offset, rule.floor, rule.ceiling)
        for name, rule in rules.items()
    }


@dataclass(frozen=True)
class ScoreResult:
    """
    Output of one scoring run.

    matched_keywords and missing_keywords are disjoint, keep the job
    description's rank order, and together make up its keyword set. Both
    are empty when no job description was supplied. job_description_used is
    set whenever the job description path was scored, even when the job
    description yielded no keywords.
    """

    score: int
    breakdown: Dict[str, int] = field(default_factory=dict)
    matched_keywords: tuple[str, ...] = ()
    missing_keywords: tuple[str, ...] = ()
    strengths: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()
    sector: Optional[str] = None
    timestamp: datetime = field(default_factory=now)
    parsed_snippet: Optional[str] = None
    job_description_used: bool = False

    @property
    def has_job_description(self) -> bool:
        return self.job_description_used

    @property
    def match_ratio(self) -> float:
        total = len(self.matched_keywords) + len(self.missing_keywords)
        return len(self.matched_keywords) / total if total else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping using the camelCase wire keys."""
        data = {
            "score": self.score,
            "breakdown": dict(self.breakdown),
            "matchedKeywords": list(self.matched_keywords),
            "missingKeywords": list(self.missing_keywords),
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "suggestions": list(self.suggestions),
            "sector": self.sector,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.parsed_snippet is not None:
            data["parsedSnippet"] = self.parsed_snippet
        return data

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
