"""
Scoring Context

Responsibilities:
- Combines document features and JD keyword coverage into a bounded score
- Derives the display breakdown from the final score
- Computes matched/missing keywords, strengths, weaknesses and suggestions
- Runs the end-to-end pipeline and renders reports

Owns: ScoreResult, GapAnalysis, score_resume()
Never: Parses file formats (intake) or stores history itself (history)
"""

from atscore.contexts.scoring.engine import compute_score
from atscore.contexts.scoring.gap import GapAnalysis, analyze_gap
from atscore.contexts.scoring.pipeline import get_history, score_resume
from atscore.contexts.scoring.report import render_markdown_report, render_text_report
from atscore.contexts.scoring.result import ScoreResult, derive_breakdown

__all__ = [
    "compute_score",
    "analyze_gap",
    "GapAnalysis",
    "score_resume",
    "get_history",
    "render_markdown_report",
    "render_text_report",
    "ScoreResult",
    "derive_breakdown",
]
