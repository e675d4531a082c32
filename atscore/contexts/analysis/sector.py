"""
Heuristic sector detection.

Votes resume tokens against a fixed sector vocabulary and returns the sector
with the most hits. Used to label history entries when the caller does not
supply a sector.
"""

from collections import Counter

from atscore.contexts.analysis.tokenizer import tokenize

DEFAULT_SECTOR = "General"

# Sector -> indicative single-word terms (checked against tokens, not substrings)
SECTOR_TERMS: dict[str, tuple[str, ...]] = {
    "Software": (
        "software", "developer", "javascript", "typescript", "react", "node",
        "backend", "frontend", "api", "microservices", "devops", "docker",
    ),
    "Data": (
        "data", "analytics", "sql", "pandas", "statistics", "tableau",
        "etl", "warehouse", "ml", "modeling", "spark",
    ),
    "Design": (
        "design", "designer", "figma", "ux", "ui", "wireframes",
        "prototyping", "typography", "illustrator", "photoshop",
    ),
    "Marketing": (
        "marketing", "seo", "campaigns", "brand", "content", "social",
        "advertising", "growth", "crm",
    ),
    "Finance": (
        "finance", "financial", "accounting", "audit", "budgeting",
        "investment", "banking", "tax", "forecasting",
    ),
    "Healthcare": (
        "patient", "clinical", "healthcare", "nursing", "medical",
        "hospital", "pharmacy", "care",
    ),
}

# Fewer hits than this is not enough evidence to leave "General"
MIN_SECTOR_HITS = 2


def sector_scores(text: str) -> dict[str, int]:
    """Count token hits per sector, in table order."""
    counts = Counter(tokenize(text))
    return {
        sector: sum(counts[term] for term in terms)
        for sector, terms in SECTOR_TERMS.items()
    }


def detect_sector(text: str) -> str:
    """
    Return the best-matching sector name, or "General".

    Ties go to the sector listed first in SECTOR_TERMS.
    """
    scores = sector_scores(text or "")
    best = max(scores, key=lambda sector: scores[sector], default=DEFAULT_SECTOR)
    if scores.get(best, 0) < MIN_SECTOR_HITS:
        return DEFAULT_SECTOR
    return best
