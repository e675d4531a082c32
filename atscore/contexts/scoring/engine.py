"""
Weighted heuristic scoring engine.

Combines structural document signals and job-description keyword coverage
into a bounded integer score:

    base (50, or 40 with a job description)
    + length adjustment (-20 short / -10 long / +10 otherwise)
    + section_bonus per canonical section found
    + keyword_bonus per distinct reference keyword found
    + quantified-achievement bonus (+12 above 10 numbers, +6 above 5)
    - format_penalty if any complex-formatting marker is present
    + round(match_ratio * jd_match_weight) with a job description
    + optional seeded jitter (off unless configured)
    clamped to [25, 98] without a job description, [10, 100] with one.

All constants come from ScoringConfig. With jitter disabled the score is a
pure function of its inputs.
"""

import random
from typing import AbstractSet, Iterable, Optional, Union

from atscore.contexts.analysis.features import DocumentFeatures
from atscore.contexts.analysis.keywords import KeywordSet
from atscore.contexts.scoring.logger import log_adjustments
from atscore.contexts.scoring.result import ScoreResult, clamp, derive_breakdown
from atscore.exceptions import EmptyDocumentError
from atscore.utils.config import AppConfig, ScoringConfig


def length_adjustment(word_count: int, config: ScoringConfig) -> int:
    if word_count < config.short_word_count:
        return -config.short_penalty
    if word_count > config.long_word_count:
        return -config.long_penalty
    return config.length_bonus


def quantified_bonus(count: int, config: ScoringConfig) -> int:
    if count > config.quantified_high_threshold:
        return config.quantified_high_bonus
    if count > config.quantified_low_threshold:
        return config.quantified_low_bonus
    return 0


def split_keywords(
    jd_keywords: KeywordSet, resume_tokens: Optional[AbstractSet[str]]
) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """Partition JD keywords into (matched, missing), both in JD rank order."""
    tokens = resume_tokens or set()
    matched = tuple(k for k in jd_keywords if k in tokens)
    missing = tuple(k for k in jd_keywords if k not in tokens)
    return matched, missing


def score_adjustments(
    features: DocumentFeatures,
    config: ScoringConfig,
    match_ratio: Optional[float] = None,
) -> list[tuple[str, int]]:
    """
    Itemized score adjustments, in application order.

    Args:
        features: Extracted document features
        config: Scoring constants
        match_ratio: JD keyword coverage, or None without a job description

    Returns:
        (label, points) pairs; the first pair is the base score
    """
    with_jd = match_ratio is not None
    adjustments = [
        ("base", config.base_score_with_jd if with_jd else config.base_score),
        ("length", length_adjustment(features.word_count, config)),
        ("sections", features.section_count * config.section_bonus),
        ("keywords", features.keyword_hits * config.keyword_bonus),
        ("quantified", quantified_bonus(features.quantified_achievements, config)),
    ]
    if features.has_complex_formatting:
        adjustments.append(("formatting", -config.format_penalty))
    if with_jd:
        adjustments.append(("jd_match", round(match_ratio * config.jd_match_weight)))
    return adjustments


def compute_score(
    features: Optional[DocumentFeatures],
    jd_keywords: Optional[Union[KeywordSet, Iterable[str]]] = None,
    resume_tokens: Optional[AbstractSet[str]] = None,
    config: Optional[AppConfig] = None,
    rng: Optional[random.Random] = None,
) -> ScoreResult:
    """
    Score one resume.

    Args:
        features: Output of extract_features(); None means the document was empty
        jd_keywords: Job description keywords; None selects the no-JD path
        resume_tokens: Token set of the resume, matched against jd_keywords
        config: Application config (packaged defaults when omitted)
        rng: Random source for jitter; a Random(jitter_seed) is created if needed

    Returns:
        ScoreResult with score, display breakdown and matched/missing keywords.
        Strengths, weaknesses and suggestions are left for the gap analyzer.

    Raises:
        EmptyDocumentError: If features is None
    """
    if features is None:
        raise EmptyDocumentError(detail="no document features to score")

    config = config or AppConfig()
    scoring = config.scoring

    matched: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()
    match_ratio = None
    if jd_keywords is not None:
        if not isinstance(jd_keywords, KeywordSet):
            jd_keywords = KeywordSet.from_keywords(jd_keywords)
        matched, missing = split_keywords(jd_keywords, resume_tokens)
        match_ratio = len(matched) / len(jd_keywords) if len(jd_keywords) else 0.0

    adjustments = score_adjustments(features, scoring, match_ratio)
    if scoring.jitter > 0:
        rng = rng or random.Random(scoring.jitter_seed)
        adjustments.append(("jitter", rng.randint(-scoring.jitter, scoring.jitter)))
    log_adjustments(adjustments)

    low, high = scoring.bounds(with_jd=match_ratio is not None)
    score = clamp(sum(points for _, points in adjustments), low, high)

    return ScoreResult(
        score=score,
        breakdown=derive_breakdown(score, config.breakdown),
        matched_keywords=matched,
        missing_keywords=missing,
        job_description_used=match_ratio is not None,
    )
