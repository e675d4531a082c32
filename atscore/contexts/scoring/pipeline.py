"""
Top-level scoring pipeline.

score_resume() is the only entry point that raises typed errors; the
tokenizer, keyword extractor, feature extractor and gap analyzer below it
degrade to empty results instead. Nothing is persisted until the final
history append, so a failed or timed-out run leaves no trace.
"""

import random
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import replace
from typing import List, Optional, Union

from atscore.contexts.analysis.features import extract_features
from atscore.contexts.analysis.keywords import extract_keywords
from atscore.contexts.analysis.profile import ResumeProfile
from atscore.contexts.analysis.sector import detect_sector
from atscore.contexts.analysis.tokenizer import token_set
from atscore.contexts.history.entry import ScoreHistoryEntry
from atscore.contexts.history.tracker import HistoryTracker
from atscore.contexts.intake.document import RawDocument
from atscore.contexts.scoring.engine import compute_score
from atscore.contexts.scoring.gap import analyze_gap
from atscore.contexts.scoring.logger import log_rejected, log_score_result, log_scoring_start
from atscore.contexts.scoring.result import ScoreResult
from atscore.exceptions import EmptyDocumentError, InvalidLimitError, ScoringError, ScoringTimeoutError
from atscore.utils.config import AppConfig


def _validate_keyword_limit(limit) -> None:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise InvalidLimitError(limit, name="keyword_limit")


def _run_pipeline(
    document: RawDocument,
    jd_text: Optional[str],
    config: AppConfig,
    sector: Optional[str],
    profile: Optional[ResumeProfile],
    rng: Optional[random.Random],
) -> ScoreResult:
    """Pure part of the pipeline: features -> score -> gap analysis."""
    scoring = config.scoring

    features = extract_features(document.text)
    if features is None:
        raise EmptyDocumentError(detail=f"{document.filename} contains no text")

    resume_tokens = token_set(document.text)
    jd_keywords = None
    if jd_text and jd_text.strip():
        jd_keywords = extract_keywords(jd_text, limit=scoring.keyword_limit)

    log_scoring_start(document.filename, features.word_count, None if jd_keywords is None else len(jd_keywords))

    scored = compute_score(features, jd_keywords, resume_tokens, config=config, rng=rng)
    gap = analyze_gap(
        features,
        resume_tokens,
        jd_keywords,
        profile=profile or ResumeProfile.from_text(document.text),
        suggestion_count=scoring.suggestion_count,
    )

    return replace(
        scored,
        strengths=gap.strengths,
        weaknesses=gap.weaknesses,
        suggestions=gap.suggestions,
        sector=sector or detect_sector(document.text),
        parsed_snippet=document.excerpt(scoring.excerpt_chars) if scoring.excerpt_chars > 0 else None,
    )


def score_resume(
    raw_text: Union[str, RawDocument],
    jd_text: Optional[str] = None,
    *,
    config: Optional[AppConfig] = None,
    tracker: Optional[HistoryTracker] = None,
    identity: Optional[str] = None,
    filename: str = "resume",
    sector: Optional[str] = None,
    profile: Optional[ResumeProfile] = None,
    rng: Optional[random.Random] = None,
    timeout: Optional[float] = None,
) -> ScoreResult:
    """
    Score a resume, optionally against a job description.

    Args:
        raw_text: Extracted resume text (or a RawDocument)
        jd_text: Job description text; None or blank selects the no-JD path
        config: Application config (packaged defaults when omitted)
        tracker: History tracker to record the run in (requires identity)
        identity: User/session key for the history entry
        filename: Document name recorded in history and logs
        sector: Sector label for history; detected from the text when omitted
        profile: Structured resume view (e.g. from a resume-builder form)
        rng: Random source for jitter (only used when jitter is configured)
        timeout: Seconds before the run is abandoned (defaults to
            config.scoring.timeout_seconds; None waits indefinitely)

    Returns:
        Complete ScoreResult

    Raises:
        InvalidLimitError: If the configured keyword limit is not positive
        EmptyDocumentError: If the resume text is empty or whitespace-only
        ScoringTimeoutError: If the run exceeds the timeout
    """
    config = config or AppConfig()
    if isinstance(raw_text, RawDocument):
        document = raw_text
    else:
        document = RawDocument(text=raw_text or "", filename=filename)

    timeout = timeout if timeout is not None else config.scoring.timeout_seconds
    start = time.perf_counter()

    try:
        _validate_keyword_limit(config.scoring.keyword_limit)
        if document.is_empty:
            raise EmptyDocumentError(detail=f"{document.filename} contains no text")

        args = (document, jd_text, config, sector, profile, rng)
        if timeout is None:
            result = _run_pipeline(*args)
        else:
            executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="atscore")
            future = executor.submit(_run_pipeline, *args)
            try:
                result = future.result(timeout=timeout)
            except FutureTimeoutError as exc:
                raise ScoringTimeoutError(timeout) from exc
            finally:
                # Don't block on an abandoned run; its result is discarded
                executor.shutdown(wait=False, cancel_futures=True)
    except ScoringError as exc:
        log_rejected(document.filename, exc)
        raise

    log_score_result(document.filename, result, time.perf_counter() - start)

    if tracker is not None and identity:
        tracker.append_entry(
            identity,
            ScoreHistoryEntry(
                score=result.score,
                filename=document.filename,
                sector=result.sector,
                timestamp=result.timestamp,
            ),
        )

    return result


def get_history(
    identity: str,
    limit: Optional[int] = None,
    *,
    tracker: HistoryTracker,
) -> List[ScoreHistoryEntry]:
    """
    Recent history for identity, most recent first.

    Args:
        identity: User/session key
        limit: Maximum entries (tracker default, normally 10, when omitted)
        tracker: Tracker holding the history

    Raises:
        InvalidLimitError: If limit is not a positive integer
    """
    return tracker.get_history(identity, limit)
