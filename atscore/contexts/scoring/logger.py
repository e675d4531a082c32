"""
Scoring context logger.

Provides logging interface for scoring context with automatic [score] prefix.
All scoring modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from atscore.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[score]"


def setup_scoring_logger(
    log_dir: Path = None, config_path: Path = None, console_level: str = "INFO"
) -> Path:
    """
    Setup logger for scoring context.

    Args:
        log_dir: Directory for this scoring session (defaults to ATSCORE_LOGS_PATH)
        config_path: Override config in use, recorded in the provenance header
        console_level: Minimum level echoed to the console

    Returns:
        Path to log file

    Example:
        from atscore.contexts.scoring.logger import setup_scoring_logger

        log_file = setup_scoring_logger()
    """
    return _setup_logger(
        context_name="score",
        log_dir=log_dir,
        extra_provenance={"Config override": config_path or "(packaged defaults)"},
        console_level=console_level,
    )


# Wrapper functions with automatic [score] prefix


def _log_info(message: str) -> None:
    """Log info message with [score] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [score] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [score] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [score] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level scoring-specific logging helpers


def log_scoring_start(filename: str, word_count: int, jd_keyword_count: Optional[int]) -> None:
    """Log start of a scoring run; jd_keyword_count is None without a job description."""
    mode = "no job description" if jd_keyword_count is None else f"{jd_keyword_count} JD keywords"
    _log_info(f"Scoring {filename} ({word_count} words, {mode})")


def log_adjustments(adjustments: list[tuple[str, int]]) -> None:
    """Log each score adjustment at debug level."""
    for label, points in adjustments:
        _log_debug(f"  {label}: {points:+d}")


def log_score_result(filename: str, result, elapsed_time: float) -> None:
    """
    Log the final score with keyword coverage.

    Args:
        filename: Document name
        result: ScoreResult from compute_score()/score_resume()
        elapsed_time: Seconds spent in the pipeline
    """
    _log_success(f"{filename}: score {result.score} ({elapsed_time:.3f}s)")
    if result.matched_keywords or result.missing_keywords:
        _log_info(
            f"  Keywords: {len(result.matched_keywords)} matched, "
            f"{len(result.missing_keywords)} missing"
        )
    for weakness in result.weaknesses:
        _log_debug(f"  Weakness: {weakness}")


def log_rejected(filename: str, exc: Exception) -> None:
    """Log a typed error before it is raised to the caller."""
    _log_warning(f"{filename}: {type(exc).__name__}: {exc}")
