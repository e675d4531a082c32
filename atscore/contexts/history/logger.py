"""
History context logger.

Provides logging interface for the history context with automatic [history] prefix.
All history modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[history]"


def _log_info(message: str) -> None:
    """Log info message with [history] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [history] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [history] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_history_append(identity: str, entry) -> None:
    """Log one appended ScoreHistoryEntry."""
    _log_debug(f"{identity}: recorded score {entry.score} for {entry.filename} ({entry.sector})")


def log_history_eviction(identity: str, evicted: list, max_entries: int) -> None:
    """Log entries dropped by the per-identity cap."""
    _log_info(f"{identity}: evicted {len(evicted)} oldest entries (cap {max_entries})")


def log_history_cleared(identity: str, removed: int) -> None:
    _log_info(f"{identity}: cleared {removed} entries")
