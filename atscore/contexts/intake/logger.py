"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[intake]"


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_extraction_result(filename: str, backend: str, num_chars: int) -> None:
    """Log which backend produced text for a file."""
    _log_debug(f"Extracted {num_chars} chars from {filename} via {backend}")


def log_extraction_failure(filename: str, reason: str) -> None:
    """Log an unreadable upload before the error is raised to the caller."""
    _log_warning(f"Could not read {filename}: {reason}")
