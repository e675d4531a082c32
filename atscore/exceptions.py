"""
Error taxonomy for resume scoring.

Every exception here is recoverable by the caller (re-prompt for an upload,
ask for job description text, retry later). Each carries a ``user_message``
suitable for display without a traceback.
"""

import sqlite3
from typing import Optional

HISTORY_STORE_MESSAGE = "The score history database could not be opened or updated."
FILE_ACCESS_MESSAGE = "A file could not be opened. Check the path and its permissions."


class ScoringError(Exception):
    """
    Base class for caller-recoverable scoring errors.

    Attributes:
        user_message: Human-readable description shown to end users
    """

    user_message = "The resume could not be scored."

    def __init__(self, message: Optional[str] = None, detail: Optional[str] = None):
        self.message = message or self.user_message
        self.detail = detail

        parts = [self.message]
        if detail:
            parts.append(f"Detail: {detail}")

        super().__init__("\n".join(parts))


class EmptyDocumentError(ScoringError):
    """Raised when a document yields no extractable text."""

    user_message = "The resume is empty. Upload a document that contains text."


class UnreadableDocumentError(ScoringError):
    """
    Raised when text extraction fails upstream of scoring.

    Attributes:
        filename: Name of the uploaded file, when known
        mime_type: Declared MIME type of the upload
        reason: Short description of what went wrong
    """

    user_message = (
        "The document could not be read. Upload a text-based PDF, DOCX or TXT file "
        "(scanned images are not supported)."
    )

    def __init__(
        self,
        reason: str,
        filename: Optional[str] = None,
        mime_type: Optional[str] = None,
    ):
        self.reason = reason
        self.filename = filename
        self.mime_type = mime_type

        parts = [reason]
        if filename:
            parts.append(f"File: {filename}")
        if mime_type:
            parts.append(f"MIME type: {mime_type}")

        super().__init__(self.user_message, detail=" | ".join(parts))


class InvalidLimitError(ScoringError, ValueError):
    """
    Raised when a keyword or history limit is not a positive integer.

    Attributes:
        limit: The rejected value
        name: Which limit was rejected (e.g., "keyword_limit")
    """

    user_message = "Limits must be positive whole numbers."

    def __init__(self, limit, name: str = "limit"):
        self.limit = limit
        self.name = name
        super().__init__(self.user_message, detail=f"{name}={limit!r}")


class ScoringTimeoutError(ScoringError):
    """Raised when the scoring pipeline exceeds the caller's deadline."""

    user_message = "Scoring took too long and was cancelled. Try a smaller document."

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(self.user_message, detail=f"timeout={timeout}s")


class ConfigError(ValueError):
    """Raised when a configuration file is malformed or has unknown keys."""

    user_message = "The scoring configuration is invalid."


class HistoryCapacityExceeded(UserWarning):
    """
    Emitted (via warnings.warn) when a history append evicts old entries.

    Non-fatal: the new entry is stored and the oldest entries are dropped.
    """


def user_message_for(exc: BaseException) -> str:
    """Return the human-readable message for any known error, or a generic one."""
    if isinstance(exc, (ScoringError, ConfigError)):
        return exc.user_message
    if isinstance(exc, sqlite3.Error):
        return HISTORY_STORE_MESSAGE
    if isinstance(exc, OSError):
        return FILE_ACCESS_MESSAGE
    return ScoringError.user_message
