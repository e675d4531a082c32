"""Timestamp helpers shared across contexts."""

from datetime import datetime
from typing import Optional


def now() -> datetime:
    """Current local time as a datetime (second precision)."""
    return datetime.now().replace(microsecond=0)


def format_timestamp(value: datetime, relative: bool = False, reference: Optional[datetime] = None) -> str:
    """
    Format a history timestamp for display.

    Args:
        value: Timestamp to format
        relative: If True, show compact relative time ("2h ago")
        reference: Point in time relative output is measured from (default: now)

    Examples:
        format_timestamp(datetime(2025, 11, 13, 18, 45, 40))
        # "2025-11-13 18:45"
    """
    if not relative:
        return value.strftime("%Y-%m-%d %H:%M")

    diff = (reference or datetime.now()) - value
    suffix = "ago"
    if diff.total_seconds() < 0:
        diff = -diff
        suffix = "from now"

    seconds = int(diff.total_seconds())
    if seconds < 60:
        return f"{seconds}s {suffix}"
    if seconds < 3600:
        return f"{seconds // 60}m {suffix}"
    if seconds < 86400:
        return f"{seconds // 3600}h {suffix}"
    return f"{diff.days}d {suffix}"
