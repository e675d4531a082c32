"""
Shared utilities for ATSCORE.

Common functionality used across contexts:
- Logger setup with provenance
- Configuration loading
- Timestamps
- Text table formatting
"""

from atscore.utils.config import AppConfig, load_config
from atscore.utils.timestamp import format_timestamp, now

__all__ = ["AppConfig", "format_timestamp", "load_config", "now"]
