"""
Configuration loading for resume scoring.

Defaults ship with the package in atscore/config/scoring.yaml. An optional
override file is merged on top (later values win), then the merged tree is
materialised as frozen dataclasses so downstream code never touches raw dicts.

Examples:
    >>> config = load_config()
    >>> config.scoring.section_bonus
    5

    >>> config = load_config(Path("tight_scoring.yaml"))
"""

import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from atscore.exceptions import ConfigError

load_dotenv()
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "scoring.yaml"
CONFIG_OVERRIDE_PATH = os.getenv("ATSCORE_CONFIG_PATH")


@dataclass(frozen=True)
class ScoringConfig:
    """Weights, thresholds and bounds of the scoring heuristic."""

    base_score: int = 50
    base_score_with_jd: int = 40

    min_score: int = 25
    max_score: int = 98
    min_score_with_jd: int = 10
    max_score_with_jd: int = 100

    short_word_count: int = 200
    long_word_count: int = 800
    short_penalty: int = 20
    long_penalty: int = 10
    length_bonus: int = 10

    section_bonus: int = 5
    keyword_bonus: int = 3

    quantified_high_threshold: int = 10
    quantified_high_bonus: int = 12
    quantified_low_threshold: int = 5
    quantified_low_bonus: int = 6

    format_penalty: int = 10
    jd_match_weight: int = 20

    jitter: int = 0
    jitter_seed: Optional[int] = None

    keyword_limit: int = 40
    suggestion_count: int = 8
    excerpt_chars: int = 0
    max_document_bytes: int = 10 * 1024 * 1024
    timeout_seconds: Optional[float] = None

    def bounds(self, with_jd: bool) -> tuple[int, int]:
        """Clamp bounds for the requested scoring mode."""
        if with_jd:
            return self.min_score_with_jd, self.max_score_with_jd
        return self.min_score, self.max_score


@dataclass(frozen=True)
class BreakdownRule:
    """Display sub-score: clamp(score + offset, floor, ceiling)."""

    offset: int = 0
    floor: int = 0
    ceiling: int = 100


@dataclass(frozen=True)
class HistoryConfig:
    """Retention and storage settings for score history."""

    max_entries: int = 20
    default_limit: int = 10
    backend: str = "memory"
    db_path: str = "outs/history.sqlite3"


def _default_breakdown() -> Dict[str, BreakdownRule]:
    return {
        "skills": BreakdownRule(offset=5, ceiling=95),
        "formatting": BreakdownRule(offset=-10, floor=40),
        "keywords": BreakdownRule(offset=0, ceiling=90),
        "experience": BreakdownRule(offset=-15, floor=35),
    }


@dataclass(frozen=True)
class AppConfig:
    """Top-level configuration bundle."""

    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    breakdown: Dict[str, BreakdownRule] = field(default_factory=_default_breakdown)
    history: HistoryConfig = field(default_factory=HistoryConfig)

    def with_scoring(self, **overrides) -> "AppConfig":
        """Return a copy with selected scoring fields replaced."""
        return replace(self, scoring=replace(self.scoring, **overrides))


def _build_section(cls, values: Dict[str, Any], section: str):
    """Instantiate a config dataclass, rejecting unknown keys."""
    known = {f.name for f in fields(cls)}
    unknown = set(values) - known
    if unknown:
        raise ConfigError(f"Unknown keys in '{section}' config: {sorted(unknown)}")
    return cls(**values)


def load_config_dict(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load defaults and merge an optional override file.

    Args:
        config_path: Override YAML (defaults to ATSCORE_CONFIG_PATH when set)

    Returns:
        Plain nested dict with all interpolations resolved
    """
    if config_path is None and CONFIG_OVERRIDE_PATH:
        config_path = Path(CONFIG_OVERRIDE_PATH)

    try:
        merged = OmegaConf.load(DEFAULT_CONFIG_PATH)
        if config_path is not None:
            if not Path(config_path).exists():
                raise ConfigError(f"Config file not found: {config_path}")
            merged = OmegaConf.merge(merged, OmegaConf.load(config_path))
        return OmegaConf.to_container(merged, resolve=True)
    except (OmegaConfBaseException, yaml.YAMLError) as exc:
        raise ConfigError(f"Could not parse config: {exc}") from exc


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load the full application configuration.

    Raises:
        ConfigError: If a file is missing, malformed, or contains unknown keys
    """
    raw = load_config_dict(config_path)

    unknown_sections = set(raw) - {"scoring", "breakdown", "history"}
    if unknown_sections:
        raise ConfigError(f"Unknown config sections: {sorted(unknown_sections)}")

    scoring = _build_section(ScoringConfig, raw.get("scoring") or {}, "scoring")
    history = _build_section(HistoryConfig, raw.get("history") or {}, "history")
    breakdown = {
        name: _build_section(BreakdownRule, rule or {}, f"breakdown.{name}")
        for name, rule in (raw.get("breakdown") or {}).items()
    }

    return AppConfig(scoring=scoring, breakdown=breakdown, history=history)
