"""Unit tests for configuration loading."""

from pathlib import Path

import pytest

from atscore.exceptions import ConfigError
from atscore.utils.config import DEFAULT_CONFIG_PATH, AppConfig, load_config, load_config_dict


@pytest.mark.unit
def test_packaged_defaults_exist():
    """Test that the default YAML ships with the package."""
    assert DEFAULT_CONFIG_PATH.exists()


@pytest.mark.unit
def test_packaged_defaults_match_dataclass_defaults():
    """Test that scoring.yaml and the dataclass defaults agree."""
    assert load_config() == AppConfig()


@pytest.mark.unit
def test_canonical_constants():
    """Test the chosen constant set."""
    scoring = load_config().scoring

    assert (scoring.base_score, scoring.base_score_with_jd) == (50, 40)
    assert scoring.bounds(with_jd=False) == (25, 98)
    assert scoring.bounds(with_jd=True) == (10, 100)
    assert (scoring.section_bonus, scoring.keyword_bonus) == (5, 3)
    assert scoring.jitter == 0
    assert scoring.keyword_limit == 40


@pytest.mark.unit
def test_breakdown_order():
    """Test that breakdown categories keep file order."""
    assert list(load_config().breakdown) == ["skills", "formatting", "keywords", "experience"]


@pytest.mark.unit
def test_override_file_merges_on_top(tmp_path: Path):
    """Test that an override changes only the keys it names."""
    override = tmp_path / "override.yaml"
    override.write_text("scoring:\n  section_bonus: 6\nhistory:\n  max_entries: 5\n")

    config = load_config(override)

    assert config.scoring.section_bonus == 6
    assert config.scoring.keyword_bonus == 3
    assert config.history.max_entries == 5
    assert config.history.default_limit == 10


@pytest.mark.unit
def test_override_breakdown_rule(tmp_path: Path):
    """Test overriding one field of one breakdown rule."""
    override = tmp_path / "override.yaml"
    override.write_text("breakdown:\n  skills:\n    ceiling: 100\n")

    config = load_config(override)

    assert config.breakdown["skills"].ceiling == 100
    assert config.breakdown["skills"].offset == 5


@pytest.mark.unit
@pytest.mark.parametrize(
    "content",
    [
        "scoring:\n  bogus_weight: 3\n",
        "history:\n  ttl: 30\n",
        "plugins:\n  enabled: true\n",
    ],
)
def test_unknown_keys_rejected(tmp_path: Path, content: str):
    """Test that typos in override files fail loudly."""
    override = tmp_path / "override.yaml"
    override.write_text(content)

    with pytest.raises(ConfigError):
        load_config(override)


@pytest.mark.unit
def test_missing_override_file(tmp_path: Path):
    """Test a clear error for a missing override file."""
    with pytest.raises(ConfigError, match="not found"):
        load_config_dict(tmp_path / "nope.yaml")


@pytest.mark.unit
def test_malformed_yaml(tmp_path: Path):
    """Test that unparsable YAML becomes ConfigError."""
    override = tmp_path / "broken.yaml"
    override.write_text("scoring: [unclosed\n")

    with pytest.raises(ConfigError):
        load_config(override)


@pytest.mark.unit
def test_with_scoring_returns_copy():
    """Test that with_scoring leaves the original untouched."""
    config = AppConfig()
    jittery = config.with_scoring(jitter=5)

    assert jittery.scoring.jitter == 5
    assert config.scoring.jitter == 0
