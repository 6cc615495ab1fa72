"""Tests for configuration loading."""

import logging
from pathlib import Path

from life_reel.config import (
    Settings,
    configure_logging,
    get_age_rules,
    get_settings,
    load_yaml_config,
)


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("LIFE_REEL_RULES_DIR", raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.image_cache_size == 200
    assert settings.prefetch_radius == 5
    assert settings.max_pregnancy_weeks is None


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("LIFE_REEL_PREFETCH_RADIUS", "2")
    get_settings.cache_clear()
    assert get_settings().prefetch_radius == 2


def test_missing_yaml_is_empty(tmp_path: Path) -> None:
    assert load_yaml_config(tmp_path / "absent.yaml") == {}


def test_age_rules_from_config_dir() -> None:
    rules = get_age_rules()
    assert rules["pregnancy"]["trimester_week_limits"] == [13, 26]
    assert rules["buckets"]["max_years"] == 18


def test_age_rules_explicit_dir(tmp_path: Path) -> None:
    (tmp_path / "age_rules.yaml").write_text("buckets:\n  max_years: 21\n")
    assert get_age_rules(str(tmp_path)) == {"buckets": {"max_years": 21}}


def test_configure_logging(monkeypatch) -> None:
    monkeypatch.setenv("LIFE_REEL_LOG_LEVEL", "debug")
    get_settings.cache_clear()
    configure_logging()
    configure_logging(Settings(_env_file=None, log_level="WARNING"))
    logging.getLogger("life_reel").debug("still works")
