"""Configuration management - settings from environment, age rules from YAML."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_prefix="LIFE_REEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Root log level")

    # Media
    image_cache_size: int = Field(default=200, ge=1, description="Max decoded images kept in memory")
    prefetch_radius: int = Field(default=5, ge=0, description="Photos preloaded on each side of the current one")

    # Age rules
    rules_dir: Path | None = Field(default=None, description="Directory holding age_rules.yaml")
    max_pregnancy_weeks: int | None = Field(
        default=None,
        ge=1,
        description="Overrides pregnancy.max_weeks from age_rules.yaml",
    )


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML config file."""
    if not config_path.exists():
        return {}
    with config_path.open() as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


@lru_cache
def get_age_rules(config_dir_str: str = "") -> dict[str, Any]:
    """Load age bucketing rules from config. Built-in defaults apply for missing keys."""
    if not config_dir_str:
        rules_dir = get_settings().rules_dir
        config_dir = rules_dir or Path(__file__).parent.parent.parent / "config"
    else:
        config_dir = Path(config_dir_str)
    return load_yaml_config(config_dir / "age_rules.yaml")


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the package log format at the configured level."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=LOG_FORMAT,
    )
