"""Shared fixtures."""

from datetime import date, datetime
from pathlib import Path

import pytest

from life_reel.config import get_age_rules, get_settings
from life_reel.models import BirthMonthsDisplay, Person, Photo, PregnancyTracking
from life_reel.rules import AgeCalculator, AgeClassifier

RULES_DIR = Path(__file__).parent.parent / "config"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in (
        "LIFE_REEL_LOG_LEVEL",
        "LIFE_REEL_IMAGE_CACHE_SIZE",
        "LIFE_REEL_PREFETCH_RADIUS",
        "LIFE_REEL_RULES_DIR",
        "LIFE_REEL_MAX_PREGNANCY_WEEKS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LIFE_REEL_RULES_DIR", str(RULES_DIR))
    get_settings.cache_clear()
    get_age_rules.cache_clear()
    yield
    get_settings.cache_clear()
    get_age_rules.cache_clear()


@pytest.fixture
def calculator() -> AgeCalculator:
    return AgeCalculator()


@pytest.fixture
def classifier() -> AgeClassifier:
    return AgeClassifier()


@pytest.fixture
def person() -> Person:
    return Person(
        name="Ada",
        date_of_birth=date(2023, 1, 15),
        birth_months_display=BirthMonthsDisplay.TWELVE_MONTHS,
        pregnancy_tracking=PregnancyTracking.TRIMESTERS,
    )


def make_photo(day: date, asset: str | None = None, is_video: bool = False) -> Photo:
    return Photo(
        asset_identifier=asset or f"asset-{day.isoformat()}",
        date_taken=datetime(day.year, day.month, day.day, 12, 0),
        is_video=is_video,
    )


@pytest.fixture
def photo_at():
    return make_photo
