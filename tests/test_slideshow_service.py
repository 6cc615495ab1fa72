"""Tests for SlideshowService."""

from datetime import date

import pytest

from life_reel.media import ImageCache
from life_reel.models import Person, PregnancyTracking
from life_reel.rules import AgeClassifier
from life_reel.services import SlideshowService, TitleOption
from life_reel.services.slideshow_service import format_date, frame_at, prefetch_indices


@pytest.fixture
def loads() -> list[str]:
    return []


@pytest.fixture
def service(classifier: AgeClassifier, person: Person, photo_at, loads: list[str]) -> SlideshowService:
    def loader(photo):
        loads.append(photo.asset_identifier)
        return object()

    photos = [
        photo_at(date(2022, 12, 1), asset="bump"),
        photo_at(date(2023, 1, 20), asset="home"),
        photo_at(date(2023, 3, 16), asset="smile", is_video=True),
        photo_at(date(2025, 2, 1), asset="party"),
    ]
    return SlideshowService(
        person,
        photos,
        classifier,
        ImageCache(max_entries=10),
        loader,
        section_title="First Years",
    )


def test_title_text(service: SlideshowService) -> None:
    photo = service.photos[1]
    assert service.title_text(TitleOption.NONE, photo) == ""
    assert service.title_text(TitleOption.NAME, photo) == "Ada"
    assert service.title_text(TitleOption.AGE, photo) == "Birth Month"
    assert service.title_text(TitleOption.DATE, photo) == "Jan 20, 2023"
    assert service.title_text(TitleOption.STACK_NAME, photo) == "First Years"
    assert service.title_text(TitleOption.AGE, service.photos[0]) == "Pregnancy"
    assert service.title_text(TitleOption.AGE, service.photos[3]) == "2 years"


def test_subtitle_options(service: SlideshowService, classifier: AgeClassifier, person: Person) -> None:
    assert service.available_subtitle_options(TitleOption.NAME) == [
        TitleOption.NONE,
        TitleOption.AGE,
        TitleOption.DATE,
        TitleOption.STACK_NAME,
    ]
    assert TitleOption.NONE in service.available_subtitle_options(TitleOption.NONE)

    no_section = SlideshowService(person, [], classifier, ImageCache(max_entries=1), lambda p: None)
    assert TitleOption.STACK_NAME not in no_section.available_subtitle_options(TitleOption.NAME)


def test_untracked_pregnancy_photos_hidden(classifier: AgeClassifier, person: Person, photo_at) -> None:
    untracked = person.model_copy(update={"pregnancy_tracking": PregnancyTracking.NONE})
    photos = [photo_at(date(2022, 12, 1)), photo_at(date(2023, 2, 1))]
    service = SlideshowService(untracked, photos, classifier, ImageCache(max_entries=2), lambda p: None)
    assert [p.capture_day for p in service.photos] == [date(2023, 2, 1)]


def test_preload_around_uses_cache(service: SlideshowService, loads: list[str]) -> None:
    loaded = service.preload_around(0)
    assert set(loaded) == {"bump", "home", "party"}
    assert sorted(loads) == ["bump", "home", "party"]

    service.preload_around(1)
    assert len(loads) == 3


def test_frame_at(service: SlideshowService) -> None:
    assert service.frame_at(0.2) == 0
    assert service.frame_at(5.9) == 1
    assert frame_at(3.0, 0) == 0


def test_prefetch_indices_wrap() -> None:
    assert prefetch_indices(0, 20, 2) == [0, 19, 1, 18, 2]
    assert prefetch_indices(0, 3, 5) == [0, 2, 1]
    assert prefetch_indices(4, 0, 5) == []


def test_format_date() -> None:
    assert format_date(date(2023, 1, 5)) == "Jan 5, 2023"


def test_title_option_str() -> None:
    assert str(TitleOption.STACK_NAME) == "Stack Name"
