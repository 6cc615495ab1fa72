"""Slideshow service - photo list, captions, and image preloading for one person."""

import logging
from datetime import date, datetime
from enum import Enum
from typing import Any

from life_reel.config import get_settings
from life_reel.media import ImageCache, ImageLoader
from life_reel.models import Person, Photo
from life_reel.rules import AgeClassifier

logger = logging.getLogger(__name__)


class TitleOption(str, Enum):
    """What a slideshow title or subtitle line shows."""

    NONE = "None"
    NAME = "Name"
    AGE = "Age"
    DATE = "Date"
    STACK_NAME = "Stack Name"

    def __str__(self) -> str:
        return self.value


def format_date(value: date | datetime) -> str:
    """Medium date style, e.g. Jan 15, 2023."""
    return f"{value:%b} {value.day}, {value.year}"


def prefetch_indices(index: int, count: int, radius: int) -> list[int]:
    """Indices around index, wrapping at both ends, current one first."""
    if count <= 0:
        return []
    current = index % count
    seen = [current]
    for offset in range(1, radius + 1):
        for i in ((current - offset) % count, (current + offset) % count):
            if i not in seen:
                seen.append(i)
    return seen


def frame_at(position: float, count: int) -> int:
    """Photo index shown at a scrubber position (in photos), looping."""
    if count <= 0:
        return 0
    return int(position) % count


class SlideshowService:
    """Separates slideshow content decisions from whatever renders them."""

    def __init__(
        self,
        person: Person,
        photos: list[Photo],
        classifier: AgeClassifier,
        image_cache: ImageCache,
        loader: ImageLoader,
        section_title: str | None = None,
    ) -> None:
        self._person = person
        self._classifier = classifier
        self._cache = image_cache
        self._loader = loader
        self._section_title = section_title
        self._photos = classifier.visible_photos(photos, person)
        self._radius = get_settings().prefetch_radius

    @property
    def photos(self) -> list[Photo]:
        """Photos to play, pre-birth ones removed when pregnancy tracking is off."""
        return list(self._photos)

    def title_text(self, option: TitleOption, photo: Photo) -> str:
        if option == TitleOption.NAME:
            return self._person.name
        if option == TitleOption.AGE:
            return self._classifier.calculator.age_text(self._person, photo.date_taken)
        if option == TitleOption.DATE:
            return format_date(photo.date_taken)
        if option == TitleOption.STACK_NAME:
            return self._section_title or ""
        return ""

    def available_subtitle_options(self, title_option: TitleOption) -> list[TitleOption]:
        """Every option except the one used by the title. Stack Name needs a section."""
        options = [o for o in TitleOption if o != title_option or o == TitleOption.NONE]
        if self._section_title is None:
            options = [o for o in options if o != TitleOption.STACK_NAME]
        return options

    def frame_at(self, position: float) -> int:
        return frame_at(position, len(self._photos))

    def preload_around(self, index: int) -> dict[str, Any]:
        """Load the images around index through the shared cache."""
        loaded: dict[str, Any] = {}
        for i in prefetch_indices(index, len(self._photos), self._radius):
            photo = self._photos[i]
            image = self._cache.get_or_load(photo, self._loader)
            if image is not None:
                loaded[photo.asset_identifier] = image
        logger.debug("Preloaded %d images around index %d", len(loaded), index)
        return loaded
