"""Business logic services."""

from life_reel.services.slideshow_service import SlideshowService, TitleOption

__all__ = ["SlideshowService", "TitleOption"]
