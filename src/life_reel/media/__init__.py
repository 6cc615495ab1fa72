"""Media helpers."""

from life_reel.media.image_cache import ImageCache, ImageLoader

__all__ = ["ImageCache", "ImageLoader"]
