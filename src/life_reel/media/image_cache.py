"""Bounded in-memory image cache, owned by whoever displays photos."""

import logging
import threading
from collections import OrderedDict
from typing import Any, Callable

from life_reel.config import get_settings
from life_reel.models import Photo

logger = logging.getLogger(__name__)

ImageLoader = Callable[[Photo], Any]


class ImageCache:
    """
    LRU cache of decoded images keyed by asset identifier.
    Images are opaque objects produced by the caller's loader.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        self._max_entries = max_entries or get_settings().image_cache_size
        self._entries: "OrderedDict[str, Any]" = OrderedDict()
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> int:
        return self._max_entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, asset_identifier: object) -> bool:
        with self._lock:
            return asset_identifier in self._entries

    def get(self, asset_identifier: str) -> Any | None:
        """Cached image, marking it most recently used."""
        with self._lock:
            image = self._entries.get(asset_identifier)
            if image is not None:
                self._entries.move_to_end(asset_identifier)
            return image

    def put(self, asset_identifier: str, image: Any) -> None:
        """Store an image, evicting the least recently used entry when full."""
        with self._lock:
            self._entries[asset_identifier] = image
            self._entries.move_to_end(asset_identifier)
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted image %s", evicted)

    def get_or_load(self, photo: Photo, loader: ImageLoader) -> Any | None:
        """
        Cached image for a photo, loading it on a miss.
        Videos have no still image. Loader failures yield None (placeholder).
        """
        cached = self.get(photo.asset_identifier)
        if cached is not None:
            return cached
        if photo.is_video:
            return None
        try:
            image = loader(photo)
        except Exception as e:
            logger.warning("Could not load image %s: %s", photo.asset_identifier, e)
            return None
        if image is not None:
            self.put(photo.asset_identifier, image)
        return image

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
