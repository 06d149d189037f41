# studiofolio/services/carousel.py
"""Image carousel cursor for the project modal and detail view."""

import logging
from typing import Optional, Sequence

from studiofolio.models.types import GalleryItem
from studiofolio.services.exceptions import OutOfRangeIndex

logger = logging.getLogger(__name__)


class Carousel:
    """
    Cursor over an ordered image list with wraparound.

    The cursor is bound to one GalleryItem at a time; binding a different
    item resets it to 0.
    """

    def __init__(self, images: Sequence[str] = ()):
        self.images: tuple[str, ...] = tuple(images)
        self.index = 0
        self._item_id: Optional[int] = None

    def __len__(self) -> int:
        return len(self.images)

    @property
    def item_id(self) -> Optional[int]:
        return self._item_id

    @property
    def current_image(self) -> Optional[str]:
        if not self.images:
            return None
        return self.images[self.index]

    @property
    def has_multiple(self) -> bool:
        """Whether navigation controls should be offered"""
        return len(self.images) > 1

    def bind(self, item: Optional[GalleryItem]) -> None:
        """Point the carousel at `item`, resetting the cursor if the item changed."""
        new_id = item.id if item is not None else None
        if new_id == self._item_id and item is not None:
            return
        self._item_id = new_id
        self.images = tuple(item.images) if item is not None else ()
        self.index = 0

    def reset(self) -> None:
        self.index = 0

    def next(self) -> int:
        if self.images:
            self.index = (self.index + 1) % len(self.images)
        return self.index

    def previous(self) -> int:
        if self.images:
            self.index = (self.index - 1 + len(self.images)) % len(self.images)
        return self.index

    def jump_to(self, index: int) -> int:
        """Select an image directly (one dot/thumbnail per image).

        Raises:
            OutOfRangeIndex: index not in [0, len(images))
        """
        if not 0 <= index < len(self.images):
            logger.error("Carousel jump out of range: %d (len=%d)", index, len(self.images))
            raise OutOfRangeIndex(index, len(self.images))
        self.index = index
        return self.index
