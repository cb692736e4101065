"""Persistence contract for menu item anchors and an in-memory implementation."""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class AnchorRepository(Protocol):
    """Stores one sanitized anchor per menu item id."""

    def get_anchor(self, item_id: int) -> str | None:
        """Return the stored anchor for an item, if any."""
        ...

    def save_anchor(self, item_id: int, anchor: str | None) -> bool:
        """Store an anchor, or delete it when empty. Return True if anything changed."""
        ...


class InMemoryAnchorRepository:
    """Dict-backed repository, mostly useful for tests and one-shot runs."""

    def __init__(self, anchors: dict[int, str] | None = None) -> None:
        """Initialize the repository with optional pre-sanitized anchors."""
        self.anchors: dict[int, str] = dict(anchors or {})

    def get_anchor(self, item_id: int) -> str | None:
        """Return the stored anchor for an item, if any."""
        return self.anchors.get(item_id) or None

    def save_anchor(self, item_id: int, anchor: str | None) -> bool:
        """Store an anchor, or delete it when empty."""
        if not anchor:
            if item_id not in self.anchors:
                return False
            del self.anchors[item_id]
            logger.debug("Removed anchor for menu item %s", item_id)
            return True

        if self.anchors.get(item_id) == anchor:
            return False
        self.anchors[item_id] = anchor
        logger.debug("Stored anchor %r for menu item %s", anchor, item_id)
        return True
