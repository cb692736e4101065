"""Logic for applying stored anchors to navigation menu items."""

import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Any

from anchor_links.anchor_link_spec import AnchorLinkSpec
from anchor_links.anchor_repository import AnchorRepository
from anchor_links.anchor_sanitizer import sanitize
from anchor_links.anchor_token import AnchorToken
from anchor_links.load_config import DEFAULT_CONFIG
from anchor_links.menu_item import MenuItem
from anchor_links.permalink_resolver import PermalinkResolver

logger = logging.getLogger(__name__)


class MenuAnchorService:
    """Coordinates anchor storage, permalink lookup and URL building.

    Editor input is sanitized once in ``save_anchor``; values read back from
    the repository are trusted as-is.
    """

    def __init__(
        self,
        repository: AnchorRepository,
        resolver: PermalinkResolver,
        config: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the service with its collaborators."""
        self.repository = repository
        self.resolver = resolver
        config = config or DEFAULT_CONFIG
        self.linkable_object_types = set(config.get("linkable_object_types", []))

    def save_anchor(self, item_id: int, raw: str | None) -> bool:
        """Sanitize editor input and store it. Unusable input deletes the anchor."""
        anchor = sanitize(raw)
        if raw and not anchor:
            logger.info("Anchor %r for menu item %s sanitized to nothing", raw, item_id)
        return self.repository.save_anchor(item_id, anchor)

    def get_anchor(self, item_id: int) -> AnchorToken:
        """Return the stored anchor of a menu item."""
        return AnchorToken(self.repository.get_anchor(item_id))

    def get_menu_item_anchor(self, item_id: int) -> str | None:
        """Return the stored anchor of a menu item as a plain string."""
        return self.get_anchor(item_id).value

    def link_spec_for(self, item: MenuItem) -> AnchorLinkSpec:
        """Build the link inputs for a menu item."""
        anchor = self.get_anchor(item.id)
        resolved = None
        if anchor and self._is_linkable(item):
            resolved = self.resolver.resolve_permalink(item.object_id)
            if resolved is None:
                logger.debug(
                    "No permalink for %s %s, using item URL",
                    item.object_type,
                    item.object_id,
                )
        return AnchorLinkSpec(
            anchor=anchor, original_url=item.url, target_resolved_url=resolved
        )

    def apply_anchor(self, item: MenuItem) -> MenuItem:
        """Return a copy of the item whose url carries its anchor."""
        url = self.link_spec_for(item).url()
        if url == item.url:
            return item
        return replace(item, url=url)

    def apply_anchors(self, items: Iterable[MenuItem]) -> list[MenuItem]:
        """Apply anchors to every item, preserving order."""
        return [self.apply_anchor(item) for item in items]

    def _is_linkable(self, item: MenuItem) -> bool:
        return item.object_type in self.linkable_object_types and bool(item.object_id)
