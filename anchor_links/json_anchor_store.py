"""Logic for persisting menu item anchors in a JSON file."""

import json
import logging
from pathlib import Path
from typing import Any

from anchor_links.anchor_repository import InMemoryAnchorRepository
from anchor_links.anchor_token import AnchorToken

logger = logging.getLogger(__name__)

CURRENT_SCHEMA_VERSION = 1


class JsonAnchorStore(InMemoryAnchorRepository):
    """File-backed anchor repository.

    Values are sanitized before they are saved, so ``load`` trusts them and
    only skips entries that no longer look like tokens (hand-edited files).
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the store with its storage path. Nothing is read yet."""
        super().__init__()
        self.path = Path(path)
        self.meta: dict[str, Any] = {"schema_version": CURRENT_SCHEMA_VERSION}
        self.dirty = False

    def load(self) -> None:
        """Load anchors from disk. A missing or unusable file leaves the store empty."""
        if not self.path.exists():
            return

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.exception("Error loading anchor store %s", self.path)
            return

        if not isinstance(data, dict):
            logger.warning("Anchor store %s is not a JSON object. Ignoring.", self.path)
            return

        meta = data.get("meta", {})
        anchors = data.get("anchors", {})
        if not isinstance(meta, dict) or not isinstance(anchors, dict):
            logger.warning(
                "Anchor store %s has an unexpected layout. Ignoring.", self.path
            )
            return

        schema_ver = meta.get("schema_version", 0)
        if schema_ver != CURRENT_SCHEMA_VERSION:
            logger.warning(
                "Schema version mismatch (%s != %s). Ignoring anchor store.",
                schema_ver,
                CURRENT_SCHEMA_VERSION,
            )
            return

        for key, value in anchors.items():
            try:
                item_id = int(key)
            except ValueError:
                logger.warning("Skipping anchor with non-numeric item id %r", key)
                continue
            if not isinstance(value, str) or not AnchorToken.is_valid(value):
                logger.warning("Skipping invalid anchor %r for item %s", value, item_id)
                continue
            self.anchors[item_id] = value

        logger.info("Loaded %d anchors from %s", len(self.anchors), self.path)

    def save_anchor(self, item_id: int, anchor: str | None) -> bool:
        """Store or delete an anchor, tracking whether the file needs writing."""
        changed = super().save_anchor(item_id, anchor)
        self.dirty = self.dirty or changed
        return changed

    def save(self) -> None:
        """Write the anchors to disk."""
        if not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)

        self.meta["schema_version"] = CURRENT_SCHEMA_VERSION
        anchors = {str(item_id): value for item_id, value in self.anchors.items()}
        self.path.write_text(
            json.dumps(
                {"meta": self.meta, "anchors": anchors},
                indent=2,
                sort_keys=True,
            ),
            encoding="utf-8",
        )
        self.dirty = False
