"""Contract for resolving a content id to its current permalink."""

from collections.abc import Mapping
from typing import Protocol


class PermalinkResolver(Protocol):
    """Looks up the live URL of a linked entity."""

    def resolve_permalink(self, target_id: int) -> str | None:
        """Return the permalink for the target, or None when it is unknown."""
        ...


class StaticPermalinkResolver:
    """Resolver backed by a fixed id -> permalink mapping."""

    def __init__(self, permalinks: Mapping[int, str] | None = None) -> None:
        self.permalinks = dict(permalinks or {})

    def resolve_permalink(self, target_id: int) -> str | None:
        return self.permalinks.get(target_id)
