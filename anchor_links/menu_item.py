"""Data model for a navigation menu entry."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MenuItem:
    """Represents a navigation menu item as handed over by the host CMS."""

    id: int
    url: str
    object_type: str = "custom"  # page/post/custom/...
    object_id: int | None = None
    title: str = ""
