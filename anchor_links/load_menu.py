"""Logic for reading menu definitions from YAML files."""

from pathlib import Path
from typing import Any

import yaml

from anchor_links.errors import MenuFileError
from anchor_links.menu_item import MenuItem


def load_menu(
    path: str | Path,
) -> tuple[list[MenuItem], dict[int, str], dict[int, str]]:
    """Load a menu file.

    The document looks like::

        pages:
          12: https://example.com/about/
        items:
          - id: 1
            title: Team
            url: https://example.com/old-about/
            object: page
            object_id: 12
            anchor: Our Team

    Returns the menu items, the page permalinks and the raw (unsanitized)
    inline anchors keyed by item id.
    """
    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Could not read menu file {p}: {exc}"
        raise MenuFileError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Menu file {p} must contain a mapping"
        raise MenuFileError(msg)

    raw_items = data.get("items") or []
    if not isinstance(raw_items, list):
        msg = f"Menu file {p}: 'items' must be a list"
        raise MenuFileError(msg)

    items: list[MenuItem] = []
    anchors: dict[int, str] = {}
    for raw in raw_items:
        item = _menu_item_from_dict(raw, p)
        items.append(item)
        if raw.get("anchor") is not None:
            anchors[item.id] = str(raw["anchor"])

    pages = _permalinks_from_dict(data.get("pages") or {}, p)
    return items, pages, anchors


def _menu_item_from_dict(raw: Any, path: Path) -> MenuItem:
    """Convert one YAML entry into a MenuItem."""
    if not isinstance(raw, dict) or "id" not in raw:
        msg = f"Menu file {path}: every item needs an 'id' ({raw!r})"
        raise MenuFileError(msg)
    try:
        object_id = raw.get("object_id")
        return MenuItem(
            id=int(raw["id"]),
            url=str(raw.get("url") or ""),
            object_type=str(raw.get("object") or "custom"),
            object_id=int(object_id) if object_id is not None else None,
            title=str(raw.get("title") or ""),
        )
    except (TypeError, ValueError) as exc:
        msg = f"Menu file {path}: bad item {raw!r}: {exc}"
        raise MenuFileError(msg) from exc


def _permalinks_from_dict(raw: Any, path: Path) -> dict[int, str]:
    if not isinstance(raw, dict):
        msg = f"Menu file {path}: 'pages' must be a mapping of id to URL"
        raise MenuFileError(msg)
    try:
        return {int(k): str(v) for k, v in raw.items()}
    except (TypeError, ValueError) as exc:
        msg = f"Menu file {path}: bad page id: {exc}"
        raise MenuFileError(msg) from exc
