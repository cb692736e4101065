"""Orchestration logic for rewriting the hrefs of a menu file."""

import argparse
import logging
from typing import Any

from anchor_links.anchor_repository import InMemoryAnchorRepository
from anchor_links.json_anchor_store import JsonAnchorStore
from anchor_links.load_menu import load_menu
from anchor_links.menu_anchor_service import MenuAnchorService
from anchor_links.permalink_resolver import StaticPermalinkResolver

logger = logging.getLogger(__name__)


def run_apply(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Load a menu, store its inline anchors and print the final hrefs."""
    items, pages, inline_anchors = load_menu(args.menu)

    store_path = args.store or config["store"].get("path")
    store = None
    if store_path:
        store = JsonAnchorStore(store_path)
        store.load()
        repository = store
    else:
        repository = InMemoryAnchorRepository()

    service = MenuAnchorService(repository, StaticPermalinkResolver(pages), config)
    for item_id, raw in inline_anchors.items():
        service.save_anchor(item_id, raw)

    for item in service.apply_anchors(items):
        print(f"{item.id}\t{item.url}")

    if store is not None and store.dirty and not args.dry_run:
        store.save()
        logger.info("Saved anchors to %s", store.path)

    return 0
