"""Command line entry point for anchor_links."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from anchor_links.anchor_sanitizer import sanitize, sanitize_identifier
from anchor_links.build_url import build_url
from anchor_links.errors import AnchorLinksError
from anchor_links.load_config import load_config
from anchor_links.run_apply import run_apply

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="anchor-links",
        description="Sanitize menu anchors and build anchored URLs.",
    )
    ap.add_argument("--config", help="Path to a YAML configuration file")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: from config, WARNING)",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    p_sanitize = sub.add_parser("sanitize", help="Print the sanitized anchor for TEXT")
    p_sanitize.add_argument("text")
    p_sanitize.add_argument(
        "--identifier",
        action="store_true",
        help="Make the result usable as an HTML/CSS id (no leading digit)",
    )

    p_url = sub.add_parser("build-url", help="Print a URL with an anchor attached")
    p_url.add_argument("--url", required=True, help="Original link URL")
    p_url.add_argument("--anchor", help="Raw anchor text (sanitized first)")
    p_url.add_argument("--resolved", help="Live permalink of the link target")

    p_apply = sub.add_parser("apply", help="Rewrite the hrefs of a YAML menu file")
    p_apply.add_argument("menu", type=Path, help="Menu definition (YAML)")
    p_apply.add_argument("--store", type=Path, help="JSON anchor store to use")
    p_apply.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the rewritten menu without writing the anchor store",
    )
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the anchor-links command line."""
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        level = args.log_level or config["logging"].get("level", "WARNING")
        logging.basicConfig(level=str(level).upper(), format=LOG_FORMAT)

        if args.command == "sanitize":
            if args.identifier:
                token = sanitize_identifier(args.text, config["identifier_prefix"])
            else:
                token = sanitize(args.text)
            if token is None:
                return 1
            print(token)
            return 0

        if args.command == "build-url":
            print(build_url(sanitize(args.anchor), args.url, args.resolved))
            return 0

        return run_apply(args, config)
    except AnchorLinksError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
