"""Logic for turning editor-supplied text into safe URL anchors."""

import re
from enum import Enum

DEFAULT_IDENTIFIER_PREFIX = "anchor-"

# Anything after one of these is dropped (query strings, path segments).
TRUNCATE_RE = re.compile(r"[?/\\]")
WHITESPACE_RE = re.compile(r"\s", re.ASCII)
DISALLOWED_RE = re.compile(r"[^A-Za-z0-9_-]")
HYPHEN_RUN_RE = re.compile(r"-{2,}")
# A prefix that keeps identifiers valid tokens starting with a letter or "_".
IDENTIFIER_PREFIX_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?:-[A-Za-z0-9_]+)*-?")


class SanitizeMode(Enum):
    """Sanitization policy.

    ANCHOR keeps any valid fragment token. IDENTIFIER also guarantees the
    token can be used as an HTML/CSS id, which may not start with a digit.
    """

    ANCHOR = "anchor"
    IDENTIFIER = "identifier"


def sanitize_anchor(
    raw: str | None,
    mode: SanitizeMode = SanitizeMode.ANCHOR,
    identifier_prefix: str = DEFAULT_IDENTIFIER_PREFIX,
) -> str | None:
    """Sanitize raw anchor text, returning None when nothing usable is left.

    Steps:
    1. Trim surrounding whitespace
    2. Cut at the first ``?``, ``/`` or ``\\``
    3. Turn whitespace into hyphens
    4. Drop everything but ASCII letters, digits, hyphens and underscores
    5. Collapse hyphen runs and trim hyphens from both ends

    Case is preserved. The function never raises.
    """
    if not raw:
        return None

    clean = raw.strip()
    clean = TRUNCATE_RE.split(clean, maxsplit=1)[0]
    clean = WHITESPACE_RE.sub("-", clean)
    clean = DISALLOWED_RE.sub("", clean)
    clean = HYPHEN_RUN_RE.sub("-", clean).strip("-")

    if not clean:
        return None

    if mode is SanitizeMode.IDENTIFIER and clean[0].isdigit():
        if not is_valid_identifier_prefix(identifier_prefix):
            identifier_prefix = DEFAULT_IDENTIFIER_PREFIX
        clean = f"{identifier_prefix}{clean}"

    return clean


def sanitize(raw: str | None) -> str | None:
    """Sanitize text for use as a URL fragment."""
    return sanitize_anchor(raw, SanitizeMode.ANCHOR)


def sanitize_identifier(
    raw: str | None, identifier_prefix: str = DEFAULT_IDENTIFIER_PREFIX
) -> str | None:
    """Sanitize text for use as an element id (never starts with a digit)."""
    return sanitize_anchor(raw, SanitizeMode.IDENTIFIER, identifier_prefix)


def is_valid_identifier_prefix(prefix: str) -> bool:
    """Check that a prefix starts with a letter or underscore and is token-safe."""
    return IDENTIFIER_PREFIX_RE.fullmatch(prefix) is not None
