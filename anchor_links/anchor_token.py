"""Data model for a validated anchor token."""

import re
from dataclasses import dataclass

from anchor_links.anchor_sanitizer import (
    DEFAULT_IDENTIFIER_PREFIX,
    SanitizeMode,
    sanitize_anchor,
)
from anchor_links.errors import InvalidAnchorError

TOKEN_RE = re.compile(r"[A-Za-z0-9_]+(?:-[A-Za-z0-9_]+)*")


@dataclass(frozen=True)
class AnchorToken:
    """A sanitized anchor, or the absence of one.

    Build from editor input with ``from_raw``. Direct construction is meant for
    values that were sanitized before they were stored.
    """

    value: str | None = None

    def __post_init__(self) -> None:
        """Reject values that do not satisfy the token invariant."""
        if self.value is not None and not self.is_valid(self.value):
            msg = f"Not a valid anchor token: {self.value!r}"
            raise InvalidAnchorError(msg)

    @classmethod
    def from_raw(
        cls,
        raw: str | None,
        mode: SanitizeMode = SanitizeMode.ANCHOR,
        identifier_prefix: str = DEFAULT_IDENTIFIER_PREFIX,
    ) -> "AnchorToken":
        """Sanitize raw input into a token. Never raises."""
        return cls(sanitize_anchor(raw, mode, identifier_prefix))

    @staticmethod
    def is_valid(value: str) -> bool:
        """Check letters/digits/_/- only, no edge or doubled hyphens."""
        return TOKEN_RE.fullmatch(value) is not None

    def __bool__(self) -> bool:
        return self.value is not None

    def __str__(self) -> str:
        return self.value or ""
