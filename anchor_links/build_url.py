"""Logic for attaching an anchor fragment to a link URL."""


def strip_fragment(url: str) -> str:
    """Return the URL without its fragment (everything from the first '#')."""
    return url.split("#", 1)[0]


def build_url(
    anchor: str | None,
    original_url: str,
    resolved_target_url: str | None = None,
) -> str:
    """Build the final href for a link carrying an optional anchor.

    Without an anchor the original URL is returned untouched. Otherwise the
    live permalink of the target wins over the stored URL, so links survive
    slug changes, and any existing fragment is replaced.
    """
    if not anchor:
        return original_url

    base = resolved_target_url or original_url
    return f"{strip_fragment(base)}#{anchor}"
