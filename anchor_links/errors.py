"""Exception types raised by the anchor_links package."""


class AnchorLinksError(Exception):
    """Base class for errors raised by anchor_links."""


class InvalidAnchorError(AnchorLinksError, ValueError):
    """Raised when an AnchorToken is built from a value that is not a valid token."""


class MenuFileError(AnchorLinksError):
    """Raised when a menu definition file cannot be read or is malformed."""


class ConfigError(AnchorLinksError):
    """Raised when a configuration file does not hold a mapping."""
