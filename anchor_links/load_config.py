"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from anchor_links.anchor_sanitizer import (
    DEFAULT_IDENTIFIER_PREFIX,
    is_valid_identifier_prefix,
)
from anchor_links.deep_merge import deep_merge
from anchor_links.errors import ConfigError

DEFAULT_CONFIG: dict[str, Any] = {
    "identifier_prefix": DEFAULT_IDENTIFIER_PREFIX,
    # Menu item object types whose permalink is resolved live.
    "linkable_object_types": ["page"],
    "store": {
        "path": None,
    },
    "logging": {
        "level": "WARNING",
    },
}

SECTION_KEYS = ("store", "logging")


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except (OSError, yaml.YAMLError) as exc:
                msg = f"Could not read configuration file {p}: {exc}"
                raise ConfigError(msg) from exc
            if not isinstance(user_config, dict):
                msg = f"Configuration file {p} must contain a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
            _validate(config, p)
    return config


def _validate(config: dict[str, Any], path: Path) -> None:
    for key in SECTION_KEYS:
        if not isinstance(config.get(key), dict):
            msg = f"Configuration file {path}: '{key}' must be a mapping"
            raise ConfigError(msg)

    prefix = config.get("identifier_prefix")
    if not isinstance(prefix, str) or not is_valid_identifier_prefix(prefix):
        msg = (
            f"Configuration file {path}: identifier_prefix {prefix!r} must start "
            "with a letter or underscore"
        )
        raise ConfigError(msg)

    if not isinstance(config.get("linkable_object_types"), list):
        msg = f"Configuration file {path}: 'linkable_object_types' must be a list"
        raise ConfigError(msg)
