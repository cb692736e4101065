"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from anchor_links.deep_merge import deep_merge
from anchor_links.errors import ConfigError
from anchor_links.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    merged = deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4})
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    merged = deep_merge({"nested": {"x": 1, "y": 2}}, {"nested": {"y": 3, "z": 4}})
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3, 4]}) == {"arr": [3, 4]}


def test_deep_merge_object_types_additive() -> None:
    """Verify that linkable object types are merged additively."""
    merged = deep_merge(
        {"linkable_object_types": ["page"]},
        {"linkable_object_types": ["post", "page"]},
    )
    assert merged["linkable_object_types"] == ["page", "post"]


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config["identifier_prefix"] == "anchor-"
    assert config["linkable_object_types"] == ["page"]
    assert config["store"]["path"] is None


def test_load_config_does_not_share_defaults() -> None:
    """Verify that callers cannot mutate the module defaults."""
    config = load_config(None)
    config["store"]["path"] = "elsewhere.json"
    config["linkable_object_types"].append("post")
    assert DEFAULT_CONFIG["store"]["path"] is None
    assert DEFAULT_CONFIG["linkable_object_types"] == ["page"]


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "identifier_prefix": "id-",
        "linkable_object_types": ["post"],
        "logging": {"level": "DEBUG"},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["identifier_prefix"] == "id-"
    assert loaded["linkable_object_types"] == ["page", "post"]
    assert loaded["logging"]["level"] == "DEBUG"
    assert loaded["store"] == {"path": None}


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing file falls back to defaults."""
    assert load_config(tmp_path / "absent.yml") == DEFAULT_CONFIG


def test_load_config_not_a_mapping(tmp_path: Path) -> None:
    """Verify that a non-mapping document is rejected."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        load_config(config_file)


def test_load_config_invalid_yaml(tmp_path: Path) -> None:
    """Verify that unparsable YAML is reported as a ConfigError."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("logging: [\n")
    with pytest.raises(ConfigError):
        load_config(config_file)


@pytest.mark.parametrize(
    "content",
    [
        "logging: null\n",
        "store: 5\n",
        "linkable_object_types: page\n",
        "identifier_prefix: ''\n",
        "identifier_prefix: '1-'\n",
        "identifier_prefix: 'a b'\n",
        "identifier_prefix: 7\n",
    ],
)
def test_load_config_rejects_bad_values(tmp_path: Path, content: str) -> None:
    """Verify that sections and the identifier prefix are checked."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(content)
    with pytest.raises(ConfigError):
        load_config(config_file)


def test_load_config_accepts_prefix(tmp_path: Path) -> None:
    """Verify that a letter or underscore prefix is accepted."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("identifier_prefix: _sec\n")
    assert load_config(config_file)["identifier_prefix"] == "_sec"
