"""Tests for JSON/YAML config loading and key validation helpers."""

from __future__ import annotations

import json

import pytest

from attributed_object import ConfigurationError
from attributed_object.core import (
    load_config_mapping,
    validate_allowed_keys,
    validate_required_keys,
)


def test_load_config_mapping_accepts_json(tmp_path) -> None:
    """Loader should parse JSON config objects."""

    path = tmp_path / "config.json"
    path.write_text(json.dumps({"a": 1, "b": {"c": 2}}), encoding="utf-8")

    loaded = load_config_mapping(path)
    assert loaded == {"a": 1, "b": {"c": 2}}


def test_load_config_mapping_accepts_yaml(tmp_path) -> None:
    """Loader should parse YAML config objects."""

    path = tmp_path / "config.yml"
    path.write_text("a: 1\nb:\n  c: 2\n", encoding="utf-8")

    loaded = load_config_mapping(path)
    assert loaded == {"a": 1, "b": {"c": 2}}


def test_load_config_mapping_rejects_unsupported_extension(tmp_path) -> None:
    """Loader should fail fast on unknown config file suffix."""

    path = tmp_path / "config.toml"
    path.write_text("a = 1\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="unsupported config file extension"):
        load_config_mapping(path)


def test_load_config_mapping_requires_mapping_root(tmp_path) -> None:
    """Loader should reject non-mapping top-level config payloads."""

    path = tmp_path / "config.json"
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")

    with pytest.raises(ConfigurationError, match="config root must be a JSON/YAML object"):
        load_config_mapping(path)


def test_validate_allowed_keys_lists_unknown_keys_sorted() -> None:
    """Unknown keys should be reported in sorted order."""

    with pytest.raises(ConfigurationError, match=r"kind has unknown keys: \['x', 'y'\]"):
        validate_allowed_keys({"y": 1, "a": 2, "x": 3}, field_name="kind", allowed_keys=("a",))


def test_validate_required_keys_lists_missing_keys() -> None:
    """Missing keys should be reported in sorted order."""

    with pytest.raises(ConfigurationError, match=r"kind is missing required keys: \['a', 'b'\]"):
        validate_required_keys({}, field_name="kind", required_keys=("b", "a"))


def test_configuration_error_is_a_value_error() -> None:
    """Config failures remain catchable as ValueError."""

    with pytest.raises(ValueError):
        validate_allowed_keys({"x": 1}, field_name="kind", allowed_keys=())
