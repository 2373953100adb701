"""Shared helpers for strict key validation of declarative mappings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .errors import ConfigurationError


def find_unknown_keys(mapping: Mapping[Any, Any], *, allowed_keys: Iterable[str]) -> list[str]:
    """Return the sorted keys of ``mapping`` that are not in ``allowed_keys``.

    Parameters
    ----------
    mapping : Mapping[Any, Any]
        Mapping to inspect.
    allowed_keys : Iterable[str]
        Allowed key names.

    Returns
    -------
    list[str]
        Unknown keys, stringified and sorted.
    """

    allowed = set(allowed_keys)
    return sorted(str(key) for key in mapping if key not in allowed)


def validate_allowed_keys(
    mapping: Mapping[str, Any],
    *,
    field_name: str,
    allowed_keys: Iterable[str],
) -> None:
    """Validate that a mapping only contains allowed keys.

    Parameters
    ----------
    mapping : Mapping[str, Any]
        Configuration mapping to validate.
    field_name : str
        Human-readable path used in error messages.
    allowed_keys : Iterable[str]
        Allowed key names for ``mapping``.

    Raises
    ------
    ConfigurationError
        If unknown keys are present.
    """

    unknown = find_unknown_keys(mapping, allowed_keys=allowed_keys)
    if unknown:
        raise ConfigurationError(f"{field_name} has unknown keys: {unknown}")


def validate_required_keys(
    mapping: Mapping[str, Any],
    *,
    field_name: str,
    required_keys: Iterable[str],
) -> None:
    """Validate that required keys are present in a mapping.

    Parameters
    ----------
    mapping : Mapping[str, Any]
        Configuration mapping to validate.
    field_name : str
        Human-readable path used in error messages.
    required_keys : Iterable[str]
        Keys that must be present in ``mapping``.

    Raises
    ------
    ConfigurationError
        If required keys are missing.
    """

    missing = sorted(key for key in set(required_keys) if key not in mapping)
    if missing:
        raise ConfigurationError(f"{field_name} is missing required keys: {missing}")


def require_mapping(value: Any, *, field_name: str) -> Mapping[str, Any]:
    """Return ``value`` if it is a mapping, else raise ``ConfigurationError``."""

    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{field_name} must be an object, got {type(value).__name__}")
    return value


__all__ = [
    "find_unknown_keys",
    "require_mapping",
    "validate_allowed_keys",
    "validate_required_keys",
]
