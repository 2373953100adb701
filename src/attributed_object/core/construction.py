"""Construction and validation engine.

The engine turns a registry and caller-supplied values into a validated,
instance-owned mapping of attribute values. It applies the checks in a fixed
order:

1. unknown keys (one pass over the supplied keys),
2. presence: supplied value, else default, else missing,
3. disallowed value (applies to supplied and defaulted values alike),
4. type constraint (skipped for ``None``).

The supplied mapping is only read, never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .config_validation import find_unknown_keys
from .declaration import AttributeDeclaration
from .errors import (
    AttributeTypeError,
    DisallowedValueError,
    MissingAttributeError,
    UnknownAttributeError,
)
from .registry import AttributeRegistry


def construct_values(
    registry: AttributeRegistry,
    supplied: Mapping[str, Any],
) -> dict[str, Any]:
    """Resolve and validate one value per declared attribute.

    Parameters
    ----------
    registry : AttributeRegistry
        Registry of the kind being constructed.
    supplied : Mapping[str, Any]
        Caller-supplied values keyed by attribute name. Keys present with a
        ``None`` value count as supplied.

    Returns
    -------
    dict[str, Any]
        New mapping of attribute values in declaration order.

    Raises
    ------
    UnknownAttributeError
        If ``supplied`` contains undeclared names.
    MissingAttributeError
        If a required attribute is neither supplied nor defaulted.
    DisallowedValueError
        If a resolved value matches the attribute's disallowed value.
    AttributeTypeError
        If a non-``None`` value fails the attribute's type constraint.
    """

    unknown = find_unknown_keys(supplied, allowed_keys=registry.names())
    if unknown:
        raise UnknownAttributeError(registry.owner_name, unknown)

    values: dict[str, Any] = {}
    for declaration in registry:
        value = _resolve_value(registry.owner_name, declaration, supplied)
        validate_value(registry.owner_name, declaration, value)
        values[declaration.name] = value
    return values


def _resolve_value(
    kind_name: str,
    declaration: AttributeDeclaration,
    supplied: Mapping[str, Any],
) -> Any:
    if declaration.name in supplied:
        return supplied[declaration.name]
    if declaration.has_default:
        return declaration.resolve_default()
    raise MissingAttributeError(kind_name, declaration.name)


def validate_value(kind_name: str, declaration: AttributeDeclaration, value: Any) -> None:
    """Apply the disallowed-value and type checks to one resolved value.

    Raises
    ------
    DisallowedValueError
        If ``value`` matches the declaration's disallowed value.
    AttributeTypeError
        If ``value`` is not ``None`` and fails the type constraint.
    """

    if declaration.is_disallowed(value):
        raise DisallowedValueError(kind_name, declaration.name, value)
    if value is None:
        return
    constraint = declaration.type_constraint
    if not constraint.accepts(value):
        raise AttributeTypeError(kind_name, declaration.name, constraint.describe(), value)


__all__ = ["construct_values", "validate_value"]
