"""Type constraints for declared attributes.

A constraint is resolved once, when the attribute is declared, into one of
three closed variants:

``Unconstrained``
    No type check is applied.
``PrimitiveConstraint``
    One of the symbolic tags in :data:`PRIMITIVE_TAGS`.
``KindConstraint``
    Values must be instances of a specific class (subclasses accepted).

``None`` values are never passed to :meth:`accepts`; the construction engine
skips type checks for them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
import enum
from typing import Any, Union

import numpy as np

from .errors import ConfigurationError

PRIMITIVE_TAGS: tuple[str, ...] = (
    "string",
    "boolean",
    "integer",
    "float",
    "numeric",
    "symbol",
    "sequence",
    "mapping",
)

# Alternate names for the ``sequence`` and ``mapping`` tags.
TAG_ALIASES: dict[str, str] = {
    "array": "sequence",
    "hash": "mapping",
}

_TEXT_TYPES = (str, bytes, bytearray)


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_boolean(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def _is_integer(value: Any) -> bool:
    # ``bool`` subclasses ``int`` but is its own category here.
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, np.integer))


def _is_float(value: Any) -> bool:
    return isinstance(value, (float, np.floating))


def _is_numeric(value: Any) -> bool:
    return _is_integer(value) or _is_float(value)


def _is_symbol(value: Any) -> bool:
    return isinstance(value, enum.Enum)


def _is_sequence(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return True
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def _is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


_PREDICATES = {
    "string": _is_string,
    "boolean": _is_boolean,
    "integer": _is_integer,
    "float": _is_float,
    "numeric": _is_numeric,
    "symbol": _is_symbol,
    "sequence": _is_sequence,
    "mapping": _is_mapping,
}


@dataclass(frozen=True, slots=True)
class Unconstrained:
    """Constraint that accepts every value."""

    def accepts(self, value: Any) -> bool:
        return True

    def describe(self) -> str:
        return "any value"


@dataclass(frozen=True, slots=True)
class PrimitiveConstraint:
    """Constraint backed by one symbolic primitive tag.

    Parameters
    ----------
    tag : str
        Canonical tag name from :data:`PRIMITIVE_TAGS`.

    Raises
    ------
    ConfigurationError
        If ``tag`` is not a canonical tag.
    """

    tag: str

    def __post_init__(self) -> None:
        if self.tag not in _PREDICATES:
            raise ConfigurationError(
                f"unknown type tag {self.tag!r}; expected one of {list(PRIMITIVE_TAGS)}"
            )

    def accepts(self, value: Any) -> bool:
        return _PREDICATES[self.tag](value)

    def describe(self) -> str:
        return f"of type {self.tag!r}"


@dataclass(frozen=True, slots=True)
class KindConstraint:
    """Constraint requiring instances of ``kind`` or its subclasses."""

    kind: type

    def accepts(self, value: Any) -> bool:
        return isinstance(value, self.kind)

    def describe(self) -> str:
        return f"an instance of {self.kind.__qualname__}"


TypeConstraint = Union[Unconstrained, PrimitiveConstraint, KindConstraint]

UNCONSTRAINED = Unconstrained()


def resolve_type_constraint(type_spec: Any, *, field_name: str = "type") -> TypeConstraint:
    """Resolve a declaration's type slot into a closed constraint variant.

    Parameters
    ----------
    type_spec : Any
        ``None`` for no constraint, a tag string, or a class.
    field_name : str, optional
        Human-readable path used in error messages.

    Returns
    -------
    TypeConstraint
        Resolved constraint.

    Raises
    ------
    ConfigurationError
        If ``type_spec`` is an unknown tag or neither a tag nor a class.
    """

    if type_spec is None:
        return UNCONSTRAINED
    if isinstance(type_spec, (Unconstrained, PrimitiveConstraint, KindConstraint)):
        return type_spec
    if isinstance(type_spec, str):
        tag = type_spec
        if tag in TAG_ALIASES:
            tag = TAG_ALIASES[tag]
        if tag not in _PREDICATES:
            raise ConfigurationError(
                f"{field_name} has unknown type tag {type_spec!r}; "
                f"expected one of {list(PRIMITIVE_TAGS)} or a class"
            )
        return PrimitiveConstraint(tag)
    if isinstance(type_spec, type):
        return KindConstraint(type_spec)
    raise ConfigurationError(
        f"{field_name} must be a type tag string or a class, got {type(type_spec).__name__}"
    )


__all__ = [
    "KindConstraint",
    "PRIMITIVE_TAGS",
    "PrimitiveConstraint",
    "TAG_ALIASES",
    "TypeConstraint",
    "UNCONSTRAINED",
    "Unconstrained",
    "resolve_type_constraint",
]
