"""Attribute declarations.

One :class:`AttributeDeclaration` exists per attribute name within a kind.
It records the resolved type constraint, the default spec and the
disallowed-value policy.
"""

from __future__ import annotations

from dataclasses import dataclass
import keyword
from typing import Any, Final

from .equality import values_equal
from .errors import ConfigurationError
from .types import UNCONSTRAINED, TypeConstraint, resolve_type_constraint


class _Missing:
    """Sentinel type for options that were not supplied."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


@dataclass(frozen=True, slots=True)
class AttributeDeclaration:
    """Declaration of one named attribute.

    Parameters
    ----------
    name : str
        Attribute name. Must be a public Python identifier.
    type_constraint : TypeConstraint, optional
        Resolved type constraint.
    default : Any, optional
        Static default value, or a zero-argument callable evaluated at each
        construction that omits the attribute. ``MISSING`` marks the
        attribute as required.
    disallow : Any, optional
        Value rejected at construction time. ``None`` forbids nil values.
        ``MISSING`` allows every value.

    Raises
    ------
    ConfigurationError
        If ``name`` is not a valid attribute name.
    """

    name: str
    type_constraint: TypeConstraint = UNCONSTRAINED
    default: Any = MISSING
    disallow: Any = MISSING

    def __post_init__(self) -> None:
        validate_attribute_name(self.name)

    @classmethod
    def build(
        cls,
        name: str,
        type_spec: Any = None,
        *,
        default: Any = MISSING,
        disallow: Any = MISSING,
    ) -> AttributeDeclaration:
        """Build a declaration from a raw type spec (tag string or class)."""

        return cls(
            name=name,
            type_constraint=resolve_type_constraint(type_spec, field_name=f"attribute {name!r}"),
            default=default,
            disallow=disallow,
        )

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @property
    def required(self) -> bool:
        return self.default is MISSING

    @property
    def allows_none(self) -> bool:
        return self.disallow is not None

    def resolve_default(self) -> Any:
        """Return the default value, invoking a computed default.

        Raises
        ------
        LookupError
            If the attribute has no default.
        """

        if self.default is MISSING:
            raise LookupError(f"attribute {self.name!r} has no default")
        if callable(self.default):
            return self.default()
        return self.default

    def is_disallowed(self, value: Any) -> bool:
        """Return whether ``value`` is rejected by the disallowed-value policy.

        Non-``None`` sentinels only match values of exactly the same type, so
        ``disallow=0`` does not reject ``False``.
        """

        if self.disallow is MISSING:
            return False
        if self.disallow is None:
            return value is None
        if value is None or type(value) is not type(self.disallow):
            return False
        return values_equal(value, self.disallow)


def validate_attribute_name(name: Any) -> None:
    """Validate that ``name`` can be used as an attribute name.

    Raises
    ------
    ConfigurationError
        If ``name`` is not a string, not an identifier, a keyword, or private.
    """

    if not isinstance(name, str):
        raise ConfigurationError(f"attribute name must be a string, got {type(name).__name__}")
    if not name.isidentifier() or keyword.iskeyword(name):
        raise ConfigurationError(f"attribute name {name!r} is not a valid identifier")
    if name.startswith("_"):
        raise ConfigurationError(f"attribute name {name!r} must not start with an underscore")


__all__ = ["AttributeDeclaration", "MISSING", "validate_attribute_name"]
