"""Exception hierarchy for attribute declaration and construction.

Every error derives from :class:`AttributedObjectError` and from the builtin
exception that best describes it, so callers may catch either family.
"""

from __future__ import annotations

from collections.abc import Iterable


class AttributedObjectError(Exception):
    """Base class for all attribute facility errors."""


class ConfigurationError(AttributedObjectError, ValueError):
    """Raised when an attribute or kind definition is invalid.

    Definition-time failures surface while the class statement (or config
    file) is being processed, before any instance can be constructed.
    """


class MissingAttributeError(AttributedObjectError, ValueError):
    """Raised when a required attribute is neither supplied nor defaulted."""

    def __init__(self, kind_name: str, attribute_name: str) -> None:
        self.kind_name = kind_name
        self.attribute_name = attribute_name
        super().__init__(f"{kind_name} is missing required attribute {attribute_name!r}")


class UnknownAttributeError(AttributedObjectError, ValueError):
    """Raised when construction supplies undeclared attribute names."""

    def __init__(self, kind_name: str, attribute_names: Iterable[str]) -> None:
        self.kind_name = kind_name
        self.attribute_names = tuple(attribute_names)
        super().__init__(f"{kind_name} has unknown attributes: {list(self.attribute_names)}")


class DisallowedValueError(AttributedObjectError, ValueError):
    """Raised when a resolved value equals the attribute's disallowed value."""

    def __init__(self, kind_name: str, attribute_name: str, value: object) -> None:
        self.kind_name = kind_name
        self.attribute_name = attribute_name
        self.value = value
        super().__init__(f"{kind_name}.{attribute_name} does not allow value {value!r}")


class AttributeTypeError(AttributedObjectError, TypeError):
    """Raised when a non-``None`` value fails its declared type constraint."""

    def __init__(
        self,
        kind_name: str,
        attribute_name: str,
        expected: str,
        value: object,
    ) -> None:
        self.kind_name = kind_name
        self.attribute_name = attribute_name
        self.expected = expected
        self.value = value
        super().__init__(
            f"{kind_name}.{attribute_name} must be {expected}, "
            f"got {type(value).__name__} {value!r}"
        )


__all__ = [
    "AttributeTypeError",
    "AttributedObjectError",
    "ConfigurationError",
    "DisallowedValueError",
    "MissingAttributeError",
    "UnknownAttributeError",
]
