"""Top-level package for ``attributed_object``.

The package provides declarative, constructor-validated attributes:

1. a kind subclasses :class:`~attributed_object.model.AttributedObject`,
2. its class body declares fields with :func:`~attributed_object.model.attribute`,
3. class creation builds an ordered, inherited attribute registry,
4. construction resolves defaults and validates presence, disallowed values
   and types before any value is stored.

Kinds can also be defined from JSON/YAML files with
:func:`~attributed_object.kinds.load_kinds`.
"""

from .core.declaration import MISSING, AttributeDeclaration
from .core.errors import (
    AttributeTypeError,
    AttributedObjectError,
    ConfigurationError,
    DisallowedValueError,
    MissingAttributeError,
    UnknownAttributeError,
)
from .core.registry import AttributeRegistry
from .core.types import PRIMITIVE_TAGS
from .kinds import KindRegistry, define_kind, define_kinds_from_config, load_kinds
from .model import Attribute, AttributedObject, attribute

__all__ = [
    "Attribute",
    "AttributeDeclaration",
    "AttributeRegistry",
    "AttributeTypeError",
    "AttributedObject",
    "AttributedObjectError",
    "ConfigurationError",
    "DisallowedValueError",
    "KindRegistry",
    "MISSING",
    "MissingAttributeError",
    "PRIMITIVE_TAGS",
    "UnknownAttributeError",
    "attribute",
    "define_kind",
    "define_kinds_from_config",
    "load_kinds",
]
