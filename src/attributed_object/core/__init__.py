"""Core declarations, registries, type constraints and the construction engine."""

from .config_loading import SUPPORTED_CONFIG_SUFFIXES, load_config_mapping
from .config_validation import validate_allowed_keys, validate_required_keys
from .construction import construct_values, validate_value
from .declaration import MISSING, AttributeDeclaration, validate_attribute_name
from .equality import values_equal
from .errors import (
    AttributeTypeError,
    AttributedObjectError,
    ConfigurationError,
    DisallowedValueError,
    MissingAttributeError,
    UnknownAttributeError,
)
from .registry import AttributeRegistry
from .types import (
    PRIMITIVE_TAGS,
    KindConstraint,
    PrimitiveConstraint,
    TypeConstraint,
    Unconstrained,
    resolve_type_constraint,
)

__all__ = [
    "AttributeDeclaration",
    "AttributeRegistry",
    "AttributeTypeError",
    "AttributedObjectError",
    "ConfigurationError",
    "DisallowedValueError",
    "KindConstraint",
    "MISSING",
    "MissingAttributeError",
    "PRIMITIVE_TAGS",
    "PrimitiveConstraint",
    "SUPPORTED_CONFIG_SUFFIXES",
    "TypeConstraint",
    "Unconstrained",
    "UnknownAttributeError",
    "construct_values",
    "load_config_mapping",
    "resolve_type_constraint",
    "validate_allowed_keys",
    "validate_attribute_name",
    "validate_required_keys",
    "validate_value",
    "values_equal",
]
