"""Define attributed kinds from declarative mappings and config files.

Config shape (JSON or YAML)::

    kinds:
      Address:
        attributes:
          street: {type: string}
          zip_code: {type: string, disallow: null}
      Person:
        attributes:
          name: {type: string}
          address: {type: Address, default: null}
      Employee:
        base: Person
        attributes:
          salary: {type: numeric, default: 0}

Attribute option keys are ``type``, ``default`` and ``disallow``. A present
``default`` key (even ``null``) makes the attribute optional; a present
``disallow`` key rejects that value. ``type`` is a primitive tag or the name
of a kind already in the registry.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from attributed_object.core.config_loading import load_config_mapping
from attributed_object.core.config_validation import (
    require_mapping,
    validate_allowed_keys,
    validate_required_keys,
)
from attributed_object.core.declaration import MISSING, validate_attribute_name
from attributed_object.core.errors import ConfigurationError
from attributed_object.core.types import PRIMITIVE_TAGS, TAG_ALIASES
from attributed_object.model import Attribute, AttributedObject, reserved_attribute_names

from .registry import KindRegistry

ROOT_KEYS = ("kinds",)
KIND_KEYS = ("attributes", "base")
ATTRIBUTE_KEYS = ("type", "default", "disallow")


def define_kind(
    name: str,
    attributes: Mapping[str, Mapping[str, Any]],
    *,
    base: type[AttributedObject] = AttributedObject,
    registry: KindRegistry | None = None,
) -> type[AttributedObject]:
    """Create one attributed kind from attribute option mappings.

    Parameters
    ----------
    name : str
        Class name of the new kind.
    attributes : Mapping[str, Mapping[str, Any]]
        Attribute name to option mapping (``type``, ``default``, ``disallow``).
    base : type[AttributedObject], optional
        Parent kind whose attributes are inherited.
    registry : KindRegistry | None, optional
        Registry used to resolve kind names in ``type`` options. The new
        kind is registered there when given.

    Returns
    -------
    type[AttributedObject]
        Newly created kind.

    Raises
    ------
    ConfigurationError
        If options are malformed, types are unknown, or names collide.
    """

    if not name.isidentifier():
        raise ConfigurationError(f"kind name {name!r} is not a valid identifier")
    if not (isinstance(base, type) and issubclass(base, AttributedObject)):
        raise ConfigurationError(f"{name} base must be an AttributedObject subclass, got {base!r}")

    attributes = require_mapping(attributes, field_name=f"{name}.attributes")
    namespace: dict[str, Any] = {"__module__": __name__}
    for attribute_name, raw_options in attributes.items():
        field_name = f"{name}.attributes.{attribute_name}"
        validate_attribute_name(attribute_name)
        if attribute_name in reserved_attribute_names():
            raise ConfigurationError(f"{field_name} clashes with an AttributedObject member")
        options = require_mapping(raw_options if raw_options is not None else {}, field_name=field_name)
        validate_allowed_keys(options, field_name=field_name, allowed_keys=ATTRIBUTE_KEYS)
        namespace[str(attribute_name)] = Attribute(
            _resolve_type_option(options.get("type"), registry=registry, field_name=f"{field_name}.type"),
            default=options.get("default", MISSING),
            disallow=options.get("disallow", MISSING),
        )

    kind = type(name, (base,), namespace)
    if registry is not None:
        registry.register(kind)
    return kind


def define_kinds_from_config(
    config: Mapping[str, Any],
    *,
    registry: KindRegistry | None = None,
) -> tuple[type[AttributedObject], ...]:
    """Define every kind listed in a declarative config mapping.

    Parameters
    ----------
    config : Mapping[str, Any]
        Mapping with a ``kinds`` object. Kinds are defined in mapping order,
        so later kinds may reference earlier ones.
    registry : KindRegistry | None, optional
        Registry to resolve and register kinds in. A new one is used when
        omitted.

    Returns
    -------
    tuple[type[AttributedObject], ...]
        Defined kinds in config order.

    Raises
    ------
    ConfigurationError
        If the config is malformed or references undefined kinds.
    """

    registry = KindRegistry() if registry is None else registry
    config = require_mapping(config, field_name="config")
    validate_allowed_keys(config, field_name="config", allowed_keys=ROOT_KEYS)
    validate_required_keys(config, field_name="config", required_keys=ROOT_KEYS)
    kinds_config = require_mapping(config["kinds"], field_name="config.kinds")

    defined: list[type[AttributedObject]] = []
    for kind_name, raw_kind in kinds_config.items():
        field_name = f"config.kinds.{kind_name}"
        kind_config = require_mapping(raw_kind, field_name=field_name)
        validate_allowed_keys(kind_config, field_name=field_name, allowed_keys=KIND_KEYS)
        validate_required_keys(kind_config, field_name=field_name, required_keys=("attributes",))

        base: type[AttributedObject] = AttributedObject
        base_name = kind_config.get("base")
        if base_name is not None:
            if base_name not in registry:
                raise ConfigurationError(f"{field_name}.base references undefined kind {base_name!r}")
            base = registry.get(base_name)

        defined.append(
            define_kind(
                str(kind_name),
                kind_config["attributes"] or {},
                base=base,
                registry=registry,
            )
        )
    return tuple(defined)


def load_kinds(
    path: str | Path,
    *,
    registry: KindRegistry | None = None,
) -> tuple[type[AttributedObject], ...]:
    """Load a JSON/YAML kind definition file and define its kinds."""

    return define_kinds_from_config(load_config_mapping(path), registry=registry)


def _resolve_type_option(
    value: Any,
    *,
    registry: KindRegistry | None,
    field_name: str,
) -> Any:
    """Map a config ``type`` option to a tag string or a registered kind."""

    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string, got {type(value).__name__}")
    if value in PRIMITIVE_TAGS or value in TAG_ALIASES:
        return value
    if registry is not None and value in registry:
        return registry.get(value)
    raise ConfigurationError(
        f"{field_name} {value!r} is neither a type tag {list(PRIMITIVE_TAGS)} nor a defined kind"
    )


__all__ = [
    "ATTRIBUTE_KEYS",
    "KIND_KEYS",
    "ROOT_KEYS",
    "define_kind",
    "define_kinds_from_config",
    "load_kinds",
]
