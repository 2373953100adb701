"""Host-class integration for declared attributes.

Adopt the facility by subclassing :class:`AttributedObject` and declaring
attributes with :func:`attribute` in the class body::

    class Point(AttributedObject):
        x = attribute("numeric")
        y = attribute("numeric", default=0)
        label = attribute("string", default=None)

    Point(x=1)  # Point(x=1, y=0, label=None)

Class creation builds the kind's :class:`AttributeRegistry` (inherited
declarations first, then the class's own in definition order), and each
:class:`Attribute` descriptor acts as the get/set accessor pair for its slot.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from .core.construction import construct_values
from .core.declaration import MISSING, AttributeDeclaration
from .core.equality import values_equal
from .core.errors import ConfigurationError
from .core.registry import AttributeRegistry
from .core.types import TypeConstraint, resolve_type_constraint


class Attribute:
    """Descriptor declaring one attribute and exposing its slot.

    Parameters
    ----------
    type_spec : Any, optional
        ``None`` for no constraint, a primitive tag string, or a class.
    default : Any, optional
        Static default, or zero-argument callable evaluated per construction.
    disallow : Any, optional
        Value rejected at construction time; ``None`` forbids nil values.

    Raises
    ------
    ConfigurationError
        If ``type_spec`` is not a recognized tag or a class.

    Notes
    -----
    Assignment through the descriptor is unchecked. Validation only happens
    at construction time.
    """

    def __init__(
        self,
        type_spec: Any = None,
        *,
        default: Any = MISSING,
        disallow: Any = MISSING,
    ) -> None:
        self.type_constraint: TypeConstraint = resolve_type_constraint(type_spec)
        self.default = default
        self.disallow = disallow
        self.name: str | None = None
        self.bound_names: set[str] = set()

    def __set_name__(self, owner: type, name: str) -> None:
        self.bound_names.add(name)
        if self.name is None:
            self.name = name

    def declaration(self, name: str) -> AttributeDeclaration:
        """Build the registry declaration for this descriptor under ``name``."""

        return AttributeDeclaration(
            name=name,
            type_constraint=self.type_constraint,
            default=self.default,
            disallow=self.disallow,
        )

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        try:
            return instance._attribute_values[self.name]
        except (AttributeError, KeyError):
            raise AttributeError(
                f"{type(instance).__name__!r} object has no value for attribute {self.name!r}"
            ) from None

    def __set__(self, instance: Any, value: Any) -> None:
        instance._attribute_values[self.name] = value

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, {self.type_constraint.describe()})"


def attribute(
    type_spec: Any = None,
    *,
    default: Any = MISSING,
    disallow: Any = MISSING,
) -> Any:
    """Declare an attribute in an :class:`AttributedObject` class body.

    Omitting ``default`` makes the attribute required. Omitting ``disallow``
    permits ``None``.
    """

    return Attribute(type_spec, default=default, disallow=disallow)


class AttributedObject:
    """Base class for kinds with declared, constructor-validated attributes.

    Instances are built from keyword arguments and/or one positional mapping
    (keywords win on conflict). The supplied mapping is never modified.

    Raises
    ------
    UnknownAttributeError
        If an undeclared attribute is supplied.
    MissingAttributeError
        If a required attribute is omitted.
    DisallowedValueError
        If a value matches the attribute's disallowed value.
    AttributeTypeError
        If a non-``None`` value fails its type constraint.
    """

    attribute_registry: ClassVar[AttributeRegistry] = AttributeRegistry("AttributedObject")
    attribute_registry.freeze()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        registry = AttributeRegistry(cls.__qualname__, parent=_parent_registry(cls))
        for name, member in list(vars(cls).items()):
            if isinstance(member, Attribute):
                _check_binding(cls, name, member)
                registry.add(member.declaration(name))
        registry.freeze()
        cls.attribute_registry = registry

    def __init__(self, fields: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        if fields is not None and not isinstance(fields, Mapping):
            raise TypeError(
                f"{type(self).__name__} fields must be a mapping, got {type(fields).__name__}"
            )
        supplied = dict(fields) if fields is not None else {}
        supplied.update(kwargs)
        self._attribute_values = construct_values(self.attribute_registry, supplied)

    @classmethod
    def attribute_names(cls) -> tuple[str, ...]:
        """Return declared attribute names in declaration order."""

        return cls.attribute_registry.names()

    def attribute_values(self) -> dict[str, Any]:
        """Return a snapshot of current attribute values in declaration order."""

        return {name: self._attribute_values[name] for name in self.attribute_names()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributedObject):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return all(
            values_equal(self._attribute_values[name], other._attribute_values[name])
            for name in self.attribute_names()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rendered = ", ".join(
            f"{name}={value!r}" for name, value in self.attribute_values().items()
        )
        return f"{type(self).__qualname__}({rendered})"


def reserved_attribute_names() -> frozenset[str]:
    """Return public member names of :class:`AttributedObject` that attributes may not use."""

    return frozenset(name for name in dir(AttributedObject) if not name.startswith("_"))


def _check_binding(cls: type, name: str, member: Attribute) -> None:
    if name in reserved_attribute_names():
        raise ConfigurationError(
            f"{cls.__qualname__} attribute {name!r} clashes with an AttributedObject member"
        )
    if len(member.bound_names) > 1:
        raise ConfigurationError(
            f"{cls.__qualname__} binds one attribute to several names {sorted(member.bound_names)}"
        )


def _parent_registry(cls: type) -> AttributeRegistry:
    """Return the registry of the single adopting ancestor of ``cls``.

    Raises
    ------
    ConfigurationError
        If the bases contribute more than one distinct registry.
    """

    registries: list[AttributeRegistry] = []
    for base in cls.__bases__:
        if not issubclass(base, AttributedObject):
            continue
        registry = base.attribute_registry
        if all(registry is not seen for seen in registries):
            registries.append(registry)
    if len(registries) > 1:
        owners = [registry.owner_name for registry in registries]
        raise ConfigurationError(
            f"{cls.__qualname__} inherits attributes from several kinds {owners}; "
            "only single-parent kind chains are supported"
        )
    return registries[0]


__all__ = ["Attribute", "AttributedObject", "attribute", "reserved_attribute_names"]
