"""Tests for primitive tag and class-reference type checks."""

from __future__ import annotations

import enum
import warnings

import numpy as np
import pytest

from attributed_object import (
    AttributeTypeError,
    AttributedObject,
    ConfigurationError,
    DisallowedValueError,
    attribute,
)
from attributed_object.core.types import (
    KindConstraint,
    PrimitiveConstraint,
    Unconstrained,
    resolve_type_constraint,
)


class Color(enum.Enum):
    RED = "red"
    SOME_DEFAULT = "some_default"


class SimpleFoo(AttributedObject):
    bar = attribute()


class TypedFoo(AttributedObject):
    a_string = attribute("string", default="its a string")
    a_boolean = attribute("boolean", default=False)
    a_integer = attribute("integer", default=77)
    a_float = attribute("float", default=98.12)
    a_numeric = attribute("numeric", default=12.12)
    a_symbol = attribute("symbol", default=Color.SOME_DEFAULT)
    a_string_by_class = attribute(str, default="some default string")
    another_class = attribute(SimpleFoo, default=None)
    a_sequence = attribute("sequence", default=None)
    a_mapping = attribute("mapping", default=None)


def test_accepts_values_of_declared_types() -> None:
    """Values of the right category should be stored unchanged."""

    foo = TypedFoo(
        a_boolean=True,
        a_integer=12,
        a_float=42.7,
        a_numeric=35.9,
        a_symbol=Color.RED,
        a_string_by_class="my class string check",
        another_class=SimpleFoo(bar="hi"),
        a_sequence=["1"],
        a_mapping={"foo": "bar"},
    )

    assert foo.a_string == "its a string"
    assert foo.a_boolean is True
    assert foo.a_integer == 12
    assert foo.a_float == pytest.approx(42.7)
    assert foo.a_numeric == pytest.approx(35.9)
    assert foo.a_symbol is Color.RED
    assert foo.a_string_by_class == "my class string check"
    assert foo.another_class == SimpleFoo(bar="hi")
    assert foo.a_sequence == ["1"]
    assert foo.a_mapping == {"foo": "bar"}


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("a_string", Color.RED),
        ("a_boolean", 42),
        ("a_integer", "42"),
        ("a_integer", 42.0),
        ("a_integer", True),
        ("a_float", 42),
        ("a_symbol", "its a string"),
        ("a_numeric", "its a string"),
        ("a_numeric", False),
        ("a_string_by_class", 42),
        ("another_class", 42),
        ("a_sequence", "its a string"),
        ("a_sequence", {"a": 1}),
        ("a_mapping", "its a string"),
        ("a_mapping", [("a", 1)]),
    ],
)
def test_rejects_values_of_wrong_type(field: str, value: object) -> None:
    """Each constraint should reject values outside its category."""

    with pytest.raises(AttributeTypeError) as excinfo:
        TypedFoo(**{field: value})

    assert excinfo.value.attribute_name == field
    assert field in str(excinfo.value)


def test_type_errors_are_builtin_type_errors() -> None:
    """AttributeTypeError should be catchable as TypeError."""

    with pytest.raises(TypeError):
        TypedFoo(a_integer="42")


def test_numeric_accepts_integers_and_floats() -> None:
    """numeric covers both integer and float subcategories."""

    assert TypedFoo(a_numeric=3).a_numeric == 3
    assert TypedFoo(a_numeric=3.5).a_numeric == pytest.approx(3.5)


def test_numpy_scalars_and_arrays_match_tags() -> None:
    """NumPy scalar and array types should satisfy the matching tags."""

    foo = TypedFoo(
        a_boolean=np.bool_(True),
        a_integer=np.int64(4),
        a_float=np.float32(1.5),
        a_numeric=np.int8(2),
        a_sequence=np.arange(3),
    )

    assert foo.a_integer == 4
    assert np.array_equal(foo.a_sequence, np.arange(3))

    with pytest.raises(AttributeTypeError):
        TypedFoo(a_integer=np.float64(4.0))
    with pytest.raises(AttributeTypeError):
        TypedFoo(a_float=np.int32(4))


def test_subclass_instances_satisfy_class_constraints() -> None:
    """Class constraints accept subclass instances."""

    class ChildSimpleFoo(SimpleFoo):
        pass

    child = ChildSimpleFoo(bar=1)

    assert TypedFoo(another_class=child).another_class is child


def test_tuple_counts_as_sequence() -> None:
    """Tuples are sequences for the sequence tag."""

    assert TypedFoo(a_sequence=(1, 2)).a_sequence == (1, 2)


@pytest.mark.parametrize("field", [name for name in TypedFoo.attribute_names()])
def test_none_bypasses_type_checks(field: str) -> None:
    """None should never fail a type check."""

    foo = TypedFoo(**{field: None})

    assert getattr(foo, field) is None


def test_none_still_respects_disallow_on_typed_attributes() -> None:
    """Type checks skip None but the disallow policy still applies."""

    class StrictFoo(AttributedObject):
        count = attribute("integer", disallow=None)

    with pytest.raises(DisallowedValueError):
        StrictFoo(count=None)


def test_unknown_tag_raises_at_definition_time() -> None:
    """Unknown tags should fail while the class statement runs."""

    with pytest.raises(ConfigurationError, match="unknown type tag 'does_not_exist'"):

        class Miau(AttributedObject):
            something = attribute("does_not_exist")


def test_non_class_type_spec_raises() -> None:
    """Type slots that are neither tags nor classes are configuration errors."""

    with pytest.raises(ConfigurationError, match="must be a type tag string or a class"):
        attribute(42)


def test_tag_aliases_resolve_silently() -> None:
    """array/hash are accepted as aliases of sequence/mapping without warnings."""

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        constraint = resolve_type_constraint("array")

        class AliasedFoo(AttributedObject):
            payload = attribute("hash")

    assert constraint == PrimitiveConstraint("sequence")
    assert AliasedFoo.attribute_registry.get("payload").type_constraint == PrimitiveConstraint("mapping")
    with pytest.raises(AttributeTypeError):
        AliasedFoo(payload=[1])


def test_resolve_type_constraint_variants() -> None:
    """Type specs resolve to exactly one closed variant."""

    assert isinstance(resolve_type_constraint(None), Unconstrained)
    assert resolve_type_constraint("integer") == PrimitiveConstraint("integer")
    assert resolve_type_constraint(SimpleFoo) == KindConstraint(SimpleFoo)


def test_primitive_constraint_rejects_unknown_tag() -> None:
    """PrimitiveConstraint validates its own tag."""

    with pytest.raises(ConfigurationError):
        PrimitiveConstraint("array")
