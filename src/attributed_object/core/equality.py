"""Value comparison shared by equality and disallowed-value checks."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import numpy as np


def values_equal(left: Any, right: Any) -> bool:
    """Return whether two attribute values compare equal.

    NumPy arrays are compared element-wise with :func:`numpy.array_equal`
    instead of producing an ambiguous boolean array. Lists, tuples and
    mappings are compared item by item so arrays nested inside them are
    handled the same way.
    """

    if left is right:
        return True
    if isinstance(left, np.ndarray) or isinstance(right, np.ndarray):
        return bool(np.array_equal(left, right))
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(values_equal(left[key], right[key]) for key in left)
    if _same_container(left, right, list) or _same_container(left, right, tuple):
        if len(left) != len(right):
            return False
        return all(values_equal(item_left, item_right) for item_left, item_right in zip(left, right))
    return bool(left == right)


def _same_container(left: Any, right: Any, container: type) -> bool:
    return isinstance(left, container) and isinstance(right, container)


__all__ = ["values_equal"]
