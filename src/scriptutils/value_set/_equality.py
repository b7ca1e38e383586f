"""Equality relations deciding when two items are the same member of a ValueSet.

A relation is any two-argument predicate. ValueSet calls it as
``equality(member, item)`` with the stored member first.
"""

from __future__ import annotations

__all__ = [
    "Equality",
    "value_equality",
    "identity_equality",
    "strict_equality",
    "approximate_equality",
    "key_equality",
    "pairwise_equality",
]

import math
from collections.abc import Sequence
from numbers import Real
from typing import Any, Callable

Equality = Callable[[Any, Any], bool]


def value_equality(left: Any, right: Any) -> bool:
    return bool(left == right)


def identity_equality(left: Any, right: Any) -> bool:
    return left is right


def strict_equality(left: Any, right: Any) -> bool:
    """Value equality that also requires matching types, all the way down.

    ``1``, ``1.0``, and ``True`` compare equal under ``==`` but are three different
    members under this relation, and so are ``(1, 2)`` and ``(1.0, 2)``.
    """
    if type(left) is not type(right):
        return False

    if isinstance(left, (tuple, list)):
        return len(left) == len(right) and all(map(strict_equality, left, right))
    elif isinstance(left, dict):
        return left.keys() == right.keys() and all(
            strict_equality(value, right[key]) for key, value in left.items()
        )
    else:
        return bool(left == right)


def _is_vector(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def approximate_equality(rel_tol: float = 1e-09, abs_tol: float = 0.0) -> Equality:
    """Build a relation comparing real numbers with ``math.isclose``.

    Sequences other than strings are compared element-wise, so coordinate tuples such
    as ``(0.1 + 0.2, 0.0, 1.0)`` and ``(0.3, 0.0, 1.0)`` are the same member. Anything
    else falls back to ``==``.

    The relation is not transitive. A set built with it keeps whichever of two nearby
    values arrived first.
    """
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError(
            f"Tolerances must be non-negative, but got rel_tol={rel_tol} and abs_tol={abs_tol}"
        )

    def approximately_equal(left: Any, right: Any) -> bool:
        if isinstance(left, Real) and isinstance(right, Real):
            return math.isclose(left, right, rel_tol=rel_tol, abs_tol=abs_tol)
        elif _is_vector(left) and _is_vector(right):
            return len(left) == len(right) and all(map(approximately_equal, left, right))
        else:
            return bool(left == right)

    return approximately_equal


def key_equality(key: Callable[[Any], Any]) -> Equality:
    def equal_keys(left: Any, right: Any) -> bool:
        return bool(key(left) == key(right))

    return equal_keys


def pairwise_equality(first: Equality, second: Equality) -> Equality:
    """Build a relation on 2-tuples comparing each component with its own relation."""

    def equal_pairs(left: Any, right: Any) -> bool:
        if not (isinstance(left, tuple) and isinstance(right, tuple)):
            return False
        if len(left) != 2 or len(right) != 2:
            return False
        return first(left[0], right[0]) and second(left[1], right[1])

    return equal_pairs
