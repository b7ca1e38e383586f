from dataclasses import dataclass

import pytest

from scriptutils import ValueSet
from scriptutils.value_set import (
    IdentityKey,
    approximate_equality,
    identity_equality,
    key_equality,
    pairwise_equality,
    strict_equality,
    value_equality,
)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        (1, 1, True),
        (1, 1.0, True),
        ("a", "b", False),
        ([1, [2]], [1, [2]], True),
        ({"a": 1}, {"a": 2}, False),
        (Point(0, 1), Point(0, 1), True),
    ],
)
def test_value_equality(left, right, expected):
    assert value_equality(left, right) is expected


def test_identity_equality():
    item = [1]

    assert identity_equality(item, item)
    assert not identity_equality(item, [1])


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        (1, 1, True),
        (1, 1.0, False),
        (1, True, False),
        ((1, 2), (1, 2), True),
        ((1, 2), (1.0, 2), False),
        ((1, 2), [1, 2], False),
        ([1, (2, 3)], [1, (2, 3)], True),
        ([1, 2], [1, 2, 3], False),
        ({"a": 1}, {"a": 1}, True),
        ({"a": 1}, {"a": 1.0}, False),
        ({"a": 1}, {"b": 1}, False),
        ("text", "text", True),
    ],
)
def test_strict_equality(left, right, expected):
    assert strict_equality(left, right) is expected


def test_approximate_equality_on_numbers():
    equality = approximate_equality()

    assert equality(0.1 + 0.2, 0.3)
    assert not equality(0.3, 0.31)


def test_approximate_equality_on_vectors():
    equality = approximate_equality(abs_tol=1e-6)

    assert equality((0.1 + 0.2, 0.0, 1.0), (0.3, 1e-9, 1.0))
    assert not equality((0.3, 0.0), (0.3, 0.0, 0.0))
    assert not equality((0.3, 0.0), (0.3, 0.1))
    assert equality(["a", 1.0], ["a", 1.0 + 1e-12])


def test_approximate_equality_does_not_split_strings():
    equality = approximate_equality()

    assert equality("abc", "abc")
    assert not equality("abc", ["a", "b", "c"])


def test_approximate_equality_rejects_negative_tolerance():
    with pytest.raises(ValueError):
        approximate_equality(rel_tol=-1.0)


def test_approximate_value_set():
    actual = ValueSet((0.1 + 0.2, 0.0), (0.3, 0.0), (1.0, 1.0), equality=approximate_equality())

    assert actual.count == 2
    assert (0.30000000000000004, 0.0) in actual


def test_key_equality():
    equality = key_equality(str.casefold)
    actual = ValueSet("Apple", "APPLE", "banana", equality=equality)

    assert equality("Hello", "hELLO")
    assert actual.count == 2
    assert list(actual) == ["Apple", "banana"]
    assert "apple" in actual


def test_pairwise_equality():
    equality = pairwise_equality(strict_equality, value_equality)

    assert equality((1, 2), (1, 2.0))
    assert not equality((1, 2), (1.0, 2))
    assert not equality((1, 2), (1, 2, 3))
    assert not equality((1, 2), 1)


def test_identity_key():
    item = [1, 2]

    assert IdentityKey(item) == IdentityKey(item)
    assert IdentityKey(item) != IdentityKey([1, 2])
    assert hash(IdentityKey(item)) == hash(IdentityKey(item))
    assert repr(IdentityKey(item)) == "IdentityKey([1, 2])"
