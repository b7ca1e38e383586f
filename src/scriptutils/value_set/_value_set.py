from __future__ import annotations

__all__ = ["ValueSet", "IdentityKey"]

import logging
from typing import Any, Callable, Hashable, Iterable, Iterator, MutableSet, TypeVar

from ._equality import Equality, pairwise_equality, value_equality
from ._exceptions import InvalidArgumentTypeError

logger = logging.getLogger(__name__)

Element = TypeVar("Element")

_missing = object()


class IdentityKey:
    """Storage key for a member that cannot serve as its own key."""

    __slots__ = ("value",)

    def __init__(self, value: object):
        self.value = value

    def __eq__(self, other):
        return type(other) is IdentityKey and self.value is other.value

    def __hash__(self):
        return hash(id(self.value))

    def __repr__(self) -> str:
        return f"IdentityKey({self.value!r})"


def _key(item: object) -> Hashable:
    try:
        hash(item)
    except TypeError:
        return IdentityKey(item)
    else:
        return item


def _operator(operation: str):
    def apply(self: ValueSet, other: object):
        if not isinstance(other, ValueSet):
            return NotImplemented
        else:
            return getattr(self, operation)(other)

    return apply


def _reflected_operator(self: ValueSet, other: object):
    # Only reached when the left operand is not a ValueSet
    return NotImplemented


class ValueSet(MutableSet[Element]):
    """A mutable set whose members are unique under an equality relation.

    Membership does not rely on hashing alone. Two distinct instances that the relation
    considers equal, such as two vectors with the same coordinates, are one member even
    when they hash differently or cannot be hashed at all. Every membership query first
    tries the keyed lookup and then scans all members, so ``add``, ``discard``, and
    ``in`` are linear in the worst case.

    Sets derived from this one (clones, unions, intersections, complements) use its
    equality relation.
    """

    def __init__(self, *items: Element, equality: Equality = value_equality):
        self._equality = equality
        self._items: dict[Hashable, Element] = {}
        self._count = 0
        for item in items:
            self.add(item)

    @classmethod
    def from_iterable(
        cls, items: Iterable[Element], *, equality: Equality = value_equality
    ) -> ValueSet[Element]:
        return cls(*items, equality=equality)

    def _from_iterable(self, items: Iterable[Any]) -> ValueSet[Any]:
        return type(self)(*items, equality=self._equality)

    @property
    def equality(self) -> Equality:
        return self._equality

    @property
    def count(self) -> int:
        return self._count

    def _find(self, item: object) -> Hashable:
        # Returns the storage key of the matching member, or _missing
        key = _key(item)
        member = self._items.get(key, _missing)
        if member is not _missing and (member is item or self._equality(member, item)):
            return key

        for stored_key, member in self._items.items():
            if member is item or self._equality(member, item):
                logger.debug("Matched %r to member %r by scanning", item, member)
                return stored_key

        return _missing

    def _require_value_set(self, operation: str, other: object) -> None:
        if not isinstance(other, ValueSet):
            raise InvalidArgumentTypeError(operation, other)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items.values())

    def __contains__(self, item: object) -> bool:
        return self.contains(item)

    def contains(self, item: object) -> bool:
        return self._find(item) is not _missing

    def add(self, item: Element, /) -> None:
        if self._find(item) is not _missing:
            return

        key = _key(item)
        if key in self._items:
            # The slot belongs to a member that == the item but that the relation tells apart
            key = IdentityKey(item)

        self._items[key] = item
        self._count += 1

    def discard(self, item: object, /) -> None:
        """Remove the member equal to item, which need not be item itself."""
        key = self._find(item)
        if key is not _missing:
            del self._items[key]
            self._count -= 1

    def clear(self) -> None:
        self._items.clear()
        self._count = 0

    def clone(self) -> ValueSet[Element]:
        clone = type(self)(equality=self._equality)
        clone._items = dict(self._items)
        clone._count = self._count
        return clone

    copy = clone
    __copy__ = clone

    def union(self, other: ValueSet[Element]) -> ValueSet[Element]:
        self._require_value_set("union", other)
        union = self.clone()
        for item in other:
            union.add(item)
        return union

    def intersection(self, other: ValueSet[Element]) -> ValueSet[Element]:
        self._require_value_set("intersection", other)
        return self._from_iterable(item for item in self if other.contains(item))

    def complement(self, other: ValueSet[Element]) -> ValueSet[Element]:
        """Relative complement: the members of this set not contained in other."""
        self._require_value_set("complement", other)
        return self._from_iterable(item for item in self if not other.contains(item))

    difference = complement

    def symmetric_difference(self, other: ValueSet[Element]) -> ValueSet[Element]:
        self._require_value_set("symmetric_difference", other)
        return self.complement(other).union(other.complement(self))

    def cartesian_product(self, other: ValueSet[Any]) -> ValueSet[tuple[Element, Any]]:
        """All pairs ``(a, b)`` with ``a`` from this set and ``b`` from other.

        Pairs are compared component-wise, the first component with this set's relation
        and the second with other's, so the product always has ``len(self) * len(other)``
        members.
        """
        self._require_value_set("cartesian_product", other)
        product = type(self)(equality=pairwise_equality(self._equality, other._equality))
        # Pairs of distinct members are distinct, so they skip the membership search
        for item in self:
            for other_item in other:
                pair = (item, other_item)
                key = _key(pair)
                if key in product._items:
                    key = IdentityKey(pair)
                product._items[key] = pair
                product._count += 1
        return product

    def is_subset_of(self, other: ValueSet[Any]) -> bool:
        self._require_value_set("is_subset_of", other)
        return all(other.contains(item) for item in self)

    issubset = is_subset_of

    def is_superset_of(self, other: ValueSet[Any]) -> bool:
        self._require_value_set("is_superset_of", other)
        return other.is_subset_of(self)

    issuperset = is_superset_of

    def equals(self, other: ValueSet[Any]) -> bool:
        self._require_value_set("equals", other)
        return (
            self._count == other._count and self.is_subset_of(other) and other.is_subset_of(self)
        )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ValueSet):
            return self.equals(other)
        else:
            return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, ValueSet):
            return self.is_subset_of(other)
        else:
            return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, ValueSet):
            return self._count < other._count and self.is_subset_of(other)
        else:
            return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, ValueSet):
            return self.is_superset_of(other)
        else:
            return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, ValueSet):
            return self._count > other._count and self.is_superset_of(other)
        else:
            return NotImplemented

    # Both - and / are relative complement
    __add__ = __or__ = _operator("union")
    __mul__ = __and__ = _operator("intersection")
    __sub__ = __truediv__ = _operator("complement")
    __xor__ = _operator("symmetric_difference")
    __ror__ = __rand__ = __rsub__ = __rxor__ = _reflected_operator

    def _discard_where(self, predicate: Callable[[Any], bool]) -> None:
        for key, member in list(self._items.items()):
            if predicate(member):
                del self._items[key]
                self._count -= 1

    # In-place forms decide membership in other with other's relation, like their binary forms

    def __ior__(self, other: object):
        if not isinstance(other, ValueSet):
            return NotImplemented
        for item in list(other):
            self.add(item)
        return self

    def __iand__(self, other: object):
        if not isinstance(other, ValueSet):
            return NotImplemented
        self._discard_where(lambda member: not other.contains(member))
        return self

    def __isub__(self, other: object):
        if not isinstance(other, ValueSet):
            return NotImplemented
        self._discard_where(other.contains)
        return self

    def __ixor__(self, other: object):
        if not isinstance(other, ValueSet):
            return NotImplemented
        added = other.complement(self)
        self._discard_where(other.contains)
        for item in added:
            self.add(item)
        return self

    __iadd__ = __ior__
    __imul__ = __iand__
    __itruediv__ = __isub__

    def isdisjoint(self, other: Iterable[Any]) -> bool:
        return not any(self.contains(item) for item in other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(item) for item in self)})"

    def __str__(self) -> str:
        return f"{{{', '.join(repr(item) for item in self)}}}"
