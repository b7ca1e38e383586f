from ._equality import (
    Equality,
    approximate_equality,
    identity_equality,
    key_equality,
    pairwise_equality,
    strict_equality,
    value_equality,
)
from ._exceptions import InvalidArgumentTypeError
from ._value_set import IdentityKey, ValueSet
