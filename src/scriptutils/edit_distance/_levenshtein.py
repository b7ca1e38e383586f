__all__ = ["levenshtein", "normalized_levenshtein"]

from collections.abc import Sequence
from typing import Any

from ._exceptions import InvalidSequenceError


def require_sequence(argument: object) -> None:
    if not isinstance(argument, Sequence):
        raise InvalidSequenceError(argument)


def levenshtein(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Levenshtein distance between two sequences of tokens.

    This is the minimum number of single-token insertions, deletions, and substitutions
    that transform ``a`` into ``b``. Strings are compared character by character, and
    other sequences element by element with ``==``. For example, the distance between
    ``"cot"`` and ``"cost"`` is 1, the insertion of ``"s"``.

    Wagner-Fischer only needs the previous row of the distance matrix to fill in the
    current one, so just two rows are kept. They span the shorter sequence, so memory
    is linear in ``min(len(a), len(b))``.
    """
    require_sequence(a)
    require_sequence(b)

    if len(a) == len(b) and all(token_a == token_b for token_a, token_b in zip(a, b)):
        return 0

    if len(a) == 0:
        return len(b)

    if len(b) == 0:
        return len(a)

    # Distance is symmetric, so let the columns run over the shorter sequence
    if len(b) > len(a):
        a, b = b, a

    previous = list(range(len(b) + 1))
    current = [0] * (len(b) + 1)

    for i, token_a in enumerate(a, start=1):
        current[0] = i
        for j, token_b in enumerate(b, start=1):
            if token_a == token_b:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(
                    current[j - 1],  # insertion
                    previous[j],  # deletion
                    previous[j - 1],  # substitution
                )
        previous, current = current, previous

    return previous[len(b)]


def normalized_levenshtein(a: Sequence[Any], b: Sequence[Any]) -> float:
    """Levenshtein distance divided by the length of the longer sequence, in [0, 1]."""
    distance = levenshtein(a, b)
    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0
    return distance / longest
