__all__ = ["closest_match"]

import logging
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from returns.result import Failure, Result, Success

from ._exceptions import NoCloseMatchError
from ._levenshtein import levenshtein, require_sequence

logger = logging.getLogger(__name__)

Candidate = TypeVar("Candidate", bound=Sequence[Any])


def closest_match(
    target: Sequence[Any], candidates: Iterable[Candidate], max_distance: int | None = None
) -> Result[Candidate, NoCloseMatchError]:
    """Find the candidate with the smallest edit distance from target.

    Ties go to the candidate that comes first. When ``max_distance`` is given, candidates
    farther away than that are not accepted.
    """
    require_sequence(target)
    if max_distance is not None and max_distance < 0:
        raise ValueError(f"max_distance must be non-negative, not {max_distance}")

    candidate_count = 0
    best_distance: int | None = None
    best_candidate = None
    for candidate in candidates:
        candidate_count += 1
        distance = levenshtein(target, candidate)
        if distance == 0:
            return Success(candidate)
        if best_distance is None or distance < best_distance:
            best_distance = distance
            best_candidate = candidate

    match best_distance:
        case None:
            logger.debug("No candidates to match against %r", target)
            return Failure(NoCloseMatchError(target, max_distance, candidate_count))
        case distance if max_distance is not None and distance > max_distance:
            logger.debug(
                "Closest candidate %r is %d edits from %r, more than %d",
                best_candidate,
                distance,
                target,
                max_distance,
            )
            return Failure(NoCloseMatchError(target, max_distance, candidate_count))
        case _:
            return Success(best_candidate)
