__all__ = ["InvalidSequenceError", "NoCloseMatchError"]

from dataclasses import dataclass
from typing import Any, Sequence


@dataclass(frozen=True, slots=True)
class InvalidSequenceError(TypeError):
    argument: object

    def __str__(self) -> str:
        return (
            f"Edit distance is only defined between sequences, "
            f"but got {type(self.argument).__name__}: {self.argument!r}"
        )


@dataclass(frozen=True, slots=True)
class NoCloseMatchError(Exception):
    target: Sequence[Any]
    max_distance: int | None
    candidate_count: int

    def __str__(self) -> str:
        if self.candidate_count == 0:
            return f"There were no candidates to match against {self.target!r}"
        else:
            return (
                f"None of the {self.candidate_count} candidates is within an edit distance "
                f"of {self.max_distance} from {self.target!r}"
            )
