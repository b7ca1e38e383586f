__all__ = ["InvalidArgumentTypeError"]

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InvalidArgumentTypeError(TypeError):
    operation: str
    operand: object

    def __str__(self) -> str:
        return (
            f"The operand of ValueSet.{self.operation} must be a ValueSet, "
            f"not {type(self.operand).__name__}: {self.operand!r}"
        )
