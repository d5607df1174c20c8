from __future__ import annotations

from dataclasses import dataclass
from typing import Final


__all__: list[str] = [
    "Unit",
    "UNIT",
]


@dataclass(frozen=True, slots=True, eq=False)
class Unit:
    """
    Zero-information marker value.

    Returned by side-effect-only pattern matches and used as the unused side
    of a two-sided type (e.g. ``Eval.to_left()`` yields ``Either[T, Unit]``).
    Every Unit equals every other Unit and none orders before another.
    """

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unit)

    def __ne__(self, other: object) -> bool:
        return not isinstance(other, Unit)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return False

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return False

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return True

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return 1

    def __repr__(self) -> str:
        return "Unit"

    def compare_to(self, other: Unit) -> int:
        return 0


UNIT: Final[Unit] = Unit()
