"""Value types shared by lines and documents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


@total_ordering
@dataclass(frozen=True, slots=True)
class Position:
    """A cursor slot: ``x`` is the grapheme column, ``y`` the row.

    Positions order row-first, then by column.
    """

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(
                f"Position coordinates must be >= 0, got ({self.x}, {self.y})"
            )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)


class SearchDirection(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
