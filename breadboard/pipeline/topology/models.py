"""Board coordinate dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Section(str, Enum):
    POWER_TOP = "power-top"
    MAIN_TOP = "main-top"
    CENTER_GAP = "center-gap"
    MAIN_BOTTOM = "main-bottom"
    POWER_BOTTOM = "power-bottom"

    @property
    def is_power(self) -> bool:
        return self in (Section.POWER_TOP, Section.POWER_BOTTOM)

    @property
    def is_main(self) -> bool:
        return self in (Section.MAIN_TOP, Section.MAIN_BOTTOM)


@dataclass(frozen=True)
class Coordinate:
    """A hole on the board grid.

    ``row`` is relative to its section; two coordinates are the same
    physical hole iff all three fields match.
    """

    row: int
    column: int
    section: Section


@dataclass(frozen=True)
class Point:
    """A position in drawing space (grid units × pitch)."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)
