"""Router output dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from breadboard.pipeline.topology import Coordinate


class SegmentKind(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    JUMP = "jump"           # crosses the center gap


@dataclass
class Segment:
    """One straight wire run between two holes."""

    start: Coordinate
    end: Coordinate
    kind: SegmentKind
    color: str


@dataclass
class RoutingResult:
    """Wires for one net."""

    net_id: str
    segments: list[Segment] = field(default_factory=list)
    success: bool = True
    conflicts: list[str] = field(default_factory=list)


# (component_id, pin name) -> hole the lead sits in
AnchorMap = dict[tuple[str, str], Coordinate]
