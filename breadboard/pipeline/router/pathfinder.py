"""L-shaped Manhattan paths between two holes.

The path runs horizontally along the start row, then vertically to the
end hole.  It does not look at other wires or components; overlapping
wires are possible and left to the user.
"""

from __future__ import annotations

from shapely.geometry import LineString

from breadboard.pipeline.design.models import BoardConfig
from breadboard.pipeline.topology import (
    Coordinate, Point, Section, coordinate_to_point, point_to_coordinate,
)

from .models import Segment, SegmentKind


def find_path(start: Coordinate, end: Coordinate, config: BoardConfig) -> list[Point]:
    """Return 1-3 drawing-space points: start, optional corner, end."""
    start_pt = coordinate_to_point(start, config)
    end_pt = coordinate_to_point(end, config)

    path = [start_pt]
    if start_pt.x != end_pt.x:
        path.append(Point(end_pt.x, start_pt.y))
    if start_pt.y != end_pt.y:
        path.append(end_pt)
    return path


def path_length(path: list[Point]) -> float:
    """Total wire length in drawing units."""
    if len(path) < 2:
        return 0.0
    return LineString([p.as_tuple() for p in path]).length


def _board_half(section: Section) -> int:
    if section in (Section.POWER_TOP, Section.MAIN_TOP):
        return -1
    if section in (Section.MAIN_BOTTOM, Section.POWER_BOTTOM):
        return 1
    return 0


def path_segments(path: list[Point], config: BoardConfig, color: str) -> list[Segment]:
    """Split a point path into hole-to-hole segments.

    A segment whose ends lie on opposite sides of the center gap (or in
    it) is a jump over the gap.
    """
    segments: list[Segment] = []
    for a, b in zip(path, path[1:]):
        start = point_to_coordinate(a, config)
        end = point_to_coordinate(b, config)
        if _board_half(start.section) != _board_half(end.section):
            kind = SegmentKind.JUMP
        elif a.y == b.y:
            kind = SegmentKind.HORIZONTAL
        else:
            kind = SegmentKind.VERTICAL
        segments.append(Segment(start=start, end=end, kind=kind, color=color))
    return segments
