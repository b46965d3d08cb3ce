"""Electrical tie groups — which holes the board itself joins together.

A power-rail row is one conductor across the whole board.  A main-area
row is split into strips of five holes (``tie_group_width``).  Nothing
crosses between sections or rows; those links are made by components
and wires, never implicitly.
"""

from __future__ import annotations

from breadboard.pipeline.config import BOARD_LAYOUT, BoardLayout
from breadboard.pipeline.design.models import BoardConfig
from breadboard.pipeline.topology import Coordinate, Section, max_columns


TieGroupKey = tuple[Section, int, int]


def are_connected(
    a: Coordinate,
    b: Coordinate,
    layout: BoardLayout = BOARD_LAYOUT,
) -> bool:
    """True when the board alone makes *a* and *b* electrically identical."""
    if a.section != b.section or a.row != b.row:
        return False
    if a.section.is_power:
        return True
    if a.section.is_main:
        width = layout.tie_group_width
        return a.column // width == b.column // width
    return False


def get_connected_set(
    coord: Coordinate,
    config: BoardConfig,
    layout: BoardLayout = BOARD_LAYOUT,
) -> frozenset[Coordinate]:
    """Every hole tied to *coord*, including *coord* itself.

    The center gap carries no conductor, so its set is empty.
    """
    cols = max_columns(config, layout)
    if coord.section.is_power:
        start, end = 0, cols
    elif coord.section.is_main:
        width = layout.tie_group_width
        start = (coord.column // width) * width
        end = min(start + width, cols)
    else:
        return frozenset()
    return frozenset(
        Coordinate(coord.row, col, coord.section) for col in range(start, end)
    )


def tie_group_key(coord: Coordinate, layout: BoardLayout = BOARD_LAYOUT) -> TieGroupKey:
    """Hashable id of the tie group containing *coord*.

    Two holes share a key iff ``are_connected`` holds for them.  Rails
    use group index 0 for the whole row; gap holes key on their own
    column so they never merge with anything.
    """
    if coord.section.is_power:
        return (coord.section, coord.row, 0)
    if coord.section.is_main:
        return (coord.section, coord.row, coord.column // layout.tie_group_width)
    return (coord.section, coord.row, coord.column)
