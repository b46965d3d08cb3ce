"""Mapping between hole coordinates, drawing space, and display labels.

Drawing space stacks the sections top to bottom, one grid step per row:

    power-top    rows 0-1
    main-top     rows 2-6     (A-E)
    center-gap   row  7
    main-bottom  rows 8-12    (F-J)
    power-bottom rows 13-14

Every function here is pure; nothing fails on odd input.  Columns
outside the board are clamped when projecting, not rejected.
"""

from __future__ import annotations

import math
from typing import Iterator

from shapely.geometry import box as shapely_box
from shapely.geometry import Polygon

from breadboard.pipeline.config import BOARD_LAYOUT, BoardLayout
from breadboard.pipeline.design.models import BoardConfig

from .models import Coordinate, Point, Section


SECTION_ORDER = (
    Section.POWER_TOP, Section.MAIN_TOP, Section.CENTER_GAP,
    Section.MAIN_BOTTOM, Section.POWER_BOTTOM,
)


def max_columns(config: BoardConfig, layout: BoardLayout = BOARD_LAYOUT) -> int:
    """Column count for the board kind (config.columns is not consulted)."""
    return layout.half_columns if config.is_half else layout.full_columns


def section_rows(section: Section, layout: BoardLayout = BOARD_LAYOUT) -> int:
    """Number of addressable rows in *section*."""
    if section.is_power:
        return layout.power_rail_rows
    if section.is_main:
        return layout.main_area_rows
    return 1


def section_offset(section: Section, layout: BoardLayout = BOARD_LAYOUT) -> int:
    """Grid row at which *section* starts."""
    if section == Section.POWER_TOP:
        return 0
    if section == Section.MAIN_TOP:
        return layout.main_top_offset
    if section == Section.CENTER_GAP:
        return layout.center_gap_offset
    if section == Section.MAIN_BOTTOM:
        return layout.main_bottom_offset
    return layout.power_bottom_offset


def coordinate_to_point(
    coord: Coordinate,
    config: BoardConfig,
    layout: BoardLayout = BOARD_LAYOUT,
) -> Point:
    """Project a hole to drawing space.  Out-of-range columns are clamped."""
    column = max(0, min(coord.column, max_columns(config, layout) - 1))
    if coord.section == Section.CENTER_GAP:
        grid_row = layout.center_gap_offset
    else:
        grid_row = section_offset(coord.section, layout) + coord.row
    return Point(x=column * layout.grid_size, y=grid_row * layout.grid_size)


def point_to_coordinate(
    point: Point,
    config: BoardConfig,
    layout: BoardLayout = BOARD_LAYOUT,
) -> Coordinate:
    """Snap a drawing-space point to the nearest hole and classify its section."""
    column = _round_half_up(point.x / layout.grid_size)
    grid_row = _round_half_up(point.y / layout.grid_size)

    if grid_row < layout.main_top_offset:
        return Coordinate(grid_row, column, Section.POWER_TOP)
    if grid_row < layout.center_gap_offset:
        return Coordinate(grid_row - layout.main_top_offset, column, Section.MAIN_TOP)
    if grid_row == layout.center_gap_offset:
        return Coordinate(0, column, Section.CENTER_GAP)
    if grid_row < layout.power_bottom_offset:
        return Coordinate(grid_row - layout.main_bottom_offset, column, Section.MAIN_BOTTOM)
    return Coordinate(grid_row - layout.power_bottom_offset, column, Section.POWER_BOTTOM)


def _round_half_up(value: float) -> int:
    # Halves snap towards +inf, matching the editor's pointer snapping.
    return int(math.floor(value + 0.5))


def board_dimensions(
    config: BoardConfig,
    layout: BoardLayout = BOARD_LAYOUT,
) -> tuple[int, int]:
    """(width, height) of the board in drawing units."""
    width = max_columns(config, layout) * layout.grid_size
    height = layout.grid_rows * layout.grid_size
    return (width, height)


def board_outline(
    config: BoardConfig,
    layout: BoardLayout = BOARD_LAYOUT,
) -> Polygon:
    """Board rectangle in drawing space, origin at the top-left hole."""
    width, height = board_dimensions(config, layout)
    return shapely_box(0, 0, width, height)


def iter_coordinates(
    config: BoardConfig,
    section: Section | None = None,
    layout: BoardLayout = BOARD_LAYOUT,
) -> Iterator[Coordinate]:
    """Yield every addressable hole, top to bottom, left to right.

    The center gap has no holes and is never yielded.  Power rails are
    skipped on boards configured without them.
    """
    sections = (section,) if section else SECTION_ORDER
    cols = max_columns(config, layout)
    for sec in sections:
        if sec == Section.CENTER_GAP:
            continue
        if sec.is_power and not config.power_rails:
            continue
        for row in range(section_rows(sec, layout)):
            for col in range(cols):
                yield Coordinate(row, col, sec)


# ── Labels ─────────────────────────────────────────────────────────


def row_label(coord: Coordinate) -> str:
    """Printed row label: "+"/"-" for rails, A-E above the gap, F-J below."""
    if coord.section.is_power:
        return "+" if coord.row == 0 else "-"
    if coord.section == Section.MAIN_TOP:
        return chr(ord("A") + coord.row)
    if coord.section == Section.MAIN_BOTTOM:
        return chr(ord("F") + coord.row)
    return ""


def column_label(column: int) -> str:
    """1-indexed column number, printed at the first column and every 5th."""
    if column == 0 or (column + 1) % 5 == 0:
        return str(column + 1)
    return ""
