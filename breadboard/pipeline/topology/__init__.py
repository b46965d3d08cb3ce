"""Topology — breadboard coordinate frames and display labels.

Submodules:
  models   Section enum, Coordinate and Point value types.
  layout   Coordinate ↔ drawing-space projection, board bounds, labels.
"""

from .models import Coordinate, Point, Section
from .layout import (
    coordinate_to_point, point_to_coordinate,
    max_columns, section_rows, section_offset,
    board_dimensions, board_outline, iter_coordinates,
    row_label, column_label,
)

__all__ = [
    # Models
    "Coordinate", "Point", "Section",
    # Projection
    "coordinate_to_point", "point_to_coordinate",
    "max_columns", "section_rows", "section_offset",
    "board_dimensions", "board_outline", "iter_coordinates",
    # Labels
    "row_label", "column_label",
]
