"""Shared physical constants for the breadboard pipeline.

These values describe the geometry of a solderless breadboard: the hole
pitch in drawing units, how many rows each section has, and how many
columns each board size carries.  The **topology** projection, the
**placer** row scan and the **router** all derive their numbers from this
single source of truth.

Change a value here and every stage stays in sync automatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BoardLayout:
    """Physical layout of a breadboard.

    Distances are in drawing units (one grid step = one hole pitch).
    """

    grid_size: int = 10
    """Distance between two neighbouring holes."""

    full_columns: int = 63
    """Columns on a full-size board."""

    half_columns: int = 30
    """Columns on a half-size board."""

    rows: int = 30

    power_rail_rows: int = 2
    """Rows per power-rail strip (+ and -)."""

    main_area_rows: int = 5
    """Rows per main terminal area (A–E above the gap, F–J below)."""

    tie_group_width: int = 5
    """Consecutive main-area holes that are electrically tied together."""

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def main_top_offset(self) -> int:
        return self.power_rail_rows

    @property
    def center_gap_offset(self) -> int:
        return self.power_rail_rows + self.main_area_rows

    @property
    def main_bottom_offset(self) -> int:
        return self.power_rail_rows + self.main_area_rows + 1

    @property
    def power_bottom_offset(self) -> int:
        return self.main_bottom_offset + self.main_area_rows

    @property
    def grid_rows(self) -> int:
        """Total grid rows from the top rail to the bottom rail."""
        return self.power_rail_rows * 2 + self.main_area_rows * 2 + 1

    def columns_for_kind(self, kind: str) -> int:
        """Canonical column count for a board kind ("full" or "half")."""
        return self.half_columns if kind == "half" else self.full_columns


# Module-level singleton, importable everywhere.
BOARD_LAYOUT = BoardLayout()


# Wire colours by net role.
WIRE_COLORS = {
    "power": "#ff0000",     # red for VCC
    "ground": "#000000",    # black for GND
    "signal": "#00aa00",
    "analog": "#0066cc",
    "clock": "#ff6600",
    "data": "#8800cc",
}
