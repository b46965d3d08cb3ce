"""Placer output dataclasses and configuration constants."""

from __future__ import annotations

from dataclasses import dataclass, field

from breadboard.pipeline.topology import Section


# ── Output dataclasses ─────────────────────────────────────────────


@dataclass
class PlacementPosition:
    """Leftmost hole of a component and how many columns it covers."""

    row: int
    column: int
    span: int = 1


@dataclass
class PlacementResult:
    """Where one component landed, or why it could not."""

    component_id: str
    position: PlacementPosition
    rotation: int = 0                   # degrees
    conflicts: list[str] = field(default_factory=list)
    section: Section = Section.MAIN_TOP

    @property
    def ok(self) -> bool:
        return not self.conflicts

    def columns(self) -> range:
        return range(self.position.column, self.position.column + self.position.span)


@dataclass
class PlacementOptions:
    preferred_section: Section | None = None


# (section, row, column): one hole in the occupancy map.
OccupancyKey = tuple[Section, int, int]


# ── Configuration ──────────────────────────────────────────────────

NO_POSITION_CONFLICT = "No available position found"
FREE_MARK = "."                     # occupancy_grid filler for empty holes
DEFAULT_PRIORITY = 9                # kinds with no placement priority
