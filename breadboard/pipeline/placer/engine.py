"""Main placement engine — first-fit bin packing over breadboard rows.

Every component occupies ``span`` consecutive holes of one row in one
section.  The engine owns an occupancy map from hole to component id;
a hole is free iff it has no entry.  Placement scans rows top to bottom
and columns left to right and takes the first run of free holes wide
enough for the component.
"""

from __future__ import annotations

import logging
import math

from breadboard.pipeline.design.models import (
    BoardConfig, Component, ComponentKind, Footprint,
)
from breadboard.pipeline.topology import Section, max_columns, section_rows

from .models import (
    PlacementPosition, PlacementResult, PlacementOptions, OccupancyKey,
    NO_POSITION_CONFLICT, FREE_MARK, DEFAULT_PRIORITY,
)


log = logging.getLogger(__name__)


# ── Per-kind rules ─────────────────────────────────────────────────


def component_span(component: Component) -> int:
    """Number of hole columns the component's footprint covers."""
    kind = component.kind
    if kind in (ComponentKind.RESISTOR, ComponentKind.LED):
        return 2
    if kind == ComponentKind.IC:
        # DIP: half the pins per side, never narrower than a DIP-8
        return max(4, math.ceil(len(component.pins) / 2))
    if kind == ComponentKind.CAPACITOR:
        return 1 if component.footprint == Footprint.RADIAL else 2
    if kind == ComponentKind.TRANSISTOR:
        return 1
    if kind == ComponentKind.BUTTON:
        return 2
    if kind == ComponentKind.POT:
        return 1
    if kind == ComponentKind.POWER:
        return 3
    return 1


def preferred_section(component: Component, config: BoardConfig | None = None) -> Section:
    """Power sources sit on the top rail; everything else starts in A-E.

    ICs straddle the center gap but are anchored by their A-E row.  On a
    board without power rails, power sources fall back to A-E too.
    """
    has_rails = config is None or config.power_rails
    if component.kind == ComponentKind.POWER and has_rails:
        return Section.POWER_TOP
    return Section.MAIN_TOP


def placement_priority(component: Component) -> int:
    """Lower goes first: the most position-constrained kinds claim space early."""
    kind = component.kind
    if kind == ComponentKind.POWER:
        return 0
    if kind == ComponentKind.IC:
        return 1
    if kind == ComponentKind.RESISTOR:
        return 2
    if kind == ComponentKind.LED:
        return 3
    if kind == ComponentKind.CAPACITOR:
        return 4
    if kind == ComponentKind.TRANSISTOR:
        return 5
    return DEFAULT_PRIORITY


# ── Engine ─────────────────────────────────────────────────────────


class PlacementEngine:
    """Occupancy map plus first-fit search for one board.

    One engine owns its map; concurrent placement against the same
    engine must be serialised by the caller.
    """

    def __init__(self, config: BoardConfig) -> None:
        self.config = config
        self.occupancy: dict[OccupancyKey, str] = {}

    # ── Occupancy queries ──────────────────────────────────────────

    def is_occupied(self, row: int, column: int, section: Section) -> bool:
        return (section, row, column) in self.occupancy

    def owner(self, row: int, column: int, section: Section) -> str | None:
        return self.occupancy.get((section, row, column))

    def occupied_by(self, component_id: str) -> set[OccupancyKey]:
        return {k for k, cid in self.occupancy.items() if cid == component_id}

    def mark_occupied(
        self,
        row: int,
        column: int,
        section: Section,
        component_id: str,
        span: int = 1,
    ) -> None:
        for col in range(column, column + span):
            self.occupancy[(section, row, col)] = component_id

    def _span_is_free(self, row: int, column: int, span: int, section: Section) -> bool:
        return all(
            not self.is_occupied(row, col, section)
            for col in range(column, column + span)
        )

    # ── Search ─────────────────────────────────────────────────────

    def find_position(
        self,
        component: Component,
        section: Section | None = None,
        target_row: int | None = None,
        target_column: int | None = None,
    ) -> PlacementResult | None:
        """First free span for *component*, trying the target first.

        Returns None when no row of the section has ``span`` free
        consecutive holes.
        """
        span = component_span(component)
        section = section or preferred_section(component, self.config)
        cols = max_columns(self.config)
        rows = section_rows(section)

        if target_row is not None and target_column is not None:
            in_bounds = (0 <= target_row < rows
                         and 0 <= target_column
                         and target_column + span <= cols)
            if in_bounds and self._span_is_free(target_row, target_column, span, section):
                return self._result(component, target_row, target_column, span, section)
            log.debug("Placer: %s target (%d, %d) unavailable, scanning",
                      component.id, target_row, target_column)

        for row in range(rows):
            for col in range(cols - span + 1):
                if self._span_is_free(row, col, span, section):
                    return self._result(component, row, col, span, section)
        return None

    @staticmethod
    def _result(
        component: Component, row: int, column: int, span: int, section: Section,
    ) -> PlacementResult:
        return PlacementResult(
            component_id=component.id,
            position=PlacementPosition(row=row, column=column, span=span),
            rotation=0,
            conflicts=[],
            section=section,
        )

    # ── Mutation ───────────────────────────────────────────────────

    def place(
        self,
        component: Component,
        options: PlacementOptions | None = None,
        target_row: int | None = None,
        target_column: int | None = None,
    ) -> PlacementResult | None:
        """Find a position and claim its holes.  None if the board is full."""
        options = options or PlacementOptions()
        section = options.preferred_section or preferred_section(component, self.config)
        placement = self.find_position(component, section, target_row, target_column)
        if placement is None:
            log.warning("Placer: no room for %s (%s, span %d) in %s",
                        component.id, component.kind.value,
                        component_span(component), section.value)
            return None

        pos = placement.position
        self.mark_occupied(pos.row, pos.column, section, component.id, pos.span)
        log.debug("Placer: %s -> %s row %d cols %d-%d",
                  component.id, section.value, pos.row,
                  pos.column, pos.column + pos.span - 1)
        return placement

    def place_all(self, components: list[Component]) -> list[PlacementResult]:
        """Place components in priority order; every component gets a result.

        Unplaceable components come back with a conflict message instead
        of being dropped.
        """
        ordered = sorted(components, key=placement_priority)   # stable
        results: list[PlacementResult] = []
        for component in ordered:
            placement = self.place(component)
            if placement is None:
                placement = PlacementResult(
                    component_id=component.id,
                    position=PlacementPosition(row=0, column=0, span=1),
                    rotation=0,
                    conflicts=[NO_POSITION_CONFLICT],
                    section=preferred_section(component, self.config),
                )
            results.append(placement)

        placed = sum(1 for r in results if r.ok)
        log.info("Placer: placed %d/%d components", placed, len(results))
        return results

    def remove(self, component_id: str) -> None:
        """Release every hole owned by *component_id*.  Idempotent."""
        for key in self.occupied_by(component_id):
            del self.occupancy[key]

    def clear(self) -> None:
        self.occupancy.clear()

    def seed(self, placements: list[PlacementResult], exclude: str | None = None) -> None:
        """Claim the holes of existing placements, skipping *exclude*.

        Failed placements (with conflicts) hold no holes and are skipped.
        """
        for p in placements:
            if p.component_id == exclude or not p.ok:
                continue
            pos = p.position
            self.mark_occupied(pos.row, pos.column, p.section, p.component_id, pos.span)

    # ── Debug view ─────────────────────────────────────────────────

    def occupancy_grid(self, section: Section = Section.MAIN_TOP) -> list[list[str]]:
        """Rows × columns of owner ids, '.' where a hole is free."""
        return [
            [self.owner(row, col, section) or FREE_MARK
             for col in range(max_columns(self.config))]
            for row in range(section_rows(section))
        ]


# ── Convenience entry points ───────────────────────────────────────


def auto_place_components(
    components: list[Component],
    config: BoardConfig,
) -> list[PlacementResult]:
    """Place a whole circuit on an empty board."""
    return PlacementEngine(config).place_all(components)


def place_single_component(
    component: Component,
    config: BoardConfig,
    existing: list[PlacementResult],
    target_row: int | None = None,
    target_column: int | None = None,
    section: Section | None = None,
) -> PlacementResult | None:
    """(Re)place one component around everything already on the board.

    The component's own previous placement is not seeded, so it may
    move onto holes it currently holds.
    """
    engine = PlacementEngine(config)
    engine.seed(existing, exclude=component.id)
    return engine.place(
        component,
        PlacementOptions(preferred_section=section),
        target_row,
        target_column,
    )
