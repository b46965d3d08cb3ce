"""Layout stage — place every component, then route every net."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from breadboard.pipeline.design.models import Circuit
from breadboard.pipeline.placer import PlacementResult, auto_place_components
from breadboard.pipeline.router import RoutingResult, route_circuit


log = logging.getLogger(__name__)


@dataclass
class BoardLayoutResult:
    placements: list[PlacementResult]
    routings: list[RoutingResult]

    @property
    def ok(self) -> bool:
        return (all(p.ok for p in self.placements)
                and all(r.success for r in self.routings))

    @property
    def failed_components(self) -> list[str]:
        return [p.component_id for p in self.placements if not p.ok]

    @property
    def failed_nets(self) -> list[str]:
        return [r.net_id for r in self.routings if not r.success]


def build_layout(circuit: Circuit) -> BoardLayoutResult:
    """Run the placer and router over a validated circuit."""
    log.info("Layout: %s (%d components, %d nets, %s board)",
             circuit.id, len(circuit.components), len(circuit.nets),
             circuit.board.kind.value)
    placements = auto_place_components(circuit.components, circuit.board)
    routings = route_circuit(circuit, placements)
    result = BoardLayoutResult(placements=placements, routings=routings)
    if not result.ok:
        log.warning("Layout: unplaced %s, unrouted %s",
                    result.failed_components, result.failed_nets)
    return result
