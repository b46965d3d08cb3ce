"""Net router — turns each net's nodes into coloured wire segments.

Pipeline per net:
  1. Resolve every node to the hole its lead sits in (``pin_anchor``).
  2. Walk the nodes in order; consecutive nodes already tied by the
     board need no wire, the rest get an L-shaped path.
  3. Split each path into horizontal / vertical / jump segments.

Nodes whose component was never placed are reported as conflicts and
the net is marked unsuccessful; the remaining hops are still routed.
"""

from __future__ import annotations

import logging

from breadboard.pipeline.connectivity import are_connected
from breadboard.pipeline.design.models import (
    BoardConfig, Circuit, Component, ComponentKind, Net,
)
from breadboard.pipeline.placer.models import PlacementResult
from breadboard.pipeline.topology import Coordinate, Section, section_rows

from .colors import wire_color
from .models import AnchorMap, RoutingResult
from .pathfinder import find_path, path_segments


log = logging.getLogger(__name__)


def pin_anchor(
    component: Component,
    placement: PlacementResult,
    pin_name: str,
) -> Coordinate | None:
    """Hole holding *pin_name* of a placed component.

    Leads fill the span left to right in pin order; pins past the span
    share its last column.  A DIP straddles the center gap: pins
    1..n/2 run left to right along the bottom-half row mirroring the
    placement row (E pairs with F, A with J), the rest return right to
    left along the placement row (pin 1 bottom-left, counter-clockwise).
    Returns None for failed placements or unknown pins.
    """
    if not placement.ok:
        return None
    index = component.pin_index(pin_name)
    if index is None:
        return None

    pos = placement.position
    if component.kind == ComponentKind.IC and placement.section == Section.MAIN_TOP:
        half = max(1, (len(component.pins) + 1) // 2)
        if index < half:
            bottom_row = section_rows(Section.MAIN_TOP) - 1 - pos.row
            return Coordinate(bottom_row, pos.column + min(index, pos.span - 1), Section.MAIN_BOTTOM)
        mirrored = len(component.pins) - 1 - index
        return Coordinate(pos.row, pos.column + min(mirrored, pos.span - 1), placement.section)

    return Coordinate(pos.row, pos.column + min(index, pos.span - 1), placement.section)


def build_anchor_map(circuit: Circuit, placements: list[PlacementResult]) -> AnchorMap:
    """Anchor every net node whose component has a successful placement."""
    by_id = {p.component_id: p for p in placements}
    anchors: AnchorMap = {}
    for net in circuit.nets:
        for node in net.nodes:
            comp = circuit.component(node.component_id)
            placement = by_id.get(node.component_id)
            if comp is None or placement is None:
                continue
            hole = pin_anchor(comp, placement, node.pin)
            if hole is not None:
                anchors[(node.component_id, node.pin)] = hole
    return anchors


def route_net(net: Net, anchors: AnchorMap, config: BoardConfig) -> RoutingResult:
    """Chain the net's anchored nodes with L-shaped wires."""
    color = net.color or wire_color(net.name)
    result = RoutingResult(net_id=net.id)

    holes: list[Coordinate] = []
    for node in net.nodes:
        hole = anchors.get((node.component_id, node.pin))
        if hole is None:
            result.conflicts.append(
                f"Node {node.component_id}:{node.pin} has no placed hole")
            continue
        holes.append(hole)

    for a, b in zip(holes, holes[1:]):
        if a == b or are_connected(a, b):
            continue
        path = find_path(a, b, config)
        result.segments.extend(path_segments(path, config, color))

    result.success = not result.conflicts
    if result.success:
        log.debug("Router: net %s -> %d segments", net.id, len(result.segments))
    else:
        log.warning("Router: net %s incomplete: %s", net.id, "; ".join(result.conflicts))
    return result


def route_circuit(circuit: Circuit, placements: list[PlacementResult]) -> list[RoutingResult]:
    """Route every net of *circuit* against the given placements."""
    anchors = build_anchor_map(circuit, placements)
    results = [route_net(net, anchors, circuit.board) for net in circuit.nets]
    routed = sum(1 for r in results if r.success)
    log.info("Router: %d/%d nets routed", routed, len(results))
    return results
