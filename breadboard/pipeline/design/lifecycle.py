"""Component and net lifecycle on a Circuit: add, update, remove, designators, BOM."""

from __future__ import annotations

import logging
from dataclasses import fields

from .models import BOMEntry, Circuit, Component, ComponentKind, DesignError, Net


log = logging.getLogger(__name__)


REF_PREFIXES: dict[ComponentKind, str] = {
    ComponentKind.RESISTOR: "R",
    ComponentKind.LED: "LED",
    ComponentKind.IC: "U",
    ComponentKind.CAPACITOR: "C",
    ComponentKind.TRANSISTOR: "Q",
    ComponentKind.JUMPER: "W",
    ComponentKind.POT: "RV",
    ComponentKind.BUTTON: "SW",
    ComponentKind.POWER: "PS",
}


def add_component(circuit: Circuit, component: Component) -> None:
    circuit.components.append(component)


def update_component(circuit: Circuit, component_id: str, **changes) -> bool:
    """Apply *changes* to a component in place.  False if it does not exist."""
    component = circuit.component(component_id)
    if component is None:
        return False
    _apply(component, changes)
    return True


def remove_component(circuit: Circuit, component_id: str) -> bool:
    """Remove a component and prune every net that references it.

    Nets left without nodes are deleted; the others only lose the
    dangling nodes.  Returns True if the component existed.
    """
    before = len(circuit.components)
    circuit.components = [c for c in circuit.components if c.id != component_id]
    removed = len(circuit.components) != before

    kept = []
    for net in circuit.nets:
        nodes = [n for n in net.nodes if n.component_id != component_id]
        if len(nodes) != len(net.nodes):
            log.debug("Net %s: dropped %d node(s) of %s",
                      net.id, len(net.nodes) - len(nodes), component_id)
        if not nodes:
            log.info("Net %s deleted: no nodes left after removing %s",
                     net.id, component_id)
            continue
        net.nodes = nodes
        kept.append(net)
    circuit.nets = kept
    return removed


def add_net(circuit: Circuit, net: Net) -> None:
    circuit.nets.append(net)


def update_net(circuit: Circuit, net_id: str, **changes) -> bool:
    net = circuit.net(net_id)
    if net is None:
        return False
    _apply(net, changes)
    return True


def remove_net(circuit: Circuit, net_id: str) -> bool:
    before = len(circuit.nets)
    circuit.nets = [n for n in circuit.nets if n.id != net_id]
    return len(circuit.nets) != before


def _apply(target, changes: dict) -> None:
    known = {f.name for f in fields(target)}
    for name in changes:
        if name not in known:
            raise DesignError(name, f"not a field of {type(target).__name__}")
    for name, value in changes.items():
        setattr(target, name, value)


def generate_ref_designator(kind: ComponentKind, existing_refs: list[str]) -> str:
    """First unused ``<prefix><n>`` designator for *kind*, counting from 1."""
    prefix = REF_PREFIXES.get(kind, "X")
    taken = set(existing_refs)
    counter = 1
    while f"{prefix}{counter}" in taken:
        counter += 1
    return f"{prefix}{counter}"


def generate_bom(components: list[Component]) -> list[BOMEntry]:
    """Group identical parts into bill-of-materials lines.

    Parts are identical when they share value (or kind, if unvalued) and
    footprint.  The first instance's designator represents the line.
    """
    entries: dict[tuple[str, str], BOMEntry] = {}
    for c in components:
        key = (c.value or c.kind.value, c.footprint.value)
        if key in entries:
            entries[key].quantity += 1
        else:
            entries[key] = BOMEntry(
                ref=c.ref,
                description=f"{c.kind.value} {c.value or ''}".strip(),
                value=c.value,
                footprint=c.footprint.value,
                quantity=1,
            )
    return list(entries.values())
