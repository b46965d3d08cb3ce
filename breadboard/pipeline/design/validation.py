"""Circuit validation — structural checks before the document reaches the placer."""

from __future__ import annotations

from breadboard.pipeline.config import BOARD_LAYOUT

from .models import Circuit


def validate_circuit(circuit: Circuit) -> list[str]:
    """Validate a Circuit. Returns error messages (empty = valid)."""
    errors: list[str] = []

    # ── Component IDs must be unique ──
    components: dict[str, object] = {}
    for c in circuit.components:
        if c.id in components:
            errors.append(f"Duplicate component id '{c.id}'")
        components[c.id] = c

    # ── Net IDs must be unique ──
    seen_nets: set[str] = set()
    for net in circuit.nets:
        if net.id in seen_nets:
            errors.append(f"Duplicate net id '{net.id}'")
        seen_nets.add(net.id)

    # ── Net node references ──
    for net in circuit.nets:
        for node in net.nodes:
            comp = circuit.component(node.component_id)
            if comp is None:
                errors.append(
                    f"Net '{net.id}': unknown component '{node.component_id}'")
                continue
            if comp.pin_index(node.pin) is None:
                errors.append(
                    f"Net '{net.id}': unknown pin '{node.pin}' on "
                    f"'{comp.id}' ({comp.ref})"
                )

    # ── Board geometry ──
    expected = BOARD_LAYOUT.columns_for_kind(circuit.board.kind.value)
    if circuit.board.columns != expected:
        errors.append(
            f"Board: {circuit.board.kind.value} board must have {expected} "
            f"columns, got {circuit.board.columns}"
        )

    return errors
