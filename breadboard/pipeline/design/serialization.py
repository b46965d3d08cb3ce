"""Circuit serialization — JSON conversion."""

from __future__ import annotations

from .models import BoardConfig, Circuit, Component, Net


def circuit_to_dict(circuit: Circuit) -> dict:
    """Serialize a Circuit to a JSON-safe dict (inverse of ``parse_circuit``)."""
    out = {
        "id": circuit.id,
        "name": circuit.name,
        "components": [component_to_dict(c) for c in circuit.components],
        "nets": [net_to_dict(n) for n in circuit.nets],
        "board": board_to_dict(circuit.board),
    }
    if circuit.description is not None:
        out["description"] = circuit.description
    return out


def component_to_dict(c: Component) -> dict:
    return {
        "id": c.id,
        "ref": c.ref,
        "kind": c.kind.value,
        "footprint": c.footprint.value,
        "pins": [
            {
                "id": p.id,
                "name": p.name,
                "type": p.type.value,
                **({"position": {"x": p.position[0], "y": p.position[1]}}
                   if p.position else {}),
            }
            for p in c.pins
        ],
        "pinMap": dict(c.pin_map),
        "orientation": c.orientation.value,
        **({"value": c.value} if c.value is not None else {}),
        **({"position": {"x": c.position[0], "y": c.position[1]}}
           if c.position else {}),
        **({"properties": dict(c.properties)} if c.properties else {}),
    }


def net_to_dict(n: Net) -> dict:
    return {
        "id": n.id,
        "name": n.name,
        "nodes": [{"compId": node.component_id, "pin": node.pin} for node in n.nodes],
        "routed": n.routed,
        **({"color": n.color} if n.color else {}),
        **({"path": [{"x": x, "y": y} for x, y in n.path]} if n.path else {}),
    }


def board_to_dict(b: BoardConfig) -> dict:
    return {
        "kind": b.kind.value,
        "columns": b.columns,
        "rows": b.rows,
        "powerRails": b.power_rails,
    }
