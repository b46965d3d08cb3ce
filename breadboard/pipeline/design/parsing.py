"""Circuit document parsing — convert raw dicts/JSON into a Circuit.

Documents use the editor's camelCase keys (``pinMap``, ``compId``,
``powerRails``).  Optional fields receive their defaults here so the
rest of the pipeline never has to guess.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from .models import (
    BoardConfig, BoardKind, Circuit, Component, ComponentKind, DesignError,
    Footprint, Net, NetNode, Orientation, Pin, PinType,
)


E = TypeVar("E", bound=Enum)


def parse_circuit(data: dict) -> Circuit:
    """Parse a raw dict (from JSON) into a Circuit."""
    for key in ("id", "name", "components", "nets"):
        if key not in data:
            raise DesignError(key, "missing")

    board_data = data.get("board")
    board = parse_board(board_data) if board_data else BoardConfig.for_kind()

    return Circuit(
        id=data["id"],
        name=data["name"],
        description=data.get("description"),
        components=[parse_component(c) for c in data["components"]],
        nets=[parse_net(n) for n in data["nets"]],
        board=board,
    )


def parse_component(data: dict) -> Component:
    cid = _require(data, "id", "component")
    where = f"components[{cid}]"
    position = data.get("position")
    pins = [
        Pin(
            id=_require(p, "id", f"{where}.pins"),
            name=_require(p, "name", f"{where}.pins"),
            type=_parse_enum(PinType, p.get("type", "other"), f"{where}.pins.type"),
            position=(float(p["position"]["x"]), float(p["position"]["y"]))
            if p.get("position") else None,
        )
        for p in data.get("pins", [])
    ]
    return Component(
        id=cid,
        ref=_require(data, "ref", where),
        kind=_parse_enum(ComponentKind, _require(data, "kind", where), f"{where}.kind"),
        footprint=_parse_enum(Footprint, _require(data, "footprint", where),
                              f"{where}.footprint"),
        pins=pins,
        pin_map={str(k): str(v) for k, v in data.get("pinMap", {}).items()},
        value=data.get("value"),
        orientation=_parse_enum(Orientation, data.get("orientation", "north"),
                                f"{where}.orientation"),
        position=(float(position["x"]), float(position["y"])) if position else None,
        properties=dict(data.get("properties") or {}),
    )


def parse_net(data: dict) -> Net:
    nid = _require(data, "id", "net")
    nodes = []
    for node in data.get("nodes", []):
        comp_id = node.get("compId", node.get("componentId"))
        if comp_id is None:
            raise DesignError(f"nets[{nid}].nodes", "node without compId")
        nodes.append(NetNode(component_id=comp_id,
                             pin=_require(node, "pin", f"nets[{nid}].nodes")))
    path = data.get("path")
    return Net(
        id=nid,
        name=data.get("name", nid),
        nodes=nodes,
        color=data.get("color"),
        routed=bool(data.get("routed", False)),
        path=[(float(p["x"]), float(p["y"])) for p in path] if path else None,
    )


def parse_board(data: dict) -> BoardConfig:
    kind = _parse_enum(BoardKind, data.get("kind", "full"), "board.kind")
    defaults = BoardConfig.for_kind(kind)
    return BoardConfig(
        kind=kind,
        columns=int(data.get("columns", defaults.columns)),
        rows=int(data.get("rows", defaults.rows)),
        power_rails=bool(data.get("powerRails", True)),
    )


def _require(data: dict, key: str, where: str):
    if key not in data:
        raise DesignError(f"{where}.{key}", "missing")
    return data[key]


def _parse_enum(enum_cls: type[E], raw, where: str) -> E:
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise DesignError(where, f"unknown value {raw!r} (expected one of: {allowed})") from None
