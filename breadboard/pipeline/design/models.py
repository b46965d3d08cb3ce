"""Circuit document dataclasses — components, nets, board configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from breadboard.pipeline.config import BOARD_LAYOUT


class ComponentKind(str, Enum):
    RESISTOR = "resistor"
    LED = "led"
    IC = "ic"
    CAPACITOR = "capacitor"
    TRANSISTOR = "transistor"
    JUMPER = "jumper"
    POT = "pot"
    BUTTON = "button"
    POWER = "power"


class Footprint(str, Enum):
    AXIAL = "axial"
    LED5MM = "led5mm"
    DIP = "dip"
    TO92 = "to92"
    RADIAL = "radial"
    JUMPER = "jumper"
    BUTTON = "button"
    POWER = "power"
    POT = "pot"


class PinType(str, Enum):
    POWER = "power"
    GROUND = "ground"
    IO = "io"
    ANALOG = "analog"
    OTHER = "other"


class Orientation(str, Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class BoardKind(str, Enum):
    FULL = "full"
    HALF = "half"


@dataclass
class Pin:
    id: str
    name: str
    type: PinType
    position: tuple[float, float] | None = None     # sprite-local offset


@dataclass
class Component:
    """A circuit element instance."""

    id: str
    ref: str                        # designator, e.g. "R1"
    kind: ComponentKind
    footprint: Footprint
    pins: list[Pin] = field(default_factory=list)
    pin_map: dict[str, str] = field(default_factory=dict)   # "VCC" -> "8"
    value: str | None = None        # "220Ω", "NE555"
    orientation: Orientation = Orientation.NORTH
    position: tuple[float, float] | None = None     # free-floating drop point
    properties: dict[str, str] = field(default_factory=dict)

    def pin_index(self, pin_name: str) -> int | None:
        """Position of a pin in the ordered pin list, matched by name or id."""
        for i, pin in enumerate(self.pins):
            if pin.name == pin_name or pin.id == pin_name:
                return i
        return None


@dataclass
class NetNode:
    component_id: str
    pin: str                        # pin name on that component


@dataclass
class Net:
    id: str
    name: str
    nodes: list[NetNode] = field(default_factory=list)
    color: str | None = None
    routed: bool = False
    path: list[tuple[float, float]] | None = None


@dataclass
class BoardConfig:
    kind: BoardKind
    columns: int
    rows: int = BOARD_LAYOUT.rows
    power_rails: bool = True

    @classmethod
    def for_kind(cls, kind: BoardKind | str = BoardKind.FULL) -> BoardConfig:
        """Board config with the canonical column count for *kind*."""
        kind = BoardKind(kind)
        return cls(kind=kind, columns=BOARD_LAYOUT.columns_for_kind(kind.value))

    @property
    def is_half(self) -> bool:
        return self.kind == BoardKind.HALF


@dataclass
class Circuit:
    id: str
    name: str
    components: list[Component] = field(default_factory=list)
    nets: list[Net] = field(default_factory=list)
    board: BoardConfig = field(default_factory=BoardConfig.for_kind)
    description: str | None = None

    def component(self, component_id: str) -> Component | None:
        return next((c for c in self.components if c.id == component_id), None)

    def net(self, net_id: str) -> Net | None:
        return next((n for n in self.nets if n.id == net_id), None)


@dataclass
class BOMEntry:
    """One bill-of-materials line."""

    ref: str
    description: str
    footprint: str
    quantity: int
    value: str | None = None


class DesignError(Exception):
    """Raised when a circuit document cannot be parsed."""

    def __init__(self, field_name: str, reason: str) -> None:
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Invalid circuit field '{field_name}': {reason}")
