"""Circuit document — dataclasses, parsing, validation, lifecycle, and serialization."""

from .models import (
    BoardConfig, BoardKind, BOMEntry, Circuit, Component, ComponentKind,
    DesignError, Footprint, Net, NetNode, Orientation, Pin, PinType,
)
from .parsing import parse_circuit, parse_component, parse_net, parse_board
from .validation import validate_circuit
from .serialization import circuit_to_dict
from .lifecycle import (
    add_component, update_component, remove_component,
    add_net, update_net, remove_net,
    generate_ref_designator, generate_bom,
)

__all__ = [
    # Models
    "BoardConfig", "BoardKind", "BOMEntry", "Circuit", "Component",
    "ComponentKind", "DesignError", "Footprint", "Net", "NetNode",
    "Orientation", "Pin", "PinType",
    # Parsing / Validation / Serialization
    "parse_circuit", "parse_component", "parse_net", "parse_board",
    "validate_circuit", "circuit_to_dict",
    # Lifecycle
    "add_component", "update_component", "remove_component",
    "add_net", "update_net", "remove_net",
    "generate_ref_designator", "generate_bom",
]
