"""Placer — assigns every component a free span of breadboard holes.

Submodules:
  models        Output dataclasses and configuration constants.
  engine        PlacementEngine (occupancy map + first-fit search) and
                per-kind span / section / priority rules.
  serialization JSON conversion (placement_to_dict, parse_placement).
"""

from .models import (
    PlacementPosition, PlacementResult, PlacementOptions, NO_POSITION_CONFLICT,
)
from .engine import (
    PlacementEngine,
    component_span, preferred_section, placement_priority,
    auto_place_components, place_single_component,
)
from .serialization import placement_to_dict, parse_placement

__all__ = [
    # Models
    "PlacementPosition", "PlacementResult", "PlacementOptions",
    "NO_POSITION_CONFLICT",
    # Engine
    "PlacementEngine", "component_span", "preferred_section",
    "placement_priority", "auto_place_components", "place_single_component",
    # Serialization
    "placement_to_dict", "parse_placement",
]
