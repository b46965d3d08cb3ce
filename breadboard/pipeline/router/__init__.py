"""Router — wire paths and colours for each net.

Submodules:
  models        Output dataclasses (Segment, RoutingResult).
  pathfinder    L-shaped Manhattan path between two holes.
  colors        Net-name → wire colour classification.
  engine        Pin anchoring and per-net routing.
  serialization JSON conversion (routing_to_dict, parse_routing).
"""

from .models import Segment, SegmentKind, RoutingResult
from .pathfinder import find_path, path_length, path_segments
from .colors import wire_color, net_role
from .engine import pin_anchor, build_anchor_map, route_net, route_circuit
from .serialization import routing_to_dict, parse_routing

__all__ = [
    # Models
    "Segment", "SegmentKind", "RoutingResult",
    # Paths
    "find_path", "path_length", "path_segments",
    # Colours
    "wire_color", "net_role",
    # Engine
    "pin_anchor", "build_anchor_map", "route_net", "route_circuit",
    # Serialization
    "routing_to_dict", "parse_routing",
]
