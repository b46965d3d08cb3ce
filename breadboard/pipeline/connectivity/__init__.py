"""Connectivity — electrical equivalence on the board.

Submodules:
  ties    Tie-group rules (are_connected, get_connected_set, tie_group_key).
  checks  Short/open primitives consumed by design-rule checking.
"""

from .ties import are_connected, get_connected_set, tie_group_key
from .checks import Short, group_coordinates, find_shorts, find_opens

__all__ = [
    "are_connected", "get_connected_set", "tie_group_key",
    "Short", "group_coordinates", "find_shorts", "find_opens",
]
