"""Short and open primitives for design-rule checking.

Callers describe which holes each net touches (``net_id -> holes``); the
functions here only reason about what the board's own tie groups join.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from breadboard.pipeline.topology import Coordinate

from .ties import TieGroupKey, tie_group_key


log = logging.getLogger(__name__)


@dataclass
class Short:
    """A tie group touched by more than one net."""

    group: TieGroupKey
    net_ids: list[str]
    holes: list[Coordinate]

    @property
    def message(self) -> str:
        section, row, _ = self.group
        return (f"Nets {', '.join(self.net_ids)} share a tie point "
                f"({section.value} row {row})")


def group_coordinates(holes: Iterable[Coordinate]) -> dict[TieGroupKey, list[Coordinate]]:
    """Partition holes by tie group, preserving first-seen order."""
    groups: dict[TieGroupKey, list[Coordinate]] = {}
    for hole in holes:
        groups.setdefault(tie_group_key(hole), []).append(hole)
    return groups


def find_shorts(net_holes: dict[str, list[Coordinate]]) -> list[Short]:
    """Report every tie group that two or more distinct nets land in."""
    owners: dict[TieGroupKey, list[str]] = {}
    holes_by_group: dict[TieGroupKey, list[Coordinate]] = {}
    for net_id, holes in net_holes.items():
        for key, group_holes in group_coordinates(holes).items():
            owners.setdefault(key, []).append(net_id)
            holes_by_group.setdefault(key, []).extend(group_holes)

    shorts = [
        Short(group=key, net_ids=nets, holes=holes_by_group[key])
        for key, nets in owners.items()
        if len(nets) > 1
    ]
    for s in shorts:
        log.warning("DRC: %s", s.message)
    return shorts


def find_opens(net_holes: dict[str, list[Coordinate]]) -> list[str]:
    """Nets whose holes do not all sit in one common tie group.

    Such a net relies on wires or component leads to be continuous;
    the board alone leaves it open.  Nets with fewer than two holes
    are never open.
    """
    opens: list[str] = []
    for net_id, holes in net_holes.items():
        if len(holes) < 2:
            continue
        groups = group_coordinates(holes)
        if len(groups) > 1:
            log.debug("DRC: net %s spans %d tie groups", net_id, len(groups))
            opens.append(net_id)
    return opens
