"""Routing serialization — JSON conversion."""

from __future__ import annotations

from breadboard.pipeline.topology import Coordinate, Section

from .models import RoutingResult, Segment, SegmentKind


def routing_to_dict(results: list[RoutingResult]) -> dict:
    """Serialize routing results to a JSON-safe dict."""
    return {
        "routings": [
            {
                "netId": r.net_id,
                "segments": [
                    {
                        "start": _coord_to_dict(s.start),
                        "end": _coord_to_dict(s.end),
                        "type": s.kind.value,
                        "color": s.color,
                    }
                    for s in r.segments
                ],
                "success": r.success,
                "conflicts": list(r.conflicts),
            }
            for r in results
        ],
    }


def parse_routing(data: dict) -> list[RoutingResult]:
    """Parse a routing dict back into RoutingResults."""
    return [
        RoutingResult(
            net_id=r["netId"],
            segments=[
                Segment(
                    start=_coord_from_dict(s["start"]),
                    end=_coord_from_dict(s["end"]),
                    kind=SegmentKind(s["type"]),
                    color=s["color"],
                )
                for s in r.get("segments", [])
            ],
            success=bool(r.get("success", False)),
            conflicts=list(r.get("conflicts", [])),
        )
        for r in data.get("routings", [])
    ]


def _coord_to_dict(c: Coordinate) -> dict:
    return {"row": c.row, "column": c.column, "section": c.section.value}


def _coord_from_dict(d: dict) -> Coordinate:
    return Coordinate(
        row=d["row"],
        column=d["column"],
        section=Section(d.get("section", Section.MAIN_TOP.value)),
    )
