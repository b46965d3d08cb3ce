"""Placement serialization — JSON conversion."""

from __future__ import annotations

from breadboard.pipeline.topology import Section

from .models import PlacementPosition, PlacementResult


def placement_to_dict(placements: list[PlacementResult]) -> dict:
    """Serialize placement results to a JSON-safe dict."""
    return {
        "placements": [
            {
                "componentId": p.component_id,
                "position": {
                    "row": p.position.row,
                    "column": p.position.column,
                    "span": p.position.span,
                },
                "rotation": p.rotation,
                "conflicts": list(p.conflicts),
                "section": p.section.value,
            }
            for p in placements
        ],
    }


def parse_placement(data: dict) -> list[PlacementResult]:
    """Parse a placement dict back into PlacementResults.

    ``span``, ``rotation``, ``conflicts`` and ``section`` are optional and
    default to 1, 0, [] and main-top.
    """
    return [
        PlacementResult(
            component_id=p["componentId"],
            position=PlacementPosition(
                row=p["position"]["row"],
                column=p["position"]["column"],
                span=p["position"].get("span", 1),
            ),
            rotation=p.get("rotation", 0),
            conflicts=list(p.get("conflicts", [])),
            section=Section(p.get("section", Section.MAIN_TOP.value)),
        )
        for p in data.get("placements", [])
    ]
