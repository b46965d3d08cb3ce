"""Wire colour by net role."""

from __future__ import annotations

from breadboard.pipeline.config import WIRE_COLORS


# Checked in order; the first role with a matching substring wins.
ROLE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("power", ("vcc", "vdd", "+", "power")),
    ("ground", ("gnd", "vss", "-", "ground")),
    ("clock", ("clk", "clock")),
    ("data", ("data", "sda", "scl")),
    ("analog", ("analog", "adc")),
)


def net_role(net_name: str) -> str:
    """Classify a net name as power, ground, clock, data, analog or signal."""
    name = net_name.lower()
    for role, keywords in ROLE_KEYWORDS:
        if any(k in name for k in keywords):
            return role
    return "signal"


def wire_color(net_name: str) -> str:
    return WIRE_COLORS[net_role(net_name)]
