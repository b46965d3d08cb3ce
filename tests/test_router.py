"""Tests for the wire router.

Uses the LED fixture as the primary test case:
  - VCC: rail hole → resistor lead, crosses from rail into row A
  - LED_DRIVE: resistor and LED share a tie group, no wire needed
  - GND: LED cathode → rail, an L-shaped wire

Validates:
  - L-shaped paths have at most three points, horizontal first
  - Wire colour precedence by net name
  - Pin anchoring for two-lead parts and DIP packages
  - Segment kinds (horizontal, vertical, jump over the center gap)
  - Unplaced nodes are reported, not raised
  - Serialization round-trips correctly
"""

from __future__ import annotations

import json
import unittest

from breadboard.pipeline.config import WIRE_COLORS
from breadboard.pipeline.design.models import BoardConfig, Net, NetNode
from breadboard.pipeline.placer import (
    PlacementPosition, PlacementResult, NO_POSITION_CONFLICT, auto_place_components,
)
from breadboard.pipeline.router import (
    SegmentKind,
    find_path, path_length, path_segments, wire_color, net_role,
    pin_anchor, build_anchor_map, route_net, route_circuit,
    routing_to_dict, parse_routing,
)
from breadboard.pipeline.topology import Coordinate, Point, Section
from tests.circuit_fixture import make_ic, make_led_circuit, make_resistor


FULL = BoardConfig.for_kind("full")


class TestFindPath(unittest.TestCase):

    def test_l_shape_horizontal_then_vertical(self):
        start = Coordinate(0, 2, Section.MAIN_TOP)
        end = Coordinate(3, 8, Section.MAIN_BOTTOM)
        path = find_path(start, end, FULL)
        self.assertEqual(path, [Point(20, 20), Point(80, 20), Point(80, 110)])

    def test_same_row_is_straight(self):
        path = find_path(Coordinate(1, 0, Section.MAIN_TOP),
                         Coordinate(1, 9, Section.MAIN_TOP), FULL)
        self.assertEqual(path, [Point(0, 30), Point(90, 30)])

    def test_same_column_is_straight(self):
        path = find_path(Coordinate(0, 4, Section.POWER_TOP),
                         Coordinate(2, 4, Section.MAIN_TOP), FULL)
        self.assertEqual(path, [Point(40, 0), Point(40, 40)])

    def test_same_hole_is_single_point(self):
        hole = Coordinate(2, 2, Section.MAIN_TOP)
        self.assertEqual(find_path(hole, hole, FULL), [Point(20, 40)])

    def test_clamped_columns_collapse(self):
        """Two off-board columns clamp to the same edge hole."""
        path = find_path(Coordinate(0, 70, Section.MAIN_TOP),
                         Coordinate(0, 90, Section.MAIN_TOP), FULL)
        self.assertEqual(len(path), 1)

    def test_path_is_manhattan(self):
        path = find_path(Coordinate(1, 40, Section.POWER_BOTTOM),
                         Coordinate(0, 3, Section.MAIN_TOP), FULL)
        self.assertLessEqual(len(path), 3)
        for a, b in zip(path, path[1:]):
            self.assertTrue(a.x == b.x or a.y == b.y)

    def test_path_length(self):
        path = [Point(20, 20), Point(80, 20), Point(80, 110)]
        self.assertAlmostEqual(path_length(path), 60 + 90)
        self.assertEqual(path_length([Point(0, 0)]), 0.0)


class TestWireColor(unittest.TestCase):

    def test_precedence(self):
        self.assertEqual(wire_color("GND_CLK"), WIRE_COLORS["ground"])
        self.assertEqual(wire_color("VCC"), WIRE_COLORS["power"])
        self.assertEqual(wire_color("D0_DATA"), WIRE_COLORS["data"])
        self.assertEqual(wire_color("randomNet"), WIRE_COLORS["signal"])

    def test_case_insensitive(self):
        self.assertEqual(net_role("vdd_3v3"), "power")
        self.assertEqual(net_role("Ground"), "ground")
        self.assertEqual(net_role("SysClock"), "clock")
        self.assertEqual(net_role("I2C_SCL"), "data")
        self.assertEqual(net_role("ADC0"), "analog")

    def test_symbols(self):
        self.assertEqual(net_role("+5V"), "power")
        self.assertEqual(net_role("V-"), "ground")
        # power is checked before ground
        self.assertEqual(net_role("VCC-GND"), "power")


class TestPinAnchor(unittest.TestCase):

    def test_two_lead_part_fills_span(self):
        r = make_resistor()
        placement = PlacementResult("r_1", PlacementPosition(2, 10, 2), section=Section.MAIN_TOP)
        self.assertEqual(pin_anchor(r, placement, "1"), Coordinate(2, 10, Section.MAIN_TOP))
        self.assertEqual(pin_anchor(r, placement, "2"), Coordinate(2, 11, Section.MAIN_TOP))

    def test_pin_matched_by_id(self):
        r = make_resistor()
        placement = PlacementResult("r_1", PlacementPosition(0, 0, 2))
        self.assertEqual(pin_anchor(r, placement, "r_1-2").column, 1)

    def test_dip_straddles_center_gap(self):
        ic = make_ic(pin_count=8)
        placement = PlacementResult("u_1", PlacementPosition(4, 20, 4), section=Section.MAIN_TOP)
        # pins 1-4 along row F, left to right
        self.assertEqual(pin_anchor(ic, placement, "1"), Coordinate(0, 20, Section.MAIN_BOTTOM))
        self.assertEqual(pin_anchor(ic, placement, "4"), Coordinate(0, 23, Section.MAIN_BOTTOM))
        # pins 5-8 return along the placement row, right to left
        self.assertEqual(pin_anchor(ic, placement, "5"), Coordinate(4, 23, Section.MAIN_TOP))
        self.assertEqual(pin_anchor(ic, placement, "8"), Coordinate(4, 20, Section.MAIN_TOP))

    def test_dip_bottom_row_mirrors_placement_row(self):
        ic = make_ic(pin_count=8)
        placement = PlacementResult("u_1", PlacementPosition(0, 0, 4), section=Section.MAIN_TOP)
        # row A pairs with row J
        self.assertEqual(pin_anchor(ic, placement, "1"), Coordinate(4, 0, Section.MAIN_BOTTOM))
        self.assertEqual(pin_anchor(ic, placement, "8"), Coordinate(0, 0, Section.MAIN_TOP))

    def test_stacked_dips_never_share_a_hole(self):
        # 7 DIP-8s fill row A of a half board, the 8th lands in row B
        ics = [make_ic(f"u_{i}", f"U{i}") for i in range(8)]
        placements = auto_place_components(ics, BoardConfig.for_kind("half"))
        by_id = {p.component_id: p for p in placements}
        self.assertEqual(by_id["u_7"].position.row, 1)
        self.assertEqual(by_id["u_7"].position.column, by_id["u_0"].position.column)

        seen = {}
        for ic in ics:
            for pin in ic.pins:
                hole = pin_anchor(ic, by_id[ic.id], pin.name)
                self.assertNotIn(hole, seen, f"{ic.id}:{pin.name} collides with {seen.get(hole)}")
                seen[hole] = f"{ic.id}:{pin.name}"
        self.assertEqual(len(seen), 64)

    def test_unknown_pin_or_failed_placement(self):
        r = make_resistor()
        ok = PlacementResult("r_1", PlacementPosition(0, 0, 2))
        failed = PlacementResult("r_1", PlacementPosition(0, 0, 1),
                                 conflicts=[NO_POSITION_CONFLICT])
        self.assertIsNone(pin_anchor(r, ok, "nope"))
        self.assertIsNone(pin_anchor(r, failed, "1"))


class TestSegments(unittest.TestCase):

    def test_segment_kinds(self):
        start = Coordinate(0, 2, Section.MAIN_TOP)
        end = Coordinate(3, 8, Section.MAIN_BOTTOM)
        segments = path_segments(find_path(start, end, FULL), FULL, "#123456")
        self.assertEqual([s.kind for s in segments], [SegmentKind.HORIZONTAL, SegmentKind.JUMP])
        self.assertEqual(segments[0].start, start)
        self.assertEqual(segments[0].end, Coordinate(0, 8, Section.MAIN_TOP))
        self.assertEqual(segments[1].end, end)
        self.assertTrue(all(s.color == "#123456" for s in segments))

    def test_rail_to_main_is_vertical(self):
        segments = path_segments(
            find_path(Coordinate(1, 5, Section.POWER_TOP),
                      Coordinate(2, 5, Section.MAIN_TOP), FULL),
            FULL, "#000")
        self.assertEqual([s.kind for s in segments], [SegmentKind.VERTICAL])


class TestRouteNet(unittest.TestCase):

    def setUp(self):
        self.circuit = make_led_circuit()
        self.placements = auto_place_components(self.circuit.components, self.circuit.board)
        self.anchors = build_anchor_map(self.circuit, self.placements)

    def test_anchor_map_covers_every_node(self):
        self.assertEqual(len(self.anchors), 6)
        self.assertEqual(self.anchors[("ps_1", "V+")], Coordinate(0, 0, Section.POWER_TOP))
        self.assertEqual(self.anchors[("led_1", "cathode")], Coordinate(0, 3, Section.MAIN_TOP))

    def test_shared_tie_group_needs_no_wire(self):
        result = route_net(self.circuit.net("n_drive"), self.anchors, FULL)
        self.assertTrue(result.success)
        self.assertEqual(result.segments, [])

    def test_vcc_wire(self):
        result = route_net(self.circuit.net("n_vcc"), self.anchors, FULL)
        self.assertTrue(result.success)
        self.assertEqual(len(result.segments), 1)
        seg = result.segments[0]
        self.assertEqual(seg.start, Coordinate(0, 0, Section.POWER_TOP))
        self.assertEqual(seg.end, Coordinate(0, 0, Section.MAIN_TOP))
        self.assertEqual(seg.color, WIRE_COLORS["power"])

    def test_gnd_wire_is_l_shaped(self):
        result = route_net(self.circuit.net("n_gnd"), self.anchors, FULL)
        self.assertEqual([s.kind for s in result.segments],
                         [SegmentKind.HORIZONTAL, SegmentKind.VERTICAL])
        self.assertEqual(result.segments[-1].end, Coordinate(0, 1, Section.POWER_TOP))
        self.assertTrue(all(s.color == WIRE_COLORS["ground"] for s in result.segments))

    def test_explicit_net_color_wins(self):
        net = self.circuit.net("n_gnd")
        net.color = "#abcdef"
        result = route_net(net, self.anchors, FULL)
        self.assertTrue(all(s.color == "#abcdef" for s in result.segments))

    def test_unplaced_node_is_a_conflict(self):
        net = Net(id="n_x", name="SIG", nodes=[
            NetNode("r_1", "1"), NetNode("ghost", "1"), NetNode("led_1", "cathode"),
        ])
        result = route_net(net, self.anchors, FULL)
        self.assertFalse(result.success)
        self.assertEqual(len(result.conflicts), 1)
        self.assertIn("ghost:1", result.conflicts[0])

    def test_route_circuit_one_result_per_net(self):
        results = route_circuit(self.circuit, self.placements)
        self.assertEqual([r.net_id for r in results], ["n_vcc", "n_drive", "n_gnd"])
        self.assertTrue(all(r.success for r in results))


class TestRoutingSerialization(unittest.TestCase):

    def test_round_trip_through_json(self):
        circuit = make_led_circuit()
        placements = auto_place_components(circuit.components, circuit.board)
        results = route_circuit(circuit, placements)
        data = json.loads(json.dumps(routing_to_dict(results)))
        self.assertEqual(parse_routing(data), results)
        self.assertEqual(data["routings"][2]["segments"][0]["type"], "horizontal")


if __name__ == "__main__":
    unittest.main()
