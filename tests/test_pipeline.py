"""End-to-end tests: circuit document → placements → wires.

Validates:
  - The LED circuit lays out with no conflicts and disjoint holes
  - Every routed wire lies on the board outline
  - Shorts between nets sharing a tie group are visible to DRC
  - Removing a component and re-running keeps the document consistent
  - An overfull board surfaces failures instead of raising
"""

from __future__ import annotations

import unittest

from shapely.geometry import Point as ShapelyPoint

from breadboard.pipeline.connectivity import find_shorts
from breadboard.pipeline.design import (
    BoardConfig, parse_circuit, remove_component, validate_circuit,
)
from breadboard.pipeline.layout import build_layout
from breadboard.pipeline.router import build_anchor_map
from breadboard.pipeline.topology import board_outline, coordinate_to_point
from tests.circuit_fixture import LED_CIRCUIT_DICT, make_led_circuit, make_power


class TestBuildLayout(unittest.TestCase):

    def test_led_circuit(self):
        circuit = make_led_circuit()
        self.assertEqual(validate_circuit(circuit), [])
        result = build_layout(circuit)

        self.assertTrue(result.ok)
        self.assertEqual(len(result.placements), 3)
        self.assertEqual(result.failed_components, [])
        self.assertEqual(result.failed_nets, [])

        spans = {}
        for p in result.placements:
            for col in p.columns():
                key = (p.section, p.position.row, col)
                self.assertNotIn(key, spans)
                spans[key] = p.component_id

    def test_wires_stay_on_board(self):
        circuit = make_led_circuit()
        result = build_layout(circuit)
        outline = board_outline(circuit.board)
        for routing in result.routings:
            for seg in routing.segments:
                for hole in (seg.start, seg.end):
                    p = coordinate_to_point(hole, circuit.board)
                    self.assertTrue(outline.covers(ShapelyPoint(p.x, p.y)))

    def test_first_fit_layout_shorts_are_detected(self):
        circuit = make_led_circuit()
        result = build_layout(circuit)
        anchors = build_anchor_map(circuit, result.placements)
        net_holes = {
            net.id: [anchors[(n.component_id, n.pin)] for n in net.nodes]
            for net in circuit.nets
        }
        # VCC and GND both land on the top + rail
        shorted = {tuple(s.net_ids) for s in find_shorts(net_holes)}
        self.assertIn(("n_vcc", "n_gnd"), shorted)

    def test_parsed_document(self):
        circuit = parse_circuit(LED_CIRCUIT_DICT)
        result = build_layout(circuit)
        self.assertTrue(result.ok)
        self.assertEqual(result.routings[0].segments, [])

    def test_after_component_removal(self):
        circuit = make_led_circuit()
        remove_component(circuit, "led_1")
        self.assertEqual(validate_circuit(circuit), [])
        result = build_layout(circuit)
        self.assertTrue(result.ok)
        self.assertEqual({p.component_id for p in result.placements}, {"ps_1", "r_1"})

    def test_overfull_board_reports_failures(self):
        circuit = make_led_circuit()
        circuit.board = BoardConfig.for_kind("half")
        circuit.components.extend(make_power(f"ps_{i}", f"PS{i}") for i in range(2, 22))
        result = build_layout(circuit)
        self.assertFalse(result.ok)
        self.assertEqual(len(result.failed_components), 1)
        self.assertEqual(result.failed_nets, [])


if __name__ == "__main__":
    unittest.main()
