from __future__ import annotations

import math
import sys
import unittest
from pathlib import Path

TESTS_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from gostflow import gostflow as gf
from gostflow.gostflow import FlowNode, NodeKind


def _resolved(node_id: str, kind: NodeKind, x: float, y: float, **size: float) -> gf.ResolvedNode:
    return gf.resolve_node(FlowNode(node_id, kind, x, y, **size))


class NodeSizeTests(unittest.TestCase):
    def test_default_sizes_apply_per_kind(self) -> None:
        expected = {
            NodeKind.TERMINAL: (180, 56),
            NodeKind.PROCESS: (220, 70),
            NodeKind.IO: (220, 70),
            NodeKind.DECISION: (170, 170),
            NodeKind.PREDEFINED: (240, 70),
            NodeKind.CONNECTOR: (40, 40),
            NodeKind.NOTE: (220, 70),
        }
        for kind, size in expected.items():
            with self.subTest(kind=kind):
                self.assertEqual(gf.node_size(FlowNode("n", kind, 0, 0)), size)

    def test_explicit_dimensions_override_independently(self) -> None:
        self.assertEqual(gf.node_size(FlowNode("n", NodeKind.PROCESS, 0, 0, w=300)), (300, 70))
        self.assertEqual(gf.node_size(FlowNode("n", NodeKind.PROCESS, 0, 0, h=90)), (220, 90))
        self.assertEqual(gf.node_size(FlowNode("n", NodeKind.DECISION, 0, 0, w=120, h=80)), (120, 80))

    def test_kind_given_as_plain_string(self) -> None:
        node = gf.resolve_node(FlowNode("n", "connector", 5, 6))  # type: ignore[arg-type]
        self.assertIs(node.kind, NodeKind.CONNECTOR)
        self.assertEqual((node.w, node.h), (40, 40))

    def test_repeated_id_keeps_first_slot_with_last_data(self) -> None:
        resolved = gf.resolve_nodes(
            [
                FlowNode("a", NodeKind.PROCESS, 0, 0, "first"),
                FlowNode("b", NodeKind.PROCESS, 0, 100),
                FlowNode("a", NodeKind.TERMINAL, 50, 50, "second"),
            ]
        )
        self.assertEqual(list(resolved), ["a", "b"])
        self.assertEqual(resolved["a"].text, "second")
        self.assertIs(resolved["a"].kind, NodeKind.TERMINAL)


class WrapTextTests(unittest.TestCase):
    def test_budget_has_a_floor(self) -> None:
        self.assertEqual(gf.line_char_budget(0), 8)
        self.assertEqual(gf.line_char_budget(20), 8)
        self.assertEqual(gf.line_char_budget(196), 28)
        self.assertEqual(gf.line_char_budget(188), 26)

    def test_short_text_stays_on_one_line(self) -> None:
        self.assertEqual(gf.wrap_text("Read the input record", 188), ["Read the input record"])

    def test_lines_never_exceed_budget(self) -> None:
        text = (
            "Compute the checksum of every block in the buffer and compare it "
            "with the value stored in the trailer before accepting the frame"
        )
        for width in (0, 60, 100, 146, 196, 400):
            with self.subTest(width=width):
                budget = gf.line_char_budget(width)
                lines = gf.wrap_text(text, width)
                self.assertTrue(lines)
                for line in lines:
                    self.assertLessEqual(len(line), budget)
                self.assertEqual("".join("".join(lines).split()), "".join(text.split()))

    def test_long_word_is_split(self) -> None:
        lines = gf.wrap_text("go supercalifragilisticexpialidocious", 56)
        self.assertEqual(gf.line_char_budget(56), 8)
        self.assertEqual(lines[0], "go")
        self.assertEqual("".join(lines[1:]), "supercalifragilisticexpialidocious")
        for line in lines:
            self.assertLessEqual(len(line), 8)

    def test_whitespace_is_collapsed(self) -> None:
        self.assertEqual(gf.wrap_text("  a \n  b\t c  ", 196), ["a b c"])

    def test_empty_text_has_no_lines(self) -> None:
        self.assertEqual(gf.wrap_text("", 100), [])
        self.assertEqual(gf.wrap_text("   ", 100), [])


class GeometryTests(unittest.TestCase):
    def test_anchor_sides(self) -> None:
        node = _resolved("d", NodeKind.DECISION, 300, 330)
        self.assertEqual(gf.anchor(node, "top"), (300, 245))
        self.assertEqual(gf.anchor(node, "bottom"), (300, 415))
        self.assertEqual(gf.anchor(node, "left"), (215, 330))
        self.assertEqual(gf.anchor(node, "right"), (385, 330))
        with self.assertRaises(ValueError):
            gf.anchor(node, "middle")

    def test_downward_edge_runs_bottom_to_top(self) -> None:
        start = _resolved("s", NodeKind.TERMINAL, 300, 60)
        read = _resolved("r", NodeKind.IO, 300, 170)
        points = gf.route_edge(start, read)
        self.assertEqual(points, [(300, 88), (300, 135)])
        self.assertEqual(points[-1], gf.anchor(read, "top"))

    def test_stacked_upward_edge_is_still_vertical(self) -> None:
        lower = _resolved("l", NodeKind.PROCESS, 302, 400)
        upper = _resolved("u", NodeKind.PROCESS, 300, 100)
        points = gf.route_edge(lower, upper)
        self.assertEqual(points, [(302, 435), (300, 65)])

    def test_side_edge_gets_dogleg(self) -> None:
        decision = _resolved("d", NodeKind.DECISION, 300, 330)
        fix = _resolved("f", NodeKind.PROCESS, 620, 330)
        points = gf.route_edge(decision, fix)
        self.assertEqual(points, [(385, 330), (447.5, 330), (447.5, 330), (510, 330)])
        self.assertEqual(points[-1], gf.anchor(fix, "left"))

    def test_upward_edge_to_the_right(self) -> None:
        source = _resolved("a", NodeKind.PROCESS, 300, 400)
        target = _resolved("b", NodeKind.PROCESS, 600, 100)
        points = gf.route_edge(source, target)
        self.assertEqual(points, [(410, 400), (450, 400), (450, 100), (490, 100)])

    def test_upward_edge_to_the_left(self) -> None:
        source = _resolved("a", NodeKind.PROCESS, 600, 400)
        target = _resolved("b", NodeKind.PROCESS, 300, 100)
        points = gf.route_edge(source, target)
        self.assertEqual(points[0], (490, 400))
        self.assertEqual(points[-1], (410, 100))
        self.assertEqual(points[-1], gf.anchor(target, "right"))

    def test_explicit_via_replaces_dogleg(self) -> None:
        source = _resolved("a", NodeKind.PROCESS, 300, 400)
        target = _resolved("b", NodeKind.PROCESS, 600, 100)
        points = gf.route_edge(source, target, [(700, 400), (700, 100)])
        self.assertEqual(points, [(410, 400), (700, 400), (700, 100), (490, 100)])

    def test_empty_via_draws_straight_line(self) -> None:
        source = _resolved("a", NodeKind.PROCESS, 300, 400)
        target = _resolved("b", NodeKind.PROCESS, 600, 100)
        self.assertEqual(gf.route_edge(source, target, []), [(410, 400), (490, 100)])

    def test_via_is_used_on_vertical_edges(self) -> None:
        source = _resolved("a", NodeKind.PROCESS, 100, 100)
        target = _resolved("b", NodeKind.PROCESS, 100, 300)
        points = gf.route_edge(source, target, [(40, 180)])
        self.assertEqual(points, [(100, 135), (40, 180), (100, 265)])

    def test_arrowhead_points_along_last_segment(self) -> None:
        tip, left, right = gf.arrowhead([(450, 100), (490, 100)])
        self.assertEqual(tip, (490, 100))
        self.assertAlmostEqual(left[0], 480)
        self.assertAlmostEqual(left[1], 106)
        self.assertAlmostEqual(right[0], 480)
        self.assertAlmostEqual(right[1], 94)

    def test_arrowhead_barbs_are_symmetric(self) -> None:
        tip, left, right = gf.arrowhead([(0, 0), (30, 40)])
        self.assertAlmostEqual(math.dist(tip, left), math.dist(tip, right))
        base = ((left[0] + right[0]) / 2, (left[1] + right[1]) / 2)
        self.assertAlmostEqual(math.dist(tip, base), gf.ARROW_LENGTH)
        self.assertAlmostEqual(math.dist(left, right), 2 * gf.ARROW_HALF_WIDTH)

    def test_label_sits_above_middle_point(self) -> None:
        points = [(410, 400), (450, 400), (450, 100), (490, 100)]
        self.assertEqual(gf.label_position(points), (450, 94))
        self.assertEqual(gf.label_position([(0, 0), (0, 50)]), (0, 44))


if __name__ == "__main__":
    unittest.main()
