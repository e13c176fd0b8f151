"""Marquee selection engine behavior.

Covers the strict intersection rule, anchor normalization, commit-as-replace,
and the no-op contract for out-of-order pointer events.
"""

from __future__ import annotations

import unittest

from treemarquee.geometry import Point, Rect
from treemarquee.layout import NodeBox
from treemarquee.selection import SelectionEngine, intersecting_ids


class StaticLayout:
    """Layout provider returning a fixed, mutable list of boxes."""

    def __init__(self, boxes: dict[str, Rect]) -> None:
        self.boxes = dict(boxes)
        self.snapshot_calls = 0

    def snapshot(self) -> list[NodeBox]:
        self.snapshot_calls += 1
        return [NodeBox(node_id, box) for node_id, box in self.boxes.items()]


A = Rect(0, 0, 10, 10)
B = Rect(20, 20, 30, 30)


def drag(engine: SelectionEngine, start: tuple[float, float], end: tuple[float, float]) -> frozenset[str]:
    engine.begin_drag(Point(*start))
    engine.update_drag(Point(*end))
    return engine.transient_selection


class SelectionEngineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.layout = StaticLayout({"A": A, "B": B})
        self.engine = SelectionEngine(self.layout)

    def test_marquee_overlapping_both_corners_selects_both(self) -> None:
        self.assertEqual(drag(self.engine, (5, 5), (25, 25)), {"A", "B"})

    def test_marquee_in_gap_selects_nothing(self) -> None:
        self.assertEqual(drag(self.engine, (12, 12), (18, 18)), frozenset())

    def test_edge_touching_boxes_are_not_selected(self) -> None:
        self.layout.boxes["C"] = Rect(10, 0, 20, 10)
        self.layout.boxes["D"] = Rect(0, 10, 10, 20)
        self.assertEqual(drag(self.engine, (0, 0), (10, 10)), {"A"})

    def test_anchor_order_does_not_matter(self) -> None:
        expected = drag(self.engine, (5, 5), (25, 25))
        self.engine.end_drag()
        for start, end in (((25, 25), (5, 5)), ((5, 25), (25, 5)), ((25, 5), (5, 25))):
            with self.subTest(start=start, end=end):
                self.assertEqual(drag(self.engine, start, end), expected)
                self.engine.end_drag()

    def test_intersection_matches_strict_overlap_formula(self) -> None:
        boxes = {"A": A, "B": B, "E": Rect(9, 9, 21, 21), "F": Rect(30, 0, 40, 5)}
        rects = [Rect(0, 0, 9, 9), Rect(10, 10, 20, 20), Rect(21, 21, 40, 40), Rect(29, 0, 31, 1)]
        snapshot = [NodeBox(node_id, box) for node_id, box in boxes.items()]
        for rect in rects:
            expected = {
                node_id
                for node_id, box in boxes.items()
                if box.left < rect.right and box.right > rect.left and box.top < rect.bottom and box.bottom > rect.top
            }
            with self.subTest(rect=rect):
                self.assertEqual(intersecting_ids(rect, snapshot), expected)

    def test_zero_area_marquee_selects_nothing(self) -> None:
        self.assertEqual(drag(self.engine, (0, 0), (0, 0)), frozenset())
        self.assertEqual(drag(self.engine, (5, 5), (5, 5)), frozenset())

    def test_begin_drag_sets_both_anchors_and_starts_dragging(self) -> None:
        self.engine.begin_drag(Point(3, 4))
        self.assertTrue(self.engine.is_dragging())
        self.assertEqual(self.engine.state.anchor_start, Point(3, 4))
        self.assertEqual(self.engine.state.anchor_end, Point(3, 4))
        self.assertEqual(self.engine.transient_selection, frozenset())

    def test_end_drag_commits_and_resets_transient_state(self) -> None:
        drag(self.engine, (1, 1), (5, 5))
        self.engine.end_drag()

        state = self.engine.state
        self.assertEqual(state.committed_selection, {"A"})
        self.assertIsNone(state.anchor_start)
        self.assertIsNone(state.anchor_end)
        self.assertEqual(state.transient_selection, frozenset())
        self.assertFalse(self.engine.is_dragging())
        self.assertTrue(self.engine.is_selected("A"))
        self.assertFalse(self.engine.is_in_transient_selection("A"))

    def test_commit_replaces_previous_selection(self) -> None:
        drag(self.engine, (1, 1), (5, 5))
        self.engine.end_drag()
        drag(self.engine, (21, 21), (25, 25))
        self.engine.end_drag()
        self.assertEqual(self.engine.committed_selection, {"B"})

    def test_committed_selection_is_unchanged_while_dragging(self) -> None:
        drag(self.engine, (1, 1), (5, 5))
        self.engine.end_drag()
        drag(self.engine, (21, 21), (25, 25))
        self.assertTrue(self.engine.is_selected("A"))
        self.assertFalse(self.engine.is_selected("B"))
        self.assertTrue(self.engine.is_in_transient_selection("B"))

    def test_clear_selection_deselects_everything(self) -> None:
        drag(self.engine, (5, 5), (25, 25))
        self.engine.end_drag()
        self.engine.clear_selection()
        self.assertFalse(self.engine.is_selected("A"))
        self.assertFalse(self.engine.is_selected("B"))
        self.assertEqual(self.engine.committed_selection, frozenset())

    def test_clear_selection_during_drag_keeps_the_drag(self) -> None:
        drag(self.engine, (1, 1), (5, 5))
        self.engine.end_drag()
        drag(self.engine, (21, 21), (25, 25))
        self.engine.clear_selection()
        self.assertTrue(self.engine.is_dragging())
        self.engine.end_drag()
        self.assertEqual(self.engine.committed_selection, {"B"})

    def test_update_and_end_without_begin_are_no_ops(self) -> None:
        drag(self.engine, (1, 1), (5, 5))
        self.engine.end_drag()

        self.engine.update_drag(Point(25, 25))
        self.engine.end_drag()

        self.assertFalse(self.engine.is_dragging())
        self.assertIsNone(self.engine.state.anchor_end)
        self.assertEqual(self.engine.transient_selection, frozenset())
        self.assertEqual(self.engine.committed_selection, {"A"})

    def test_repeated_update_with_same_inputs_is_idempotent(self) -> None:
        first = drag(self.engine, (5, 5), (25, 25))
        self.engine.update_drag(Point(25, 25))
        self.assertEqual(self.engine.transient_selection, first)

    def test_every_update_fetches_a_fresh_snapshot(self) -> None:
        self.engine.begin_drag(Point(0, 0))
        calls_after_begin = self.layout.snapshot_calls
        self.engine.update_drag(Point(5, 5))
        self.assertEqual(self.engine.transient_selection, {"A"})

        # Boxes moved (e.g. the pane scrolled) between two pointer moves.
        self.layout.boxes["A"] = Rect(100, 100, 110, 110)
        self.engine.update_drag(Point(5, 5))

        self.assertEqual(self.layout.snapshot_calls, calls_after_begin + 2)
        self.assertEqual(self.engine.transient_selection, frozenset())

    def test_empty_snapshot_yields_empty_selection(self) -> None:
        engine = SelectionEngine(StaticLayout({}))
        self.assertEqual(drag(engine, (0, 0), (100, 100)), frozenset())
        engine.end_drag()
        self.assertEqual(engine.committed_selection, frozenset())

    def test_coordinates_outside_every_node_are_well_defined(self) -> None:
        self.assertEqual(drag(self.engine, (-50, -50), (-10, -1)), frozenset())
        self.assertEqual(drag(self.engine, (1e9, 1e9), (2e9, 2e9)), frozenset())

    def test_marquee_rect_is_normalized_and_translatable(self) -> None:
        self.assertIsNone(self.engine.marquee_rect())
        drag(self.engine, (25, 30), (5, 10))
        self.assertEqual(self.engine.marquee_rect(), Rect(5, 10, 25, 30))
        self.assertEqual(self.engine.marquee_rect_in(Point(0, 8)), Rect(5, 2, 25, 22))
        self.engine.end_drag()
        self.assertIsNone(self.engine.marquee_rect_in(Point(0, 8)))


if __name__ == "__main__":
    unittest.main()
