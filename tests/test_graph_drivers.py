"""
Graph Driver Tests
==================

Dijkstra, Kruskal, greedy coloring and Fleury, run to exhaustion.
Final results come from the last step's overlay; intermediate frames
are checked where the animation contract matters (highlight colours,
pauses, log-only steps).
"""

from collections import Counter

import pytest

from graph import graph_from_adjacency, graph_from_weighted_adjacency, graph_from_edge_list
from algorithms import REGISTRY, get_algorithm, list_algorithms, prepare_run
from algorithms.dijkstra import dijkstra, PAUSE_RELAX_MS
from algorithms.kruskal import kruskal
from algorithms.coloring import greedy_coloring, find_conflicts, OVERFLOW, SELECTING
from algorithms.fleury import fleury
from ui.canvas import render_graph, CONFIG
from ui.surface import RecordingSurface


INF = float("inf")


def _log(steps):
    return [line for s in steps for line in s.log_lines]


def _reference_distances(graph, source):
    """Repeated relaxation, independent of the driver under test."""
    dist = {n: INF for n in graph.node_ids()}
    dist[source] = 0
    for _ in range(graph.node_count()):
        for e in graph.edge_list():
            if dist[e.source] + e.weight < dist[e.target]:
                dist[e.target] = dist[e.source] + e.weight
    return dist


# ======================================================================
# Dijkstra
# ======================================================================
class TestDijkstra:

    def test_example_distances(self):
        g = graph_from_weighted_adjacency({"A": {"B": 1, "C": 4}, "B": {"A": 1, "C": 2}, "C": {"A": 4, "B": 2}})
        steps = list(dijkstra(g, "A"))

        final = steps[-1]
        assert final.is_final
        assert final.overlay["distances"] == {"A": 0, "B": 1, "C": 3}
        assert _log(steps)[0] == "Starting from A..."
        assert _log(steps)[-1] == "Final distances: A: 0, B: 1, C: 3"

    @pytest.mark.parametrize("data,source", [
        ({"A": {"B": 4, "C": 2}, "B": {"A": 4, "C": 1, "D": 5}, "C": {"A": 2, "B": 1, "D": 8}, "D": {"B": 5, "C": 8}}, "A"),
        ({"S": {"A": 7, "B": 2}, "A": {"T": 1}, "B": {"A": 3, "T": 9}, "T": {}}, "S"),
        ({"X": {"Y": 0}, "Y": {"Z": 0.5}, "Z": {"X": 2}}, "Y"),
    ])
    def test_matches_reference(self, data, source):
        g = graph_from_weighted_adjacency(data)
        final = list(dijkstra(g, source))[-1]
        assert final.overlay["distances"] == _reference_distances(g, source)

    def test_unreachable_nodes_stay_infinite(self):
        g = graph_from_weighted_adjacency({"A": {"B": 2}, "B": {"A": 2}, "C": {"D": 1}, "D": {"C": 1}})
        steps = list(dijkstra(g, "A"))
        final = steps[-1]

        assert final.overlay["distances"]["C"] == INF
        assert final.overlay["unreachable"] == ["C", "D"]
        assert "Unreachable from A: C, D" in _log(steps)
        assert _log(steps)[-1].endswith("C: ∞, D: ∞")
        assert "C" not in final.node_colors

    def test_arcs_are_directed(self):
        g = graph_from_weighted_adjacency({"A": {"B": 1}, "B": {}})
        final = list(dijkstra(g, "B"))[-1]
        assert final.overlay["distances"] == {"A": INF, "B": 0}

    def test_every_settled_node_is_logged_and_coloured(self):
        g = graph_from_weighted_adjacency({"A": {"B": 1, "C": 4}, "B": {"C": 2}, "C": {}})
        steps = list(dijkstra(g, "A"))

        visits = [l for l in _log(steps) if l.startswith("-> Visiting")]
        assert visits == [
            "-> Visiting A (distance: 0)",
            "-> Visiting B (distance: 1)",
            "-> Visiting C (distance: 3)",
        ]
        assert steps[-1].node_colors == {"A": "settled", "B": "settled", "C": "settled"}

    def test_relaxation_frames(self):
        g = graph_from_weighted_adjacency({"A": {"B": 1, "C": 4}, "B": {"C": 2}, "C": {}})
        steps = list(dijkstra(g, "A"))
        relax = [s for s in steps if s.edge_highlights]

        assert [s.log_lines for s in relax] == [
            ["   relax A-B: ∞ -> 1"],
            ["   relax A-C: ∞ -> 4"],
            ["   relax B-C: 4 -> 3"],
        ]
        for s in relax:
            assert s.pause_ms == PAUSE_RELAX_MS
            assert [h.color for h in s.edge_highlights] == ["relaxed"]

    def test_current_node_coloured_while_visited(self):
        g = graph_from_weighted_adjacency({"A": {"B": 1}, "B": {}})
        steps = list(dijkstra(g, "A"))
        visit = next(s for s in steps if s.log_lines == ["-> Visiting A (distance: 0)"])
        assert visit.current_node == "A"
        assert visit.node_colors["A"] == "current"

    def test_step_numbers_are_sequential(self):
        g = graph_from_weighted_adjacency({"A": {"B": 1}, "B": {}})
        steps = list(dijkstra(g, "A"))
        assert [s.step_number for s in steps] == list(range(len(steps)))


# ======================================================================
# Kruskal
# ======================================================================
class TestKruskal:

    def test_example(self):
        steps = list(kruskal(graph_from_edge_list(["A-B-1", "B-C-2", "A-C-3"])))
        final = steps[-1]

        assert final.overlay["total"] == 3
        assert [(m["u"], m["v"]) for m in final.overlay["mst"]] == [("A", "B"), ("B", "C")]
        assert final.overlay["rejected"] == [{"u": "A", "v": "C", "w": 3}]
        assert _log(steps) == [
            "Sorting edges...",
            "Reviewing A-B (1)...",
            "✅ Accepted",
            "Reviewing B-C (2)...",
            "✅ Accepted",
            "Reviewing A-C (3)...",
            "❌ Rejected (cycle)",
            "Total cost: 3",
        ]

    def test_spanning_tree_is_minimal_and_acyclic(self):
        g = graph_from_edge_list(["A-B-4", "A-C-2", "B-C-1", "B-D-5", "C-D-8", "D-E-3"])
        final = list(kruskal(g))[-1]
        mst = final.overlay["mst"]

        assert final.overlay["total"] == 11
        assert len(mst) == g.node_count() - 1
        assert final.overlay["components"] == 1

        # a forest on V nodes with V-1 edges that touches them all is a tree
        touched = {m["u"] for m in mst} | {m["v"] for m in mst}
        assert touched == set(g.node_ids())

    def test_rejected_edge_flashes_then_reverts(self):
        steps = list(kruskal(graph_from_edge_list(["A-B-1", "B-C-2", "A-C-3"])))
        idx = next(i for i, s in enumerate(steps) if s.log_lines == ["❌ Rejected (cycle)"])

        flash, revert = steps[idx], steps[idx + 1]
        assert flash.edge_highlights[0].color == "rejected"
        assert {h.color for h in revert.edge_highlights} == {"accepted"}
        assert revert.log_lines == []

    def test_review_frame_is_tentative(self):
        steps = list(kruskal(graph_from_edge_list(["A-B-1"])))
        review = steps[1]
        assert review.log_lines == ["Reviewing A-B (1)..."]
        assert review.edge_highlights[0].color == "tentative"

    def test_parallel_edge_rejection_is_drawn_red(self):
        g = graph_from_edge_list(["A-B-1", "A-B-2"])
        flash = next(s for s in kruskal(g) if s.log_lines == ["❌ Rejected (cycle)"])

        surface = RecordingSurface()
        render_graph(surface, {"A": (0, 0), "B": (100, 0)}, g.edge_list(),
                     flash.node_colors, flash.edge_highlights)
        assert {line[4] for line in surface.of_kind("line")} == {CONFIG.edge_colors["rejected"]}

    def test_ties_keep_input_order(self):
        final = list(kruskal(graph_from_edge_list(["C-D-1", "A-B-1", "B-C-1"])))[-1]
        assert [(m["u"], m["v"]) for m in final.overlay["mst"]] == [("C", "D"), ("A", "B"), ("B", "C")]

    def test_disconnected_input_gives_forest(self):
        steps = list(kruskal(graph_from_edge_list(["A-B-1", "C-D-2"])))
        final = steps[-1]

        assert final.overlay["components"] == 2
        assert final.overlay["total"] == 3
        assert "Input is disconnected: spanning forest of 2 trees" in _log(steps)

    def test_fractional_weights(self):
        final = list(kruskal(graph_from_edge_list(["A-B-1.5", "B-C-2"])))[-1]
        assert final.overlay["total"] == pytest.approx(3.5)


# ======================================================================
# Greedy coloring
# ======================================================================
def _complete(labels):
    return {a: [b for b in labels if b != a] for a in labels}


class TestGreedyColoring:

    def test_adjacent_nodes_differ(self):
        g = graph_from_adjacency({"A": ["B", "C"], "B": ["A", "C", "D"], "C": ["A", "B", "D"], "D": ["B", "C"]})
        steps = list(greedy_coloring(g))
        final = steps[-1]

        assert final.overlay["proper"]
        assert final.overlay["conflicts"] == []
        assert final.overlay["colors"] == {"A": "red", "B": "blue", "C": "green", "D": "red"}
        assert _log(steps)[-1] == "Done. 3 color(s) used."

    def test_first_node_takes_first_colour(self):
        g = graph_from_adjacency({"B": ["A"], "A": ["B"]})
        final = list(greedy_coloring(g))[-1]
        assert final.overlay["colors"] == {"B": "red", "A": "blue"}

    def test_selecting_then_assign(self):
        g = graph_from_adjacency({"A": ["B"], "B": ["A"]})
        steps = list(greedy_coloring(g))

        select_b = steps[3]
        assert select_b.current_node == "B"
        assert select_b.node_colors == {"A": "red", "B": SELECTING}
        assign_b = steps[4]
        assert assign_b.node_colors == {"A": "red", "B": "blue"}
        assert assign_b.log_lines == ["Node B: assigned color blue"]

    def test_palette_overflow_without_conflict(self):
        g = graph_from_adjacency(_complete("ABCDEF"))
        steps = list(greedy_coloring(g))
        final = steps[-1]

        assert final.overlay["overflow_nodes"] == ["F"]
        assert final.overlay["colors"]["F"] == OVERFLOW
        assert final.overlay["proper"]
        assert "Node F: palette exhausted, assigned overflow color" in _log(steps)

    def test_palette_overflow_conflict_is_reported(self):
        g = graph_from_adjacency(_complete("ABCDEFG"))
        steps = list(greedy_coloring(g))
        final = steps[-1]

        assert final.overlay["conflicts"] == [("F", "G")]
        assert not final.overlay["proper"]
        assert [h.color for h in final.edge_highlights] == ["rejected"]
        assert any(l.startswith("⚠ Coloring is NOT proper") for l in _log(steps))

    def test_find_conflicts_counts_parallel_edges_once(self):
        g = graph_from_adjacency({"A": ["B", "B"], "B": ["A", "A"]})
        assert find_conflicts(g, {"A": "red", "B": "red"}) == [("A", "B")]

    def test_isolated_node(self):
        g = graph_from_adjacency({"A": [], "B": ["C"], "C": ["B"]})
        final = list(greedy_coloring(g))[-1]
        assert final.overlay["colors"]["A"] == "red"


# ======================================================================
# Fleury
# ======================================================================
def _walked_pairs(path):
    return Counter(frozenset(p) for p in zip(path, path[1:]))


def _graph_pairs(graph):
    return Counter(e.pair for e in graph.edge_list())


class TestFleury:

    def test_square_is_a_circuit(self):
        g = graph_from_adjacency({"A": ["B", "D"], "B": ["A", "C"], "C": ["B", "D"], "D": ["A", "C"]})
        steps = list(fleury(g))
        final = steps[-1]

        assert final.overlay["outcome"] == "circuit"
        assert final.overlay["path"] == ["A", "B", "C", "D", "A"]
        assert _log(steps)[-1] == "Path: A → B → C → D → A"

    @pytest.mark.parametrize("data", [
        {"A": ["B", "D"], "B": ["A", "C"], "C": ["B", "D"], "D": ["A", "C"]},
        {"A": ["B"], "B": ["A", "C", "D"], "C": ["B", "D"], "D": ["B", "C"]},
        {"A": ["D", "B", "C"], "B": ["A", "C"], "C": ["A", "B"], "D": ["A"]},
        {"A": ["B", "C"], "B": ["A", "C"], "C": ["A", "B", "D", "E"], "D": ["C", "E"], "E": ["C", "D"]},
        {"A": ["B", "B"], "B": ["A", "A"]},
    ])
    def test_every_edge_walked_once(self, data):
        g = graph_from_adjacency(data)
        final = list(fleury(g))[-1]

        assert final.overlay["outcome"] in ("circuit", "trail")
        assert _walked_pairs(final.overlay["path"]) == _graph_pairs(g)

    def test_trail_runs_between_odd_nodes(self):
        g = graph_from_adjacency({"A": ["B"], "B": ["A", "C", "D"], "C": ["B", "D"], "D": ["B", "C"]})
        final = list(fleury(g))[-1]

        assert final.overlay["outcome"] == "trail"
        assert final.overlay["path"] == ["A", "B", "C", "D", "B"]

    def test_bridge_is_left_for_last(self):
        # A-D is listed first but crossing it early would strand B and C
        g = graph_from_adjacency({"A": ["D", "B", "C"], "B": ["A", "C"], "C": ["A", "B"], "D": ["A"]})
        final = list(fleury(g))[-1]
        assert final.overlay["path"] == ["A", "B", "C", "A", "D"]

    def test_not_eulerian_is_log_only(self):
        g = graph_from_adjacency({"A": ["B", "C", "D"], "B": ["A"], "C": ["A"], "D": ["A"]})
        steps = list(fleury(g))

        assert len(steps) == 1
        only = steps[0]
        assert not only.redraw
        assert only.is_final
        assert only.overlay["outcome"] == "not_eulerian"
        assert only.overlay["odd_nodes"] == ["A", "B", "C", "D"]
        assert only.log_lines[0].startswith("Error: 4 odd-degree nodes")

    def test_split_edges_strand_the_walk(self):
        g = graph_from_adjacency({"A": ["B", "C"], "B": ["A", "C"], "C": ["A", "B"],
                                  "D": ["E", "F"], "E": ["D", "F"], "F": ["D", "E"]})
        steps = list(fleury(g))
        final = steps[-1]

        assert final.overlay["outcome"] == "stranded"
        assert final.overlay["path"] == ["A", "B", "C", "A"]
        assert any(l.startswith("Stuck at A") for l in _log(steps))

    def test_crossing_then_move_frames(self):
        g = graph_from_adjacency({"A": ["B", "B"], "B": ["A", "A"]})
        steps = list(fleury(g))

        crossing, move = steps[1], steps[2]
        assert crossing.log_lines == ["Crossing from A to B"]
        assert crossing.edge_highlights == [("A", "B", "crossing")]
        assert move.current_node == "B"
        assert move.node_colors == {"B": "current"}
        assert [h.color for h in move.edge_highlights] == ["path"]

    def test_circuit_skips_isolated_first_node(self):
        g = graph_from_adjacency({"A": [], "B": ["C", "D"], "C": ["B", "D"], "D": ["B", "C"]})
        final = list(fleury(g))[-1]

        assert final.overlay["outcome"] == "circuit"
        assert final.overlay["path"] == ["B", "C", "D", "B"]

    def test_edgeless_graph(self):
        final = list(fleury(graph_from_adjacency({"A": []})))[-1]
        assert final.overlay["outcome"] == "circuit"
        assert final.overlay["path"] == ["A"]

    def test_input_graph_untouched(self):
        g = graph_from_adjacency({"A": ["B", "D"], "B": ["A", "C"], "C": ["B", "D"], "D": ["A", "C"]})
        list(fleury(g))
        assert g.edge_count() == 4


# ======================================================================
# Registry
# ======================================================================
class TestRegistry:

    def test_panels_in_order(self):
        assert [a.key for a in list_algorithms()] == ["dijkstra", "kruskal", "coloring", "fleury"]

    def test_unknown_key(self):
        assert get_algorithm("bogosort") is None

    @pytest.mark.parametrize("key", list(REGISTRY))
    def test_default_inputs_run(self, key):
        info = get_algorithm(key)
        _, kwargs = prepare_run(info, info.default_graph, info.default_source)
        steps = list(info.fn(**kwargs))
        assert steps[-1].is_final

    def test_source_only_for_dijkstra(self):
        _, kwargs = prepare_run(get_algorithm("dijkstra"), '{"A": {"B": 1}}', " A ")
        assert kwargs["source"] == "A"
        _, kwargs = prepare_run(get_algorithm("kruskal"), '["A-B-1"]', "ignored")
        assert "source" not in kwargs
