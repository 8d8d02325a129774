"""Tests for WalkGraph construction and entrance routing."""

import pytest

from floorgeo.engine.walk_graph import EdgeCandidate, NodeMarker, WalkGraph
from tests.conftest import LINE_GRAPH


@pytest.fixture
def line_graph() -> WalkGraph:
    graph = WalkGraph()
    graph.build_from_entities(LINE_GRAPH)
    return graph


def _graph(*shapes) -> WalkGraph:
    graph = WalkGraph()
    graph.build_from_entities(shapes)
    return graph


# ── Construction ──


def test_edge_weight_is_node_distance(line_graph):
    assert line_graph.edges["AB"].weight == 10.0


def test_nodes_record_their_edges(line_graph):
    assert line_graph.nodes["A"].edge_ids == ["AB"]
    assert line_graph.nodes["B"].edge_ids == ["AB"]
    assert line_graph.nodes["B"].is_entrance


def test_match_tolerance_from_largest_radius():
    graph = _graph(NodeMarker(1, (0.0, 0.0), 0.5), NodeMarker(2, (9.0, 0.0), 3.0))
    assert graph.match_tolerance == 6.0


def test_match_tolerance_default_without_nodes():
    assert _graph().match_tolerance == 4.0


def test_endpoints_snap_to_nearby_nodes():
    graph = _graph(
        NodeMarker("A", (0.0, 0.0), 1.0),
        NodeMarker("B", (10.0, 0.0), 1.0),
        EdgeCandidate("AB", (1.5, 0.5), (8.0, -1.0)),
    )
    # weight comes from the node centers, not the drawn segment
    assert graph.edges["AB"].weight == 10.0


def test_unmatched_endpoint_drops_edge():
    graph = _graph(
        NodeMarker("A", (0.0, 0.0), 1.0),
        NodeMarker("B", (10.0, 0.0), 1.0),
        EdgeCandidate("AB", (0.0, 0.0), (20.0, 0.0)),
    )
    assert graph.edges == {}


def test_both_endpoints_on_same_node_drops_edge():
    graph = _graph(
        NodeMarker("A", (0.0, 0.0), 2.0),
        NodeMarker("B", (10.0, 0.0), 2.0),
        EdgeCandidate("AA", (-1.0, 0.0), (1.0, 0.0)),
    )
    assert graph.edges == {}


def test_rebuild_clears_previous_graph(line_graph):
    line_graph.build_from_entities([NodeMarker("C", (0.0, 0.0), 1.0)])
    assert list(line_graph.nodes) == ["C"]
    assert line_graph.edges == {}


# ── Nearest node ──


def test_find_nearest_node(line_graph):
    assert line_graph.find_nearest_node(7.0, 1.0, 5.0).id == "B"
    assert line_graph.find_nearest_node(5.0, 50.0, 5.0) is None


def test_find_nearest_node_is_strict(line_graph):
    assert line_graph.find_nearest_node(0.0, 3.0, 3.0) is None
    assert line_graph.find_nearest_node(0.0, 3.0, 3.0001).id == "A"


# ── Entrance paths ──


def test_path_to_entrance(line_graph):
    assert line_graph.find_path_to_nearest_entrance("A") == ["A", "B"]


def test_entrance_is_its_own_path(line_graph):
    assert line_graph.find_path_to_nearest_entrance("B") == ["B"]


def test_unknown_start_node(line_graph):
    assert line_graph.find_path_to_nearest_entrance("Z") is None


def test_no_entrance_reachable():
    graph = _graph(
        NodeMarker("A", (0.0, 0.0), 1.0),
        NodeMarker("B", (10.0, 0.0), 1.0),
        EdgeCandidate("AB", (0.0, 0.0), (10.0, 0.0)),
    )
    assert graph.find_path_to_nearest_entrance("A") is None


def test_disconnected_nodes():
    graph = _graph(NodeMarker("A", (0.0, 0.0), 1.0), NodeMarker("B", (10.0, 0.0), 1.0))
    assert graph.find_path_to_nearest_entrance("A") is None


def test_nearest_entrance_by_path_cost():
    #   E1 ---30--- S ---10--- M ---10--- E2
    graph = _graph(
        NodeMarker("E1", (-30.0, 0.0), 1.0, is_entrance=True),
        NodeMarker("S", (0.0, 0.0), 1.0),
        NodeMarker("M", (10.0, 0.0), 1.0),
        NodeMarker("E2", (20.0, 0.0), 1.0, is_entrance=True),
        EdgeCandidate(1, (0.0, 0.0), (-30.0, 0.0)),
        EdgeCandidate(2, (0.0, 0.0), (10.0, 0.0)),
        EdgeCandidate(3, (10.0, 0.0), (20.0, 0.0)),
    )
    assert graph.find_path_to_nearest_entrance("S") == ["S", "M", "E2"]


def test_shorter_route_beats_fewer_hops():
    #   S -- A -- E is shorter than the direct detour S ~~ E
    graph = _graph(
        NodeMarker("S", (0.0, 0.0), 1.0),
        NodeMarker("A", (5.0, 0.0), 1.0),
        NodeMarker("E", (10.0, 0.0), 1.0, is_entrance=True),
        NodeMarker("F", (5.0, 40.0), 1.0),
        EdgeCandidate("SA", (0.0, 0.0), (5.0, 0.0)),
        EdgeCandidate("AE", (5.0, 0.0), (10.0, 0.0)),
        EdgeCandidate("SF", (0.0, 0.0), (5.0, 40.0)),
        EdgeCandidate("FE", (5.0, 40.0), (10.0, 0.0)),
    )
    assert graph.find_path_to_nearest_entrance("S") == ["S", "A", "E"]


# ── Derived queries ──


def test_path_coordinates(line_graph):
    route = line_graph.find_path_coordinates_to_entrance(1.0, 1.0, 5.0)
    assert route.node_ids == ["A", "B"]
    assert route.points == [(0.0, 0.0), (10.0, 0.0)]
    assert route.distance == 10.0


def test_path_coordinates_out_of_range(line_graph):
    assert line_graph.find_path_coordinates_to_entrance(100.0, 100.0, 5.0) is None


def test_edge_ids_for_path_either_orientation(line_graph):
    assert line_graph.get_edge_ids_for_path(["A", "B"]) == ["AB"]
    assert line_graph.get_edge_ids_for_path(["B", "A"]) == ["AB"]
    assert line_graph.get_edge_ids_for_path(["B"]) == []


def test_all_ids_for_path(line_graph):
    assert line_graph.get_all_ids_for_path(["A", "B"]) == {"A", "B", "AB"}
