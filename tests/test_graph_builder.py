from __future__ import annotations

from collections import Counter

import networkx as nx
import pytest

from safe_walk_routing.data.distance_utils import haversine_distance
from safe_walk_routing.mapping.network.nearest_node import NearestNodeLocator
from safe_walk_routing.mapping.network.network_builder import WalkGraphBuilder

from .helpers import A, B, C, D, SQUARE_POINTS, build_graph


def _edge_signature(graph: nx.MultiDiGraph, u: int, v: int) -> Counter:
    return Counter((data["length"], data["safety_score"]) for data in graph[u][v].values())


def test_every_segment_gets_both_directions(square_graph) -> None:
    graph = square_graph.graph
    # 4 segments, two directed edges each
    assert graph.number_of_edges() == 8
    for u, v in graph.edges():
        assert graph.has_edge(v, u)
        assert _edge_signature(graph, u, v) == _edge_signature(graph, v, u)


def test_nodes_created_once_per_external_id(square_graph) -> None:
    assert square_graph.node_count == 4
    assert sorted(square_graph.osm_id_map) == [A, B, C, D]
    # handles follow creation order: A, C from the first way, then B, D
    assert square_graph.osm_id_map == {A: 0, C: 1, B: 2, D: 3}
    for osm_id, node in square_graph.osm_id_map.items():
        assert square_graph.node_coords(node) == SQUARE_POINTS[osm_id]
        assert square_graph.graph.nodes[node]["osm_id"] == osm_id


def test_edge_length_is_great_circle_distance(square_graph) -> None:
    a = square_graph.osm_id_map[A]
    b = square_graph.osm_id_map[B]
    (data,) = square_graph.graph[a][b].values()
    assert data["length"] == pytest.approx(haversine_distance(0.0, 0.0, 0.0, 0.001))
    assert data["length"] == pytest.approx(111.2, abs=0.1)
    assert data["safety_score"] == pytest.approx(0.1)


def test_missing_points_and_repeats_are_skipped() -> None:
    builder = WalkGraphBuilder({1: (0.0, 0.0), 2: (0.0, 0.001)})
    added = builder.add_way([1, 1, 2, 999, 2], 0.3)
    assert builder.add_way([1, 999], 0.3) == 0
    nav_graph = builder.build()

    assert added == 1
    assert builder.segments_skipped == 4
    assert builder.ways_added == 1
    assert nav_graph.node_count == 2
    assert nav_graph.edge_count == 2
    assert nx.number_of_selfloops(nav_graph.graph) == 0


def test_parallel_edges_from_different_ways_are_kept() -> None:
    nav_graph = build_graph(SQUARE_POINTS, [([A, B], 0.2), ([B, A], 0.8)])
    a, b = nav_graph.osm_id_map[A], nav_graph.osm_id_map[B]
    scores = sorted(data["safety_score"] for data in nav_graph.graph[a][b].values())
    assert scores == [0.2, 0.8]


def test_built_graph_is_frozen(square_graph) -> None:
    with pytest.raises(nx.NetworkXError):
        square_graph.graph.add_edge(0, 1, length=1.0, safety_score=0.5)
    with pytest.raises(ValueError):
        square_graph.lats[0] = 5.0


def test_builder_rejects_ways_after_build() -> None:
    builder = WalkGraphBuilder(SQUARE_POINTS)
    builder.build()
    with pytest.raises(RuntimeError):
        builder.add_way([A, B], 0.1)


def test_nearest_node_at_exact_coordinate(square_graph) -> None:
    locator = NearestNodeLocator(square_graph)
    for osm_id, (lat, lon) in SQUARE_POINTS.items():
        node, distance = locator.nearest_with_distance(lat, lon)
        assert node == square_graph.osm_id_map[osm_id]
        assert distance == pytest.approx(0.0, abs=1e-9)


def test_nearest_node_picks_closest_and_breaks_ties_by_handle(square_graph) -> None:
    locator = NearestNodeLocator(square_graph)
    assert locator.nearest(0.0009, 0.0008) == square_graph.osm_id_map[C]
    # equidistant from A and B (handles 0 and 2): first in node order wins
    assert locator.nearest(0.0, 0.0005) == square_graph.osm_id_map[A]


def test_nearest_node_on_empty_graph() -> None:
    locator = NearestNodeLocator(WalkGraphBuilder({}).build())
    assert locator.nearest(0.0, 0.0) is None
    assert locator.nearest_with_distance(0.0, 0.0) is None


def test_network_bounds(square_graph) -> None:
    assert square_graph.get_bounds() == {
        "lat_min": 0.0, "lat_max": 0.001, "lon_min": 0.0, "lon_max": 0.001,
    }
