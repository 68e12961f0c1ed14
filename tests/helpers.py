from __future__ import annotations

from pathlib import Path

import osmium

from safe_walk_routing.mapping.network.network_builder import NavigationGraph, WalkGraphBuilder

# Square scenario, (lat, lon) keyed by OSM id
SQUARE_POINTS = {
    1: (0.0, 0.0),        # A
    2: (0.0, 0.001),      # B
    3: (0.001, 0.001),    # C
    4: (0.001, 0.0),      # D
}
A, B, C, D = 1, 2, 3, 4

# Small mixed extract: two walkable ways, one dangling way, one motorway, one building.
# Node 8 has no location; only the XML encoding can express that.
SMALL_NODES = [
    (1, 0.0, 0.0),
    (2, 0.0, 0.001),
    (3, 0.001, 0.001),
    (4, 0.002, 0.001),
    (5, 0.003, 0.001),
    (6, 0.004, 0.0),
    (7, 0.004, 0.001),
]
SMALL_WAYS = [
    (10, [1, 2, 3], {"highway": "footway", "lit": "yes"}),
    (11, [3, 4], {"highway": "primary", "sidewalk": "both"}),
    (12, [4, 5], {"highway": "motorway"}),
    (13, [2, 999], {"highway": "residential"}),
    (14, [6, 7], {"building": "yes"}),
]


def build_graph(points: dict[int, tuple[float, float]],
                ways: list[tuple[list[int], float]]) -> NavigationGraph:
    builder = WalkGraphBuilder(points)
    for way_id, (refs, score) in enumerate(ways, start=100):
        builder.add_way(refs, score, way_id=way_id, highway="footway")
    return builder.build()


def osm_xml(nodes: list[str], ways: list[str]) -> str:
    return (
        "<?xml version='1.0' encoding='UTF-8'?>\n"
        "<osm version=\"0.6\" generator=\"pytest\">\n"
        + "\n".join(nodes + ways)
        + "\n</osm>\n"
    )


def node_xml(node_id: int, lat: float | None, lon: float | None) -> str:
    if lat is None or lon is None:
        return f'  <node id="{node_id}" version="1"/>'
    return f'  <node id="{node_id}" version="1" lat="{lat}" lon="{lon}"/>'


def way_xml(way_id: int, refs: list[int], tags: dict[str, str]) -> str:
    body = [f'    <nd ref="{ref}"/>' for ref in refs]
    body += [f'    <tag k="{k}" v="{v}"/>' for k, v in tags.items()]
    return f'  <way id="{way_id}" version="1">\n' + "\n".join(body) + "\n  </way>"


def write_pbf(path: Path,
              nodes: list[tuple[int, float, float]],
              ways: list[tuple[int, list[int], dict[str, str]]]) -> Path:
    """Write an .osm.pbf; libosmium packs the nodes as DenseNodes by default."""
    writer = osmium.SimpleWriter(str(path))
    try:
        for node_id, lat, lon in nodes:
            writer.add_node(osmium.osm.mutable.Node(
                id=node_id, version=1, location=osmium.osm.Location(lon, lat), tags={}))
        for way_id, refs, tags in ways:
            writer.add_way(osmium.osm.mutable.Way(id=way_id, version=1, nodes=refs, tags=tags))
    finally:
        writer.close()
    return path
