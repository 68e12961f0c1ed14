from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from safe_walk_routing.mapping.network.network_builder import NavigationGraph

from .helpers import (
    A, B, C, D, SMALL_NODES, SMALL_WAYS, SQUARE_POINTS,
    build_graph, node_xml, osm_xml, way_xml, write_pbf,
)


@pytest.fixture
def square_graph() -> NavigationGraph:
    # short risky diagonal A-C and a longer safe detour A-B-D-C
    return build_graph(SQUARE_POINTS, [([A, C], 0.9), ([A, B, D, C], 0.1)])


@pytest.fixture
def write_extract(tmp_path: Path) -> Callable[..., Path]:
    def _write(nodes: list[str], ways: list[str], name: str = "extract.osm") -> Path:
        path = tmp_path / name
        path.write_text(osm_xml(nodes, ways), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def small_extract(write_extract) -> Path:
    # Ways come before their nodes to exercise the two-pass read
    ways = [way_xml(way_id, refs, tags) for way_id, refs, tags in SMALL_WAYS]
    nodes = [node_xml(node_id, lat, lon) for node_id, lat, lon in SMALL_NODES]
    nodes.append(node_xml(8, None, None))
    return write_extract(nodes, ways)


@pytest.fixture
def small_pbf_extract(tmp_path: Path) -> Path:
    return write_pbf(tmp_path / "extract.osm.pbf", SMALL_NODES, SMALL_WAYS)
