"""
Walking network builder that assembles the immutable navigation graph.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx
import numpy as np

from ...data.distance_utils import haversine_distance, get_network_bounds

logger = logging.getLogger(__name__)


class NavigationGraph:
    """
    Read-only walking graph shared by every route query.

    Nodes are integer handles numbered in creation order, so a handle is also
    the node's position in the ``lats``/``lons`` coordinate arrays. Node
    attributes follow the OSMnx convention (``y`` = latitude, ``x`` =
    longitude) and keep the external ``osm_id``. Edges carry ``length`` in
    meters and the way's ``safety_score``.
    """

    def __init__(self, graph: nx.MultiDiGraph, osm_id_map: Dict[int, int],
                 lats: np.ndarray, lons: np.ndarray):
        self.graph = nx.freeze(graph)
        self.osm_id_map = osm_id_map

        lats.flags.writeable = False
        lons.flags.writeable = False
        self.lats = lats
        self.lons = lons

    @property
    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def node_coords(self, node: int) -> Tuple[float, float]:
        """Return (lat, lon) of a node handle."""
        return float(self.lats[node]), float(self.lons[node])

    def get_bounds(self) -> Dict[str, float]:
        return get_network_bounds(self.lats, self.lons)


class WalkGraphBuilder:
    """
    Incrementally builds a NavigationGraph from classified, scored ways.
    """

    def __init__(self, points: Dict[int, Tuple[float, float]]):
        """
        Initialize the builder.

        Args:
            points: External point id -> (lat, lon) table from the extract
        """
        self.points = points
        self.graph = nx.MultiDiGraph()
        self.osm_id_map: Dict[int, int] = {}
        self._lats: List[float] = []
        self._lons: List[float] = []

        self.ways_added = 0
        self.segments_added = 0
        self.segments_skipped = 0
        self._built = False

    def _get_or_create_node(self, osm_id: int, lat: float, lon: float) -> int:
        node = self.osm_id_map.get(osm_id)
        if node is None:
            node = len(self._lats)
            self.graph.add_node(node, y=lat, x=lon, osm_id=osm_id)
            self._lats.append(lat)
            self._lons.append(lon)
            self.osm_id_map[osm_id] = node
        return node

    def add_way(self, refs: Iterable[int], safety_score: float,
                way_id: Optional[int] = None, highway: Optional[str] = None) -> int:
        """
        Connect every consecutive point pair of a walkable way in both directions.

        Pairs referencing a point missing from the point table are skipped
        silently, as are repeated consecutive references (no self-loops).

        Args:
            refs: Ordered external point ids of the way
            safety_score: Risk score applied to every segment of the way
            way_id: External way id, stored on edges for diagnostics
            highway: Highway category, stored on edges for diagnostics

        Returns:
            Number of segments connected
        """
        if self._built:
            raise RuntimeError("Graph has already been built; builder is closed")

        refs = list(refs)
        added = 0

        for id_a, id_b in zip(refs, refs[1:]):
            coord_a = self.points.get(id_a)
            coord_b = self.points.get(id_b)
            if coord_a is None or coord_b is None or id_a == id_b:
                self.segments_skipped += 1
                continue

            node_a = self._get_or_create_node(id_a, *coord_a)
            node_b = self._get_or_create_node(id_b, *coord_b)

            distance = haversine_distance(coord_a[0], coord_a[1], coord_b[0], coord_b[1])
            edge_data = {
                'length': distance,
                'safety_score': float(safety_score),
                'osm_way_id': way_id,
                'highway': highway
            }

            # Pedestrians can walk both ways
            self.graph.add_edge(node_a, node_b, **edge_data)
            self.graph.add_edge(node_b, node_a, **edge_data)
            added += 1

        self.segments_added += added
        if added:
            self.ways_added += 1
        return added

    def build(self) -> NavigationGraph:
        """Freeze and return the navigation graph."""
        self._built = True
        nav_graph = NavigationGraph(
            self.graph,
            self.osm_id_map,
            np.array(self._lats, dtype=np.float64),
            np.array(self._lons, dtype=np.float64)
        )
        logger.info(f"Graph built: {nav_graph.node_count} nodes, {nav_graph.edge_count} edges "
                    f"({self.segments_skipped} segments skipped)")
        return nav_graph
