"""
Snap arbitrary coordinates to the closest node of the walking graph.
"""

from typing import Optional, Tuple

import numpy as np

from ...data.distance_utils import haversine_distances
from .network_builder import NavigationGraph


class NearestNodeLocator:
    """
    Exhaustive nearest-node search by great-circle distance.

    Every query scans all node coordinates, so cost is linear in node count.
    Ties resolve to the lowest node handle (first minimum in node-table order).
    """

    def __init__(self, nav_graph: NavigationGraph):
        self.nav_graph = nav_graph

    def nearest_with_distance(self, lat: float, lon: float) -> Optional[Tuple[int, float]]:
        """
        Find the nearest node and its distance.

        Returns:
            (node handle, distance in meters), or None if the graph has no nodes
        """
        if self.nav_graph.node_count == 0:
            return None

        distances = haversine_distances(lat, lon, self.nav_graph.lats, self.nav_graph.lons)
        node = int(np.argmin(distances))
        return node, float(distances[node])

    def nearest(self, lat: float, lon: float) -> Optional[int]:
        """Return the handle of the node closest to (lat, lon), or None if no nodes exist."""
        result = self.nearest_with_distance(lat, lon)
        return None if result is None else result[0]
