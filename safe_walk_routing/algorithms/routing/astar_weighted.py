"""
Weighted A* routing algorithm for safety-aware pedestrian pathfinding.
"""

import logging
import math
import time
from typing import Any, Dict, Iterable, List, Optional, Tuple

import networkx as nx
import numpy as np

from ...config.routing_config import RoutingConfig
from ...mapping.network.network_builder import NavigationGraph

logger = logging.getLogger(__name__)


class NoPathError(RuntimeError):
    """Raised when the goal cannot be reached from the start node."""


def edge_cost(edge_data: Dict[str, Any], alpha: float) -> float:
    """Cost of traversing one edge: distance * (1 + alpha * safety_score)."""
    return edge_data['length'] * (1.0 + alpha * edge_data['safety_score'])


def _cheapest_edge(parallel_edges: Dict[Any, Dict[str, Any]], alpha: float) -> Dict[str, Any]:
    return min(parallel_edges.values(), key=lambda data: edge_cost(data, alpha))


class RouteDetails:
    """Container for detailed route information."""

    def __init__(self, nodes: List[int], nav_graph: NavigationGraph,
                 alpha: float, algorithm: str = "weighted_astar"):
        """
        Initialize route details.

        Args:
            nodes: List of node handles in route order
            nav_graph: Graph used for routing
            alpha: Safety weighting the route was planned with
            algorithm: Algorithm name used
        """
        self.nodes = nodes
        self.alpha = alpha
        self.algorithm = algorithm
        self.calculation_time: Optional[float] = None

        self._calculate_metrics(nav_graph)

    def _calculate_metrics(self, nav_graph: NavigationGraph) -> None:
        """
        Re-walk the path to get real distance and safety.

        The search cost is safety-weighted, so physical distance is summed
        separately. Where parallel edges exist the one the search would have
        taken (lowest weighted cost) is used.
        """
        graph = nav_graph.graph
        self.total_distance = 0.0
        self.total_weighted_cost = 0.0
        self.safety_scores: List[float] = []
        self.coordinates: List[Tuple[float, float]] = [
            nav_graph.node_coords(node) for node in self.nodes
        ]

        for node, next_node in zip(self.nodes, self.nodes[1:]):
            edge_data = _cheapest_edge(graph[node][next_node], self.alpha)
            self.total_distance += edge_data['length']
            self.total_weighted_cost += edge_cost(edge_data, self.alpha)
            self.safety_scores.append(edge_data['safety_score'])

    @property
    def average_safety(self) -> float:
        """Mean safety score over traversed edges (0 for a single-node route)."""
        return float(np.mean(self.safety_scores)) if self.safety_scores else 0.0

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics for the route."""
        return {
            'algorithm': self.algorithm,
            'alpha': self.alpha,
            'node_count': len(self.nodes),
            'total_distance_m': round(self.total_distance, 1),
            'total_weighted_cost': round(self.total_weighted_cost, 1),
            'average_safety_score': round(self.average_safety, 4),
            'max_safety_score': round(max(self.safety_scores), 4) if self.safety_scores else 0,
            'calculation_time_ms': round(self.calculation_time * 1000, 1) if self.calculation_time else None
        }


class WeightedAStarRouter:
    """
    A* routing over the walking graph with a distance/safety blended cost.

    Edge cost is ``length * (1 + alpha * safety_score)``. The heuristic is the
    straight-line distance in degrees scaled by a fixed meters-per-degree
    factor and ignores alpha; since weighted cost never falls below physical
    length it stays admissible for every alpha >= 0, only looser as alpha
    grows.
    """

    def __init__(self, nav_graph: NavigationGraph, config: Optional[RoutingConfig] = None):
        """
        Initialize weighted A* router.

        Args:
            nav_graph: Frozen walking graph
            config: Routing configuration parameters
        """
        self.nav_graph = nav_graph
        self.config = config or RoutingConfig()

    def _heuristic_function(self, node: int, goal: int) -> float:
        lats, lons = self.nav_graph.lats, self.nav_graph.lons
        d_lat = lats[node] - lats[goal]
        d_lon = lons[node] - lons[goal]
        return math.sqrt(d_lat * d_lat + d_lon * d_lon) * self.config.meters_per_degree

    def find_route(self, start_node: int, end_node: int, alpha: float) -> RouteDetails:
        """
        Find the lowest-cost route using weighted A*.

        Args:
            start_node: Starting node handle
            end_node: Goal node handle
            alpha: Non-negative safety weighting (0 = shortest distance)

        Returns:
            RouteDetails object with path and metrics

        Raises:
            ValueError: If alpha is negative or a node is not in the graph
            NoPathError: If the goal is unreachable
        """
        if alpha < 0 or math.isnan(alpha):
            raise ValueError(f"alpha must be non-negative, got {alpha}")
        for node in (start_node, end_node):
            if node not in self.nav_graph.graph:
                raise ValueError(f"Node {node} is not in the graph")

        start_time = time.time()

        # Search state lives inside astar_path, so concurrent queries never share it
        try:
            path = nx.astar_path(
                self.nav_graph.graph,
                start_node,
                end_node,
                heuristic=self._heuristic_function,
                weight=lambda u, v, parallel_edges: edge_cost(
                    _cheapest_edge(parallel_edges, alpha), alpha
                )
            )
        except nx.NetworkXNoPath as e:
            logger.info(f"No path found from {start_node} to {end_node}")
            raise NoPathError(f"No path found from {start_node} to {end_node}") from e

        route = RouteDetails(path, self.nav_graph, alpha)
        route.calculation_time = time.time() - start_time

        logger.info(f"Route found: {len(path)} nodes, "
                    f"{route.total_distance:.0f}m, "
                    f"calculated in {route.calculation_time*1000:.1f}ms")

        return route

    def find_multiple_routes(self, start_node: int, end_node: int,
                             alphas: Iterable[float] = (0.0, 1.0, 5.0)) -> Dict[float, RouteDetails]:
        """
        Find routes for several alpha values for comparison.

        Returns:
            Dictionary mapping alpha to RouteDetails (unreachable goals are omitted)
        """
        routes = {}

        for alpha in alphas:
            try:
                routes[alpha] = self.find_route(start_node, end_node, alpha)
            except NoPathError:
                logger.warning(f"No route for alpha={alpha}")

        return routes
