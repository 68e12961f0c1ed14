"""
Service layer for the safety-weighted routing API.
"""

import logging
from typing import Any, Dict, Optional

import geojson

from safe_walk_routing import __version__
from safe_walk_routing.algorithms.routing.astar_weighted import WeightedAStarRouter, RouteDetails, NoPathError
from safe_walk_routing.config.routing_config import RoutingConfig
from safe_walk_routing.data.extract_ingestor import IngestionStats
from safe_walk_routing.mapping.network.graph_loader import build_navigation_graph
from safe_walk_routing.mapping.network.nearest_node import NearestNodeLocator
from safe_walk_routing.mapping.network.network_builder import NavigationGraph
from api.schemas.routing import (
    RouteRequest, RouteResponse, HealthResponse,
    STATUS_OK, STATUS_UNSNAPPABLE, STATUS_NO_PATH
)

logger = logging.getLogger(__name__)


class SafeWalkRoutingService:
    """
    Service class that owns the walking graph and answers route queries.

    The graph is built once by ``initialize`` and never mutated afterwards, so
    concurrent requests share it without locking.
    """

    def __init__(self, config: Optional[RoutingConfig] = None):
        """Initialize the routing service (the graph is loaded separately)."""
        self.config = config or RoutingConfig()
        self.config.validate()
        self.nav_graph: Optional[NavigationGraph] = None
        self.locator: Optional[NearestNodeLocator] = None
        self.router: Optional[WeightedAStarRouter] = None
        self.ingestion_stats: Optional[IngestionStats] = None

    @classmethod
    def from_graph(cls, nav_graph: NavigationGraph,
                   config: Optional[RoutingConfig] = None) -> 'SafeWalkRoutingService':
        """Create a service around an already built graph."""
        service = cls(config)
        service._attach(nav_graph)
        return service

    @property
    def is_initialized(self) -> bool:
        return self.nav_graph is not None

    def initialize(self) -> None:
        """
        Build the walking graph from the configured extract.

        Raises:
            ExtractIngestionError: If the extract cannot be loaded; the server must not start
        """
        logger.info(f"Initializing routing service from {self.config.extract_path}...")
        nav_graph, stats = build_navigation_graph(self.config.extract_path, self.config)
        self.ingestion_stats = stats
        self._attach(nav_graph)
        logger.info(f"Ingestion stats: {stats.as_dict()}")

    def _attach(self, nav_graph: NavigationGraph) -> None:
        self.nav_graph = nav_graph
        self.locator = NearestNodeLocator(nav_graph)
        self.router = WeightedAStarRouter(nav_graph, self.config)

    def get_health_status(self) -> HealthResponse:
        """Get the health status of the routing service."""
        return HealthResponse(
            status="healthy" if self.is_initialized else "starting",
            version=__version__,
            graph_loaded=self.is_initialized,
            node_count=self.nav_graph.node_count if self.nav_graph else 0,
            edge_count=self.nav_graph.edge_count if self.nav_graph else 0
        )

    def _snap(self, lat: float, lon: float) -> Optional[int]:
        """Nearest node within the configured snap radius, or None."""
        result = self.locator.nearest_with_distance(lat, lon)
        if result is None:
            return None

        node, distance = result
        max_distance = self.config.max_snap_distance_m
        if max_distance is not None and distance > max_distance:
            logger.debug(f"({lat}, {lon}) is {distance:.0f}m from the nearest node, beyond {max_distance:.0f}m")
            return None
        return node

    def calculate_route(self, request: RouteRequest) -> RouteResponse:
        """
        Calculate a safety-weighted route between two points.

        Unsnappable endpoints and unreachable destinations return the empty
        LineString with zero distance and safety, told apart by ``status``.

        Args:
            request: Route calculation request

        Returns:
            RouteResponse with route geometry and statistics
        """
        if not self.is_initialized:
            raise RuntimeError("Routing graph is not loaded")

        start_node = self._snap(*request.origin)
        end_node = self._snap(*request.destination)
        if start_node is None or end_node is None:
            logger.info(f"Could not snap {request.origin} -> {request.destination} to the graph")
            return self._empty_response(STATUS_UNSNAPPABLE)

        try:
            route = self.router.find_route(start_node, end_node, request.alpha)
        except NoPathError:
            return self._empty_response(STATUS_NO_PATH)

        return RouteResponse(
            geometry=self._route_to_geojson(route),
            total_distance=route.total_distance,
            average_safety=route.average_safety,
            status=STATUS_OK
        )

    def _empty_response(self, status: str) -> RouteResponse:
        return RouteResponse(
            geometry=geojson.LineString([]),
            total_distance=0.0,
            average_safety=0.0,
            status=status
        )

    def _route_to_geojson(self, route: RouteDetails) -> Dict[str, Any]:
        """
        Convert route details to a GeoJSON LineString.

        RouteDetails keeps (lat, lon) pairs; GeoJSON wants [lon, lat].
        """
        geojson_coords = [[lon, lat] for lat, lon in route.coordinates]
        return geojson.LineString(geojson_coords, precision=7)


# Global service instance, loaded during application startup
routing_service = SafeWalkRoutingService(RoutingConfig.from_env())
