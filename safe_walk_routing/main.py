#!/usr/bin/env python3
"""
Safe Walk Routing - Command Line Interface

Builds the walking graph from an extract and compares routes between two
coordinates for several safety weightings.
"""

import argparse
import logging
import sys

from .config import RoutingConfig
from .data import ExtractIngestionError
from .mapping import NearestNodeLocator, build_navigation_graph
from .algorithms import WeightedAStarRouter

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Safety-weighted pedestrian routing")
    parser.add_argument("extract", help="Path to an OSM extract (.osm.pbf, .osm, .osm.bz2)")
    parser.add_argument("--origin", nargs=2, type=float, required=True, metavar=("LAT", "LON"))
    parser.add_argument("--destination", nargs=2, type=float, required=True, metavar=("LAT", "LON"))
    parser.add_argument("--alpha", type=float, action="append",
                        help="Safety weighting; repeat to compare several values")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = RoutingConfig(extract_path=args.extract)
    alphas = args.alpha or [config.default_alpha]
    if any(alpha < 0 for alpha in alphas):
        logger.error("alpha must be non-negative")
        return 2

    try:
        nav_graph, stats = build_navigation_graph(config.extract_path, config)
    except ExtractIngestionError as e:
        logger.error(f"Failed to load extract: {e}")
        return 1

    locator = NearestNodeLocator(nav_graph)
    start_node = locator.nearest(*args.origin)
    end_node = locator.nearest(*args.destination)
    if start_node is None or end_node is None:
        logger.error("Graph has no walkable nodes")
        return 1

    router = WeightedAStarRouter(nav_graph, config)
    routes = router.find_multiple_routes(start_node, end_node, alphas)
    if not routes:
        print("No route found")
        return 1

    for alpha, route in routes.items():
        summary = route.get_summary()
        print(f"\nalpha={alpha:g}:")
        print(f"   Distance: {summary['total_distance_m']:.0f}m")
        print(f"   Nodes: {summary['node_count']}")
        print(f"   Avg Safety Score: {summary['average_safety_score']:.4f}")
        if summary['calculation_time_ms']:
            print(f"   Calculation Time: {summary['calculation_time_ms']:.1f}ms")

    return 0


if __name__ == "__main__":
    sys.exit(main())
