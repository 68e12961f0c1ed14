"""
Build the navigation graph from an OSM extract.
"""

import logging
import time
from pathlib import Path
from typing import Optional, Tuple, Union

from ...algorithms.safety.safety_scorer import risk_score
from ...algorithms.safety.walkability import is_walkable
from ...config.routing_config import RoutingConfig
from ...data.extract_ingestor import ExtractIngestor, IngestionStats, WayRecord
from .network_builder import NavigationGraph, WalkGraphBuilder

logger = logging.getLogger(__name__)


def build_navigation_graph(path: Union[str, Path],
                           config: Optional[RoutingConfig] = None
                           ) -> Tuple[NavigationGraph, IngestionStats]:
    """
    Read an extract and assemble the walking graph.

    Args:
        path: Path to the OSM extract
        config: Routing configuration (score bounds)

    Returns:
        Tuple of (frozen NavigationGraph, ingestion statistics)

    Raises:
        ExtractIngestionError: If the extract cannot be read or parsed
    """
    config = config or RoutingConfig()
    start_time = time.time()

    ingestor = ExtractIngestor(path)
    points = ingestor.load_points()
    builder = WalkGraphBuilder(points)

    def handle_way(way: WayRecord) -> None:
        if not is_walkable(way.tags):
            return
        score = risk_score(way.tags, config.min_safety_score, config.max_safety_score)
        ingestor.stats.walkable_ways += 1
        builder.add_way(way.refs, score, way_id=way.way_id, highway=way.tags.get('highway'))

    ingestor.load_ways(handle_way)
    nav_graph = builder.build()

    stats = ingestor.stats
    stats.connected_ways = builder.ways_added
    stats.segments_added = builder.segments_added
    stats.segments_skipped = builder.segments_skipped

    # Point table is released with the builder once this function returns
    logger.info(f"Extract ingested in {time.time() - start_time:.1f}s: "
                f"{stats.walkable_ways}/{stats.ways_seen} ways walkable")
    if nav_graph.node_count == 0:
        logger.warning(f"No walkable ways found in {path}; every query will be unsnappable")

    return nav_graph, stats
