"""
Two-pass streaming reader for OpenStreetMap extracts (.osm.pbf, .osm, .osm.bz2).

Ways reference points by id and may appear before the points they use, so the
full point table is collected in a first pass and ways are visited in a second.
libosmium hands both plain and dense-packed nodes to the same ``node`` callback.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Tuple, Union

import osmium

logger = logging.getLogger(__name__)


class ExtractIngestionError(RuntimeError):
    """Raised when an extract is missing, unreadable or malformed."""


@dataclass
class WayRecord:
    """A way as read from the extract: ordered point ids plus its tags."""
    way_id: int
    refs: List[int]
    tags: Dict[str, str] = field(default_factory=dict)


@dataclass
class IngestionStats:
    """Counters collected while reading an extract."""
    points_loaded: int = 0
    invalid_points: int = 0
    ways_seen: int = 0
    walkable_ways: int = 0
    connected_ways: int = 0
    segments_added: int = 0
    segments_skipped: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            'points_loaded': self.points_loaded,
            'invalid_points': self.invalid_points,
            'ways_seen': self.ways_seen,
            'walkable_ways': self.walkable_ways,
            'connected_ways': self.connected_ways,
            'segments_added': self.segments_added,
            'segments_skipped': self.segments_skipped
        }


class _PointHandler(osmium.SimpleHandler):
    """Pass 1: collect point coordinates keyed by external id."""

    def __init__(self):
        super().__init__()
        self.points: Dict[int, Tuple[float, float]] = {}
        self.invalid_points = 0

    def node(self, n):
        location = n.location
        # Points without a usable location are dropped individually
        if not location.valid():
            self.invalid_points += 1
            return
        self.points[n.id] = (location.lat, location.lon)


class _WayHandler(osmium.SimpleHandler):
    """Pass 2: hand every way to a callback as a WayRecord."""

    def __init__(self, on_way: Callable[[WayRecord], None]):
        super().__init__()
        self.on_way = on_way
        self.ways_seen = 0

    def way(self, w):
        self.ways_seen += 1
        # osmium objects are only valid inside the callback, so copy out
        record = WayRecord(
            way_id=w.id,
            refs=[node_ref.ref for node_ref in w.nodes],
            tags={tag.k: tag.v for tag in w.tags}
        )
        self.on_way(record)


class ExtractIngestor:
    """
    Streams an OSM extract in two passes.

    Any failure to open or parse the file raises ExtractIngestionError; there
    is no partial result.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.stats = IngestionStats()

    def _check_readable(self) -> None:
        if not self.path.is_file():
            raise ExtractIngestionError(f"Extract file not found: {self.path}")
        if not os.access(self.path, os.R_OK):
            raise ExtractIngestionError(f"Extract file is not readable: {self.path}")

    def _apply(self, handler: osmium.SimpleHandler, pass_name: str) -> None:
        try:
            handler.apply_file(str(self.path))
        except Exception as e:
            raise ExtractIngestionError(
                f"Failed to parse extract {self.path} during {pass_name}: {e}"
            ) from e

    def load_points(self) -> Dict[int, Tuple[float, float]]:
        """
        Pass 1: read every point of the extract.

        Returns:
            External point id -> (lat, lon)
        """
        self._check_readable()
        logger.info(f"Reading points from {self.path}")

        handler = _PointHandler()
        self._apply(handler, 'point pass')

        self.stats.points_loaded = len(handler.points)
        self.stats.invalid_points = handler.invalid_points
        if handler.invalid_points:
            logger.warning(f"Dropped {handler.invalid_points} points with invalid coordinates")
        logger.info(f"Points loaded: {len(handler.points)}")
        return handler.points

    def load_ways(self, on_way: Callable[[WayRecord], None]) -> int:
        """
        Pass 2: stream every way of the extract to ``on_way``.

        Returns:
            Number of ways visited
        """
        self._check_readable()
        logger.info(f"Reading ways from {self.path}")

        handler = _WayHandler(on_way)
        self._apply(handler, 'way pass')

        self.stats.ways_seen = handler.ways_seen
        return handler.ways_seen
