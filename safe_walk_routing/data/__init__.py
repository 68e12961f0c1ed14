"""
Data ingestion and utilities for safety-weighted routing.

This module contains:
- OSM extract reading
- Distance calculations
"""

from .extract_ingestor import ExtractIngestor, ExtractIngestionError, IngestionStats, WayRecord
from .distance_utils import haversine_distance, haversine_distances, get_network_bounds

__all__ = [
    'ExtractIngestor',
    'ExtractIngestionError',
    'IngestionStats',
    'WayRecord',
    'haversine_distance',
    'haversine_distances',
    'get_network_bounds'
]
