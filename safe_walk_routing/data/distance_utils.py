"""
Great-circle distance helpers: a scalar form for the graph builder and a
numpy form for scanning every node at once.
"""

import math
from typing import Dict

import numpy as np

# Earth's radius in meters
EARTH_RADIUS_M = 6371000.0


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in meters between two (lat, lon) points."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    half_chord = (math.sin((phi2 - phi1) / 2.0) ** 2
                  + math.cos(phi1) * math.cos(phi2) * math.sin(math.radians(lon2 - lon1) / 2.0) ** 2)
    # rounding can push the term just outside [0, 1]
    return 2.0 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(max(0.0, half_chord))))


def haversine_distances(lat: float, lon: float,
                        lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
    """
    Vectorized great circle distance from one point to many.

    Args:
        lat, lon: Query point coordinates
        lats, lons: Arrays of target coordinates

    Returns:
        Array of distances in meters, aligned with the input arrays
    """
    phi = np.radians(lat)
    phis = np.radians(lats)
    half_chord = (np.sin((phis - phi) / 2.0) ** 2
                  + np.cos(phi) * np.cos(phis) * np.sin(np.radians(lons - lon) / 2.0) ** 2)
    return 2.0 * EARTH_RADIUS_M * np.arcsin(np.sqrt(np.clip(half_chord, 0.0, 1.0)))


def get_network_bounds(lats: np.ndarray, lons: np.ndarray) -> Dict[str, float]:
    """
    Get the geographic bounds of a set of node coordinates.

    Returns:
        Dictionary with lat_min, lat_max, lon_min, lon_max
    """
    if len(lats) == 0:
        return {}

    return {
        'lat_min': float(np.min(lats)),
        'lat_max': float(np.max(lats)),
        'lon_min': float(np.min(lons)),
        'lon_max': float(np.max(lons))
    }
