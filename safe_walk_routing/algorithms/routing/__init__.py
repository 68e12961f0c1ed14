"""
Core routing algorithms.
"""

from .astar_weighted import WeightedAStarRouter, RouteDetails, NoPathError, edge_cost

__all__ = [
    'WeightedAStarRouter',
    'RouteDetails',
    'NoPathError',
    'edge_cost'
]
