"""
Routing and scoring algorithms.

This module contains:
- Walkability classification and safety scoring of ways
- Weighted A* routing
"""

from .safety import is_walkable, risk_score, baseline_risk
from .routing.astar_weighted import WeightedAStarRouter, RouteDetails, NoPathError

__all__ = [
    'is_walkable',
    'risk_score',
    'baseline_risk',
    'WeightedAStarRouter',
    'RouteDetails',
    'NoPathError'
]
