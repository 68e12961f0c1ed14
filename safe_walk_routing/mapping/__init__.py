"""
Mapping functionality for safety-weighted routing.

This module contains:
- Walking graph assembly from OSM extracts
- Nearest-node snapping
"""

from .network.network_builder import NavigationGraph, WalkGraphBuilder
from .network.nearest_node import NearestNodeLocator
from .network.graph_loader import build_navigation_graph

__all__ = [
    'NavigationGraph',
    'WalkGraphBuilder',
    'NearestNodeLocator',
    'build_navigation_graph'
]
