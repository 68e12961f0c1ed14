"""
Network building and nearest-node lookup.
"""

from .network_builder import NavigationGraph, WalkGraphBuilder
from .nearest_node import NearestNodeLocator
from .graph_loader import build_navigation_graph

__all__ = [
    'NavigationGraph',
    'WalkGraphBuilder',
    'NearestNodeLocator',
    'build_navigation_graph'
]
