"""
Configuration management for safety-weighted routing.
"""

from .routing_config import RoutingConfig

__all__ = [
    'RoutingConfig'
]
