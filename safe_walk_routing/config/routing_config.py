"""
Configuration management for safety-weighted pedestrian routing.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class RoutingConfig:
    """Configuration parameters for graph building and route planning."""

    # Source data
    extract_path: str = 'assets/extract.osm.pbf'  # compressed OSM extract loaded at startup

    # Safety score bounds (applied after all tag adjustments)
    min_safety_score: float = 0.05
    max_safety_score: float = 1.0

    # Search behaviour
    meters_per_degree: float = 111_000.0  # heuristic conversion factor
    default_alpha: float = 1.0  # used by the CLI when --alpha is omitted

    # Snapping: query points farther than this from every node are unsnappable
    max_snap_distance_m: Optional[float] = 1000.0

    # Server
    host: str = '0.0.0.0'
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ['*'])
    log_level: str = 'info'

    def validate(self) -> None:
        """Validate configuration parameters."""
        if not 0 < self.min_safety_score <= self.max_safety_score:
            raise ValueError("min_safety_score must be positive and <= max_safety_score")
        if self.meters_per_degree <= 0:
            raise ValueError("meters_per_degree must be positive")
        if self.default_alpha < 0:
            raise ValueError("default_alpha must be non-negative")
        if self.max_snap_distance_m is not None and self.max_snap_distance_m <= 0:
            raise ValueError("max_snap_distance_m must be positive or None")
        if self.log_level not in ('debug', 'info', 'warning', 'error'):
            raise ValueError(f"Unsupported log_level: {self.log_level}")

    @classmethod
    def from_env(cls) -> 'RoutingConfig':
        """
        Build a configuration from SAFE_WALK_* environment variables.

        Unset variables keep the dataclass defaults. Setting
        SAFE_WALK_MAX_SNAP_DISTANCE_M to 'none' disables the snap radius.
        """
        config = cls()
        env = os.environ

        if 'SAFE_WALK_EXTRACT_PATH' in env:
            config.extract_path = env['SAFE_WALK_EXTRACT_PATH']
        if 'SAFE_WALK_MAX_SNAP_DISTANCE_M' in env:
            raw = env['SAFE_WALK_MAX_SNAP_DISTANCE_M'].strip().lower()
            config.max_snap_distance_m = None if raw in ('', 'none') else float(raw)
        if 'SAFE_WALK_HOST' in env:
            config.host = env['SAFE_WALK_HOST']
        if 'SAFE_WALK_PORT' in env:
            config.port = int(env['SAFE_WALK_PORT'])
        if 'SAFE_WALK_CORS_ORIGINS' in env:
            config.cors_origins = [
                origin.strip() for origin in env['SAFE_WALK_CORS_ORIGINS'].split(',')
                if origin.strip()
            ]
        if 'SAFE_WALK_LOG_LEVEL' in env:
            config.log_level = env['SAFE_WALK_LOG_LEVEL'].strip().lower()

        config.validate()
        return config

    @classmethod
    def create_default_config(cls) -> 'RoutingConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def create_unbounded_snap_config(cls) -> 'RoutingConfig':
        """
        Create configuration that always snaps to the nearest node.

        Useful for sparse extracts where query points may sit far from any
        walkable way.
        """
        return cls(max_snap_distance_m=None)
