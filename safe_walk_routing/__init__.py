"""
Safe Walk Routing - safety-weighted pedestrian routing over OSM extracts.

Builds an in-memory walking graph from an OpenStreetMap extract, scores every
way for personal-safety risk from its tags, and plans routes that trade
distance against risk.

## Quick Start

```python
from safe_walk_routing import RoutingConfig, WeightedAStarRouter, NearestNodeLocator
from safe_walk_routing import build_navigation_graph

config = RoutingConfig()
nav_graph, stats = build_navigation_graph("assets/patiala.osm.pbf", config)

locator = NearestNodeLocator(nav_graph)
start = locator.nearest(30.3515, 76.3700)
goal = locator.nearest(30.3410, 76.3940)

route = WeightedAStarRouter(nav_graph, config).find_route(start, goal, alpha=5.0)
print(route.get_summary())
```

## Main Components

- **ExtractIngestor**: two-pass OSM extract reader
- **is_walkable / risk_score**: tag-based classification and scoring
- **WalkGraphBuilder / NavigationGraph**: immutable walking graph
- **NearestNodeLocator**: coordinate snapping
- **WeightedAStarRouter**: distance/safety blended A*

## Architecture

- `algorithms/`: safety scoring and routing
- `mapping/`: graph assembly and snapping
- `data/`: extract ingestion and distance utilities
- `config/`: configuration management
"""

from .config import RoutingConfig
from .data import ExtractIngestor, ExtractIngestionError, haversine_distance
from .mapping import NavigationGraph, WalkGraphBuilder, NearestNodeLocator, build_navigation_graph
from .algorithms import (
    WeightedAStarRouter, RouteDetails, NoPathError,
    is_walkable, risk_score, baseline_risk
)

# Version information
__version__ = "1.0.0"

# Public API
__all__ = [
    # Main interfaces
    'build_navigation_graph',
    'WeightedAStarRouter',
    'NearestNodeLocator',
    'RoutingConfig',

    # Graph construction
    'ExtractIngestor',
    'ExtractIngestionError',
    'NavigationGraph',
    'WalkGraphBuilder',

    # Scoring
    'is_walkable',
    'risk_score',
    'baseline_risk',

    # Results
    'RouteDetails',
    'NoPathError',

    # Utilities
    'haversine_distance',

    # Metadata
    '__version__'
]
