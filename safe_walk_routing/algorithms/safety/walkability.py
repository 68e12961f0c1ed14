"""
Walkability classification of OSM ways from their tags.
"""

from typing import Mapping

# Pedestrian-oriented or low-speed categories, walkable without further evidence
WALKABLE_HIGHWAYS = frozenset({
    'footway', 'path', 'steps', 'pedestrian', 'living_street',
    'residential', 'tertiary', 'service', 'unclassified'
})

# High-speed categories, walkable only with explicit pedestrian accommodation
MOTOR_HIGHWAYS = frozenset({'motorway', 'trunk', 'primary', 'secondary'})

FOOT_ALLOWED_VALUES = frozenset({'yes', 'designated', 'permissive'})
SIDEWALK_PRESENT_VALUES = frozenset({'both', 'left', 'right', 'yes', 'separate'})


def is_walkable(tags: Mapping[str, str]) -> bool:
    """
    Decide whether pedestrians may traverse a way.

    Args:
        tags: OSM tag key/value mapping of the way

    Returns:
        True if the way belongs in the walking graph
    """
    highway = tags.get('highway', '')

    if highway in WALKABLE_HIGHWAYS:
        return True

    if highway in MOTOR_HIGHWAYS:
        foot_allowed = tags.get('foot', '') in FOOT_ALLOWED_VALUES
        has_sidewalk = tags.get('sidewalk', '') in SIDEWALK_PRESENT_VALUES
        return foot_allowed or has_sidewalk

    return False
