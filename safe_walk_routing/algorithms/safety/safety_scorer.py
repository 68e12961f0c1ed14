"""
Tag-based personal-safety risk scoring for walkable ways.

A way gets a categorical baseline from its ``highway`` tag, then cumulative
adjustments for lighting, sidewalks, surface and foot designation. The result
is clamped so that even the safest way still carries a small penalty and the
riskiest way has a bounded one. Missing tags are treated as no evidence.
"""

from typing import Mapping

MIN_RISK_SCORE = 0.05
MAX_RISK_SCORE = 1.0
DEFAULT_BASELINE = 0.5

BASELINE_BY_HIGHWAY = {
    'pedestrian': 0.1,
    'footway': 0.1,
    'path': 0.1,
    'steps': 0.1,
    'living_street': 0.3,
    'residential': 0.3,
    'service': 0.5,
    'tertiary': 0.7,
    'secondary': 0.7,
    'primary': 0.9,
    'trunk': 0.9,
}

# (tag key, {value: adjustment}) applied in order
TAG_ADJUSTMENTS = (
    ('lit', {
        'yes': -0.2, '24/7': -0.2, '24-7': -0.2, 'automatic': -0.2, 'good': -0.2,
        'no': 0.3,
    }),
    ('sidewalk', {
        'both': -0.2, 'yes': -0.2, 'separate': -0.2, 'left': -0.2, 'right': -0.2,
        'no': 0.2, 'none': 0.2,
    }),
    ('surface', {
        'paved': -0.05, 'asphalt': -0.05, 'concrete': -0.05, 'paving_stones': -0.05,
        'unpaved': 0.1, 'dirt': 0.1, 'earth': 0.1, 'gravel': 0.1, 'mud': 0.1,
    }),
    ('foot', {
        'designated': -0.1,
    }),
)


def baseline_risk(highway: str) -> float:
    """Categorical baseline risk for a ``highway`` value (0.5 when unknown)."""
    return BASELINE_BY_HIGHWAY.get(highway, DEFAULT_BASELINE)


def risk_score(tags: Mapping[str, str],
               min_score: float = MIN_RISK_SCORE,
               max_score: float = MAX_RISK_SCORE) -> float:
    """
    Calculate the risk score of a way from its tags.

    Args:
        tags: OSM tag key/value mapping of the way
        min_score: Lower clamp bound
        max_score: Upper clamp bound

    Returns:
        Risk score in [min_score, max_score] (higher = riskier)
    """
    score = baseline_risk(tags.get('highway', ''))

    for key, adjustments in TAG_ADJUSTMENTS:
        value = tags.get(key)
        if value is not None:
            score += adjustments.get(value, 0.0)

    return max(min_score, min(max_score, score))
