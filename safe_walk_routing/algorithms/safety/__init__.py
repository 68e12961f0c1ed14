"""
Tag-based walkability classification and safety scoring.
"""

from .walkability import is_walkable
from .safety_scorer import risk_score, baseline_risk

__all__ = [
    'is_walkable',
    'risk_score',
    'baseline_risk'
]
