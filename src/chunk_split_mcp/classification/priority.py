"""
Priority tiers for chunk matchers.

Matchers are tried from the highest tier down; the first match wins.
"""

from enum import IntEnum


class PriorityTier(IntEnum):
    """Ordered matcher tiers, highest first."""

    CUSTOM_GROUP = 100
    HINT_DETECTED = 90
    LARGE_PRESET = 80
    MEDIUM_PRESET = 70
    AGGRESSIVE_SYNTHESIZED = 50
    FALLBACK = 0
