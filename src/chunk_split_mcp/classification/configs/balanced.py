"""
Balanced strategy configuration.

Splits the common large libraries the project declares into their own chunks
and gathers medium-sized helper libraries into shared chunks.
"""

from typing import List, Sequence

from ...constants import COMMON_LARGE_LIBS, MEDIUM_LIB_GROUPS
from ..matchers import ChunkGroupSpec
from ..priority import PriorityTier
from .base import BaseStrategyConfig


class BalancedStrategyConfig(BaseStrategyConfig):
    """Split large dependencies and common frameworks (the default)."""

    def get_strategy_name(self) -> str:
        return "balanced"

    def collect_groups(self, dependencies: Sequence[str]) -> List[ChunkGroupSpec]:
        groups = self._preset_groups(COMMON_LARGE_LIBS, PriorityTier.LARGE_PRESET, dependencies)
        groups.extend(
            self._preset_groups(MEDIUM_LIB_GROUPS, PriorityTier.MEDIUM_PRESET, dependencies)
        )
        return groups
