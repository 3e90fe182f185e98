"""
Conservative strategy configuration.

Only the very largest presets are split; everything else stays in vendor.
"""

from typing import List, Sequence

from ...constants import COMMON_LARGE_LIBS, VERY_LARGE_LIBS
from ..matchers import ChunkGroupSpec
from ..priority import PriorityTier
from .base import BaseStrategyConfig


class ConservativeStrategyConfig(BaseStrategyConfig):
    """Minimal splitting, only very large dependencies."""

    def get_strategy_name(self) -> str:
        return "conservative"

    def collect_groups(self, dependencies: Sequence[str]) -> List[ChunkGroupSpec]:
        return self._preset_groups(
            COMMON_LARGE_LIBS,
            PriorityTier.LARGE_PRESET,
            dependencies,
            eligible=VERY_LARGE_LIBS,
        )
