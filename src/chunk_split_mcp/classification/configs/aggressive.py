"""
Aggressive strategy configuration.

Every declared dependency gets its own chunk, except packages that only ship
type declarations.
"""

from typing import List, Sequence

from ...constants import TYPES_ONLY_PREFIX
from ..matchers import ChunkGroupSpec
from ..patterns import LiteralPattern
from ..priority import PriorityTier
from .base import BaseStrategyConfig


class AggressiveStrategyConfig(BaseStrategyConfig):
    """Split almost all dependencies into separate chunks."""

    def get_strategy_name(self) -> str:
        return "aggressive"

    def collect_groups(self, dependencies: Sequence[str]) -> List[ChunkGroupSpec]:
        return [
            ChunkGroupSpec(
                name=dep,
                patterns=(LiteralPattern(dep),),
                tier=PriorityTier.AGGRESSIVE_SYNTHESIZED,
            )
            for dep in dependencies
            if not dep.startswith(TYPES_ONLY_PREFIX)
        ]
