"""
Base strategy configuration class.

This module provides the abstract base class for strategy configurations.
Each strategy decides which built-in and synthesized chunk groups are
generated for a project's declared dependencies.
"""

import logging
from abc import ABC, abstractmethod
from typing import Collection, Iterable, List, Mapping, Optional, Sequence

from ..matchers import ChunkGroupSpec
from ..patterns import LiteralPattern
from ..priority import PriorityTier

logger = logging.getLogger(__name__)


class BaseStrategyConfig(ABC):
    """
    Abstract base class for strategy configurations.

    Subclasses return the strategy-based chunk groups for a set of project
    dependencies. Custom and hint-detected groups are handled by the builder
    and are the same for every strategy.
    """

    @abstractmethod
    def get_strategy_name(self) -> str:
        """Return the strategy name this configuration handles."""
        pass

    @abstractmethod
    def collect_groups(self, dependencies: Sequence[str]) -> List[ChunkGroupSpec]:
        """
        Return the strategy-based chunk groups in construction order.

        Args:
            dependencies: Declared dependency names, in a stable order

        Returns:
            List of ChunkGroupSpec
        """
        pass

    @staticmethod
    def is_fragment_present(fragment: str, dependencies: Collection[str]) -> bool:
        """
        Check whether a preset fragment is declared by the project.

        A package name must be declared exactly. A scope prefix such as
        ``@vue/`` is present when any declared name starts with it.

        Args:
            fragment: Package name or scope prefix from a preset table
            dependencies: Declared dependency names

        Returns:
            True if the preset applies to the project
        """
        if fragment.endswith('/'):
            return any(dep.startswith(fragment) for dep in dependencies)
        return fragment in dependencies

    def _preset_groups(
        self,
        table: Mapping[str, Sequence[str]],
        tier: PriorityTier,
        dependencies: Sequence[str],
        eligible: Optional[Iterable[str]] = None,
    ) -> List[ChunkGroupSpec]:
        """Build groups for every preset in table that the project declares."""
        allowed = set(eligible) if eligible is not None else None
        declared = set(dependencies)
        groups = []

        for group_name, fragments in table.items():
            if allowed is not None and group_name not in allowed:
                continue
            if any(self.is_fragment_present(fragment, declared) for fragment in fragments):
                groups.append(ChunkGroupSpec(
                    name=group_name,
                    patterns=tuple(LiteralPattern(fragment) for fragment in fragments),
                    tier=tier,
                ))

        logger.debug(
            f"{self.get_strategy_name()}: {len(groups)} {tier.name.lower()} groups detected"
        )
        return groups
