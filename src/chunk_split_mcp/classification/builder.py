"""
Matcher builder.

Turns resolved options, the project's declared dependencies and the framework
hints of the current build into the ordered MatcherPlan used by the resolver.
"""

import logging
from typing import TYPE_CHECKING, AbstractSet, Iterable, List, Optional

from ..constants import HINT_GROUPS
from .configs import get_strategy_config
from .matchers import ChunkGroupSpec, MatcherPlan
from .patterns import order_patterns, parse_pattern
from .priority import PriorityTier

if TYPE_CHECKING:
    from ..options import ChunkSplitOptions

logger = logging.getLogger(__name__)


class MatcherBuilder:
    """
    Builds the matcher list for one build invocation.

    Construction order is custom groups, hint-detected groups, then the
    strategy-based groups. The result is sorted by descending priority and
    ties keep construction order, so identical inputs always produce the
    same plan.
    """

    def build(
        self,
        options: "ChunkSplitOptions",
        dependencies: Optional[Iterable[str]] = None,
        hints: Optional[AbstractSet[str]] = None,
    ) -> MatcherPlan:
        """
        Build the ordered matcher plan.

        Args:
            options: Resolved plugin options
            dependencies: Declared dependency names; may be empty
            hints: Framework hint tokens for the current build

        Returns:
            Immutable MatcherPlan

        Raises:
            InvalidPatternError: If a custom group pattern cannot be compiled
        """
        declared = self._ordered_dependencies(dependencies)
        hints = hints or frozenset()

        specs: List[ChunkGroupSpec] = []
        specs.extend(self._custom_groups(options))
        specs.extend(self._hint_groups(hints))
        specs.extend(get_strategy_config(options.strategy).collect_groups(declared))

        # sorted() is stable, equal tiers keep construction order
        ordered = sorted(specs, key=lambda spec: spec.tier, reverse=True)
        plan = MatcherPlan(
            matchers=tuple(spec.compile() for spec in ordered),
            strategy=options.strategy,
            min_size=options.min_size,
            dependencies=tuple(declared),
        )

        logger.debug(
            f"Built {len(plan)} chunk matchers ({options.strategy.value}) from "
            f"{len(declared)} dependencies and hints {sorted(hints)}"
        )
        return plan

    def _custom_groups(self, options: "ChunkSplitOptions") -> List[ChunkGroupSpec]:
        specs = []
        for name, patterns in (options.groups or {}).items():
            if not patterns:
                logger.debug(f"Skipping custom chunk group '{name}' with no patterns")
                continue
            parsed = [parse_pattern(pattern, group=name) for pattern in patterns]
            specs.append(ChunkGroupSpec(
                name=name,
                patterns=tuple(order_patterns(parsed)),
                tier=PriorityTier.CUSTOM_GROUP,
            ))
        return specs

    def _hint_groups(self, hints: AbstractSet[str]) -> List[ChunkGroupSpec]:
        specs = []
        for token, (group_name, fragments) in HINT_GROUPS.items():
            if token in hints:
                specs.append(ChunkGroupSpec(
                    name=group_name,
                    patterns=tuple(parse_pattern(fragment) for fragment in fragments),
                    tier=PriorityTier.HINT_DETECTED,
                ))
        return specs

    @staticmethod
    def _ordered_dependencies(dependencies: Optional[Iterable[str]]) -> List[str]:
        """Stable, de-duplicated dependency order; unordered sets are sorted."""
        if not dependencies:
            return []
        if isinstance(dependencies, (set, frozenset)):
            return sorted(dependencies)
        return list(dict.fromkeys(dependencies))


def build_matchers(
    options: "ChunkSplitOptions",
    dependencies: Optional[Iterable[str]] = None,
    hints: Optional[AbstractSet[str]] = None,
) -> MatcherPlan:
    """
    Convenience function to build a matcher plan.

    Args:
        options: Resolved plugin options
        dependencies: Declared dependency names
        hints: Framework hint tokens

    Returns:
        Immutable MatcherPlan
    """
    return MatcherBuilder().build(options, dependencies, hints)
