"""
Data model for chunk groups and their compiled matchers.

ChunkGroupSpec is the declarative form (a name plus package patterns).
Matcher is its compiled form and MatcherPlan is the ordered, immutable list
of matchers produced once per build.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .patterns import ModulePredicate, PackagePattern, compile_pattern
from .priority import PriorityTier


class SplitStrategy(str, Enum):
    """Named splitting policy controlling which built-in matchers are generated."""

    AGGRESSIVE = "aggressive"
    BALANCED = "balanced"
    CONSERVATIVE = "conservative"


@dataclass(frozen=True)
class ChunkGroupSpec:
    """A named chunk group and the package patterns that identify its modules."""

    name: str
    patterns: Tuple[PackagePattern, ...]
    tier: PriorityTier

    def compile(self) -> "Matcher":
        testers = tuple(compile_pattern(pattern) for pattern in self.patterns)
        return Matcher(
            name=self.name,
            priority=self.tier,
            testers=testers,
            patterns=tuple(pattern.describe() for pattern in self.patterns),
        )


@dataclass(frozen=True)
class Matcher:
    """Compiled chunk group: matches a normalized path when any tester does."""

    name: str
    priority: PriorityTier
    testers: Tuple[ModulePredicate, ...] = field(repr=False, compare=False)
    patterns: Tuple[str, ...] = ()

    def matches(self, normalized_path: str) -> bool:
        return any(test(normalized_path) for test in self.testers)


@dataclass(frozen=True)
class MatcherPlan:
    """
    Ordered matcher list for one build invocation.

    The plan is never mutated; a new build produces a new plan.
    """

    matchers: Tuple[Matcher, ...]
    strategy: SplitStrategy
    min_size: Optional[float] = None
    # Declared dependencies the plan was built from, in build order
    dependencies: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.matchers)

    def __iter__(self):
        return iter(self.matchers)

    @property
    def group_names(self) -> List[str]:
        return [matcher.name for matcher in self.matchers]

    def summary(self) -> Dict[str, Any]:
        """Read-only projection for build logs and diagnostics."""
        return {
            'strategy': self.strategy.value,
            'group_count': len(self.matchers),
            'min_size_kb': self.min_size,
            'groups': [
                {
                    'name': matcher.name,
                    'priority': int(matcher.priority),
                    'tier': matcher.priority.name.lower(),
                    'patterns': list(matcher.patterns),
                }
                for matcher in self.matchers
            ],
        }
