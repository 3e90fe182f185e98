"""
Chunk resolver.

The resolver is the per-module hook handed to the host build tool. It holds
one MatcherPlan for its whole life and has no other state, so repeated calls
with the same module id always return the same answer.
"""

import logging
from typing import Dict, Iterable, Optional

from ..constants import FALLBACK_CHUNK
from .matchers import MatcherPlan
from .normalizer import is_dependency_path, normalize_module_id

logger = logging.getLogger(__name__)


class ChunkResolver:
    """Maps module identifiers to chunk group names using a fixed plan."""

    __slots__ = ('_plan',)

    def __init__(self, plan: MatcherPlan):
        self._plan = plan

    @property
    def plan(self) -> MatcherPlan:
        return self._plan

    def resolve(self, module_id: str) -> Optional[str]:
        """
        Classify one module.

        Args:
            module_id: Raw module identifier from the host

        Returns:
            Name of the first matching group, the vendor fallback for
            unmatched third-party modules, or None for first-party modules
        """
        path = normalize_module_id(module_id)
        if not is_dependency_path(path):
            return None

        for matcher in self._plan.matchers:
            if matcher.matches(path):
                return matcher.name

        return FALLBACK_CHUNK

    __call__ = resolve

    def resolve_batch(self, module_ids: Iterable[str]) -> Dict[str, Optional[str]]:
        """
        Classify several modules.

        Args:
            module_ids: Raw module identifiers

        Returns:
            Dictionary mapping module_id -> chunk name (or None)
        """
        results = {module_id: self.resolve(module_id) for module_id in module_ids}
        logger.debug(f"Classified {len(results)} modules")
        return results


def create_resolver(plan: MatcherPlan) -> ChunkResolver:
    """Create the resolver for a freshly built plan."""
    return ChunkResolver(plan)
