"""
Framework hint detection from the host's active plugins.
"""

import logging
from typing import FrozenSet, Iterable

from .constants import FRAMEWORK_HINT_PLUGINS

logger = logging.getLogger(__name__)


def detect_framework_hints(plugin_names: Iterable[str]) -> FrozenSet[str]:
    """
    Derive framework hint tokens from the names of active host plugins.

    Args:
        plugin_names: Names of the plugins in the resolved host config

    Returns:
        Frozen set of hint tokens, empty when nothing is recognized
    """
    hints = frozenset(
        FRAMEWORK_HINT_PLUGINS[name] for name in plugin_names if name in FRAMEWORK_HINT_PLUGINS
    )
    if hints:
        logger.debug(f"Detected framework hints: {sorted(hints)}")
    return hints
