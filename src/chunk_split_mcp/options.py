"""
Chunk Split Options

This module resolves user-supplied plugin options into a fully defaulted,
immutable ChunkSplitOptions value. Options can come from a mapping (the
host's camelCase keys or snake_case equivalents) or from a JSON options file
in the project root.
"""
import json
import logging
import math
import os
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .classification.matchers import SplitStrategy
from .classification.patterns import PackagePattern, parse_pattern
from .constants import DEFAULT_MIN_SIZE_KB, DEFAULT_STRATEGY, OPTIONS_FILE

logger = logging.getLogger(__name__)


class InvalidOptionsError(ValueError):
    """Raised when plugin options cannot be resolved."""


GroupTable = Mapping[str, Tuple[PackagePattern, ...]]


@dataclass(frozen=True)
class ChunkSplitOptions:
    """Resolved configuration for one plugin instance."""

    override: bool = False
    strategy: SplitStrategy = SplitStrategy(DEFAULT_STRATEGY)
    # Declared for compatibility; no classification path consults it yet.
    min_size: float = DEFAULT_MIN_SIZE_KB
    groups: Optional[GroupTable] = field(default=None)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view using the host's option names."""
        data: Dict[str, Any] = {
            "override": self.override,
            "strategy": self.strategy.value,
            "minSize": self.min_size,
        }
        if self.groups is not None:
            data["groups"] = {
                name: [pattern.describe() for pattern in patterns]
                for name, patterns in self.groups.items()
            }
        return data


def _resolve_groups(raw_groups: Any) -> Optional[GroupTable]:
    if raw_groups is None:
        return None
    if not isinstance(raw_groups, Mapping):
        raise InvalidOptionsError("groups must be a mapping of chunk name to pattern list")

    groups: Dict[str, Tuple[PackagePattern, ...]] = {}
    for name, patterns in raw_groups.items():
        if not isinstance(name, str) or not name:
            raise InvalidOptionsError(f"Chunk group names must be non-empty strings, got {name!r}")
        if isinstance(patterns, (str, bytes)) or not hasattr(patterns, '__iter__'):
            raise InvalidOptionsError(f"Patterns for chunk group '{name}' must be a list")
        groups[name] = tuple(parse_pattern(pattern, group=name) for pattern in patterns)
    return MappingProxyType(groups)


def _resolve_strategy(value: Any) -> SplitStrategy:
    if isinstance(value, SplitStrategy):
        return value
    try:
        return SplitStrategy(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in SplitStrategy)
        raise InvalidOptionsError(
            f"Unknown strategy {value!r}; expected one of: {allowed}"
        ) from None


def _resolve_min_size(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidOptionsError(f"minSize must be a number of kilobytes, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidOptionsError(f"minSize must be a finite, non-negative number, got {value!r}")
    return value


def resolve_options(raw: Optional[Mapping[str, Any]] = None) -> ChunkSplitOptions:
    """
    Merge user-supplied options with defaults.

    Args:
        raw: Option mapping; recognized keys are override, strategy,
             minSize (or min_size) and groups

    Returns:
        Fully defaulted ChunkSplitOptions

    Raises:
        InvalidOptionsError: If an option has the wrong type or value
        InvalidPatternError: If a custom group pattern is malformed
    """
    raw = dict(raw or {})

    override = raw.get("override", False)
    if not isinstance(override, bool):
        raise InvalidOptionsError(f"override must be a boolean, got {override!r}")

    strategy = _resolve_strategy(raw.get("strategy") or DEFAULT_STRATEGY)
    min_size = _resolve_min_size(raw.get("minSize", raw.get("min_size", DEFAULT_MIN_SIZE_KB)))
    groups = _resolve_groups(raw.get("groups"))

    unknown = set(raw) - {"override", "strategy", "minSize", "min_size", "groups"}
    if unknown:
        logger.warning(f"Ignoring unknown chunk split options: {', '.join(sorted(unknown))}")

    return ChunkSplitOptions(override=override, strategy=strategy, min_size=min_size, groups=groups)


def load_options_file(path: str) -> ChunkSplitOptions:
    """
    Load options from a JSON file.

    Args:
        path: Path to the options file, or to a directory containing
              chunk-split.json

    Returns:
        Resolved options; defaults when the file does not exist

    Raises:
        InvalidOptionsError: If the file exists but is not a JSON object
    """
    if os.path.isdir(path):
        path = os.path.join(path, OPTIONS_FILE)

    if not os.path.exists(path):
        logger.debug(f"No options file at {path}, using defaults")
        return resolve_options()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidOptionsError(f"Could not read options file {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidOptionsError(f"Options file {path} must contain a JSON object")

    return resolve_options(data)
