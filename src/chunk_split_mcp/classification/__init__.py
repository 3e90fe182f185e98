"""
Dependency chunk classification engine.

This package turns plugin options, the project's declared dependencies and
framework hints into an ordered list of chunk matchers, and classifies
module paths against that list.

Key Components:
- normalize_module_id: Module path canonicalization
- LiteralPattern / RegexPattern: Package pattern variants and their compiler
- MatcherBuilder: Builds the priority-ordered MatcherPlan
- ChunkResolver: Maps one module path to a chunk group name
"""

from .builder import MatcherBuilder, build_matchers
from .matchers import ChunkGroupSpec, Matcher, MatcherPlan, SplitStrategy
from .normalizer import extract_package_name, is_dependency_path, normalize_module_id
from .patterns import (
    InvalidPatternError,
    LiteralPattern,
    PackagePattern,
    RegexPattern,
    compile_pattern,
    parse_pattern,
)
from .priority import PriorityTier
from .resolver import ChunkResolver, create_resolver

__all__ = [
    'MatcherBuilder',
    'build_matchers',
    'ChunkGroupSpec',
    'Matcher',
    'MatcherPlan',
    'SplitStrategy',
    'extract_package_name',
    'is_dependency_path',
    'normalize_module_id',
    'InvalidPatternError',
    'LiteralPattern',
    'PackagePattern',
    'RegexPattern',
    'compile_pattern',
    'parse_pattern',
    'PriorityTier',
    'ChunkResolver',
    'create_resolver'
]
