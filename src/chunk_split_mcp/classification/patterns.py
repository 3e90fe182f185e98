"""
Package pattern parsing and compilation.

A chunk group recognizes its modules through package patterns. A pattern is
either a literal package name or a regular expression. Literal names are
compiled into boundary-safe expressions so that ``react`` never claims
``react-dom`` or ``react-router``.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Pattern

logger = logging.getLogger(__name__)

ModulePredicate = Callable[[str], bool]

# "/body/flags" strings in serialized options are regular expressions
_REGEX_LITERAL = re.compile(r"^/(?P<body>.+)/(?P<flags>[a-z]*)$", re.DOTALL)

_REGEX_FLAGS = {
    'i': re.IGNORECASE,
    'm': re.MULTILINE,
    's': re.DOTALL,
    'x': re.VERBOSE,
}

# Global and unicode flags have no effect on a single search over a str path
_IGNORED_FLAGS = frozenset('gu')


class InvalidPatternError(ValueError):
    """Raised when a configured chunk group pattern cannot be compiled."""

    def __init__(self, group: Optional[str], pattern: Any, reason: str):
        self.group = group
        self.pattern = pattern
        self.reason = reason
        where = f"chunk group '{group}'" if group else "chunk group"
        super().__init__(f"Invalid pattern {pattern!r} in {where}: {reason}")


class PackagePattern:
    """Base class for the two pattern variants."""

    def sort_length(self) -> int:
        """Length used to order patterns within a group, longest first."""
        return 0

    def describe(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class LiteralPattern(PackagePattern):
    """A literal package name or scope prefix such as ``react`` or ``@vue/``."""

    name: str

    @property
    def is_scoped(self) -> bool:
        return self.name.startswith('@')

    def sort_length(self) -> int:
        return len(self.name)

    def describe(self) -> str:
        return self.name


@dataclass(frozen=True)
class RegexPattern(PackagePattern):
    """A caller-supplied regular expression, tested against the normalized path."""

    expression: Pattern

    def describe(self) -> str:
        flags = ''.join(
            letter for letter, flag in _REGEX_FLAGS.items() if self.expression.flags & flag
        )
        return f"/{self.expression.pattern}/{flags}"


def parse_pattern(value: Any, group: Optional[str] = None) -> PackagePattern:
    """
    Turn a configured pattern value into a PackagePattern.

    Args:
        value: Package name, ``/body/flags`` string, compiled re.Pattern or
               an existing PackagePattern
        group: Name of the chunk group the pattern belongs to, for errors

    Returns:
        LiteralPattern or RegexPattern

    Raises:
        InvalidPatternError: If the value is empty, of an unsupported type or
                             an invalid regular expression
    """
    if isinstance(value, PackagePattern):
        return value

    if isinstance(value, re.Pattern):
        return RegexPattern(value)

    if not isinstance(value, str):
        raise InvalidPatternError(group, value, f"unsupported pattern type {type(value).__name__}")

    if not value.strip():
        raise InvalidPatternError(group, value, "pattern must not be empty")

    match = _REGEX_LITERAL.match(value)
    if match:
        flags = 0
        for letter in match.group('flags'):
            if letter in _IGNORED_FLAGS:
                continue
            if letter not in _REGEX_FLAGS:
                raise InvalidPatternError(group, value, f"unsupported regex flag '{letter}'")
            flags |= _REGEX_FLAGS[letter]
        try:
            return RegexPattern(re.compile(match.group('body'), flags))
        except re.error as e:
            raise InvalidPatternError(group, value, str(e)) from e

    return LiteralPattern(value.strip())


def build_literal_expression(name: str) -> Pattern:
    """
    Build the boundary-safe expression for a literal package name.

    The name must follow a ``/node_modules/`` segment (optionally through a
    ``.pnpm/`` store directory) and be followed by a separator, an ``@``
    version suffix or the end of the path. Unscoped names may also sit
    under any ``@scope/``. A name ending in ``/`` is a scope prefix and the
    slash itself is the boundary.

    Args:
        name: Literal package name

    Returns:
        Case-insensitive compiled expression
    """
    escaped = re.escape(name)
    body = escaped if name.startswith('@') else f"(?:@[^/]+/)?{escaped}"
    boundary = '' if name.endswith('/') else '(?:/|@|$)'
    return re.compile(f"/node_modules/(?:[.]pnpm/)?(?:{body}){boundary}", re.IGNORECASE)


def compile_pattern(pattern: PackagePattern) -> ModulePredicate:
    """
    Compile one pattern into a predicate over normalized module paths.

    Args:
        pattern: LiteralPattern or RegexPattern

    Returns:
        Callable returning True when the path belongs to the pattern
    """
    if isinstance(pattern, RegexPattern):
        return lambda path: pattern.expression.search(path) is not None

    if isinstance(pattern, LiteralPattern):
        expression = build_literal_expression(pattern.name)
        return lambda path: expression.search(path) is not None

    raise InvalidPatternError(None, pattern, f"unsupported pattern type {type(pattern).__name__}")


def order_patterns(patterns):
    """Order a group's patterns longest literal first; regexes sort last."""
    return sorted(patterns, key=lambda pattern: pattern.sort_length(), reverse=True)
