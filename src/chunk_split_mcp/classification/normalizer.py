"""
Module path normalization utilities.

Host build tools hand over module identifiers in platform-specific forms
(Windows separators, URL-escaped backslashes). Matching is always done
against the canonical forward-slash form produced here.
"""

import logging

logger = logging.getLogger(__name__)

NODE_MODULES_SEGMENT = "/node_modules/"


def normalize_module_id(module_id: str) -> str:
    """
    Canonicalize a module identifier for matching.

    Backslash separators and literal ``%5C`` escapes both become ``/``.
    Normalizing an already normalized path returns it unchanged.

    Args:
        module_id: Raw module identifier from the host

    Returns:
        Normalized module path
    """
    return module_id.replace('\\', '/').replace('%5C', '/')


def is_dependency_path(normalized_path: str) -> bool:
    """Check whether a normalized path lives inside a node_modules directory."""
    return NODE_MODULES_SEGMENT in normalized_path


def extract_package_name(normalized_path: str) -> str:
    """
    Extract the innermost package name from a dependency path.

    Nested store layouts put the real package under the last node_modules
    segment, so that one wins.

    Args:
        normalized_path: Path already passed through normalize_module_id

    Returns:
        Package name such as ``react`` or ``@vue/reactivity``, or an empty
        string for paths outside node_modules
    """
    if not is_dependency_path(normalized_path):
        return ""

    remainder = normalized_path.rsplit(NODE_MODULES_SEGMENT, 1)[1]
    parts = remainder.split('/')

    # Handle scoped packages
    if parts[0].startswith('@') and len(parts) >= 2:
        return f"{parts[0]}/{parts[1]}"
    return parts[0]
