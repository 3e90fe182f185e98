"""
Project manifest reading.

Supplies the declared dependency names of a project. A missing or broken
manifest never fails the build; classification just narrows to custom and
hint-detected groups.
"""

import json
import logging
import os
from typing import Tuple

from .constants import MANIFEST_FILE

logger = logging.getLogger(__name__)


class ManifestReadError(Exception):
    """Raised internally when package.json cannot be read or parsed."""


def _load_dependency_section(manifest_path: str) -> Tuple[str, ...]:
    try:
        with open(manifest_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(f"Cannot read {manifest_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ManifestReadError(f"Invalid JSON in {manifest_path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestReadError(f"{manifest_path} does not contain a JSON object")

    dependencies = data.get('dependencies') or {}
    if not isinstance(dependencies, dict):
        raise ManifestReadError(f"'dependencies' in {manifest_path} is not an object")

    return tuple(dependencies.keys())


def read_project_dependencies(project_root: str) -> Tuple[str, ...]:
    """
    Read declared dependency names from the project's package.json.

    Args:
        project_root: Directory containing package.json

    Returns:
        Dependency names in declaration order; empty on any failure
    """
    manifest_path = os.path.join(project_root, MANIFEST_FILE)
    try:
        dependencies = _load_dependency_section(manifest_path)
    except ManifestReadError as e:
        logger.debug(f"Ignoring project manifest: {e}")
        return ()

    logger.debug(f"Read {len(dependencies)} dependencies from {manifest_path}")
    return dependencies
