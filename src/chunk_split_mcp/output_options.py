"""
Output file naming for the host's bundle output.

Fills in entry, chunk and asset file-name templates plus the manualChunks
hook, either replacing the user's output options or only filling gaps.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from .constants import (
    ASSET_DIRECTORIES,
    ASSET_FILE_TEMPLATE,
    CHUNK_FILE_NAMES,
    DEFAULT_ASSET_DIRECTORY,
    ENTRY_FILE_NAMES,
)

logger = logging.getLogger(__name__)


def asset_file_name(asset_name: Optional[str]) -> str:
    """
    Pick the output template for an emitted asset by its extension.

    Args:
        asset_name: Asset file name as reported by the host, may be None

    Returns:
        File-name template such as ``css/[name]-[hash][extname]``
    """
    name = asset_name or ''
    extension = name.rsplit('.', 1)[-1].lower()

    for directory, extensions in ASSET_DIRECTORIES.items():
        if extension in extensions:
            return ASSET_FILE_TEMPLATE.format(directory=directory)
    return ASSET_FILE_TEMPLATE.format(directory=DEFAULT_ASSET_DIRECTORY)


def _asset_file_names_hook(asset_info: Any) -> str:
    """Host hook form: accepts the asset info mapping or object."""
    if isinstance(asset_info, Mapping):
        return asset_file_name(asset_info.get('name'))
    return asset_file_name(getattr(asset_info, 'name', None))


def build_output_options(
    user_config: Optional[Mapping[str, Any]],
    manual_chunks: Callable[[str], Optional[str]],
    override: bool = False,
) -> Dict[str, Any]:
    """
    Build the configuration fragment returned from the host's config hook.

    Args:
        user_config: The user's host configuration, may be None
        manual_chunks: Per-module chunk naming hook
        override: Replace existing output options instead of filling gaps

    Returns:
        ``{"build": {"rollupOptions": {"output": ...}}}``
    """
    injected = {
        'entryFileNames': ENTRY_FILE_NAMES,
        'chunkFileNames': CHUNK_FILE_NAMES,
        'assetFileNames': _asset_file_names_hook,
        'manualChunks': manual_chunks,
    }

    existing = (
        ((user_config or {}).get('build') or {}).get('rollupOptions') or {}
    ).get('output')
    should_merge = not override and isinstance(existing, Mapping)

    if should_merge:
        output = dict(existing)
        for key, value in injected.items():
            output.setdefault(key, value)
        kept = sorted(set(existing) & set(injected))
        if kept:
            logger.debug(f"Keeping user output options: {', '.join(kept)}")
    else:
        output = injected

    return {'build': {'rollupOptions': {'output': output}}}
