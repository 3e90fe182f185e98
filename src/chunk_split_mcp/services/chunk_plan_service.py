"""
Chunk Plan Service - Business logic for chunk splitting over MCP.

This service configures the chunk splitter for a project, rebuilds the
matcher plan whenever its inputs change, and classifies module paths
against the current plan.
"""
import logging
import os
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional

from .base_service import BaseService
from ..classification import extract_package_name, normalize_module_id
from ..constants import OPTIONS_FILE
from ..options import load_options_file, resolve_options
from ..output_options import asset_file_name
from ..plugin import ChunkSplitPlugin
from ..utils import ResponseFormatter, ValidationHelper

logger = logging.getLogger(__name__)


class ChunkPlanService(BaseService):
    """
    Business service for chunk plan lifecycle and module classification.

    Every change of project, options or active host plugins produces a
    brand-new plan; the previous plugin instance is replaced, never edited.
    """

    def initialize_project(self, path: str) -> str:
        """
        Set the project root and build its chunk plan.

        Options are read from chunk-split.json in the project root when present,
        otherwise the currently configured options are kept.

        Args:
            path: Project directory path

        Returns:
            Success message with plan information

        Raises:
            ValueError: If the path is invalid or options are malformed
        """
        error = ValidationHelper.validate_directory_path(path)
        if error:
            raise ValueError(error)

        project_root = os.path.abspath(os.path.normpath(path))
        if os.path.exists(os.path.join(project_root, OPTIONS_FILE)):
            options = load_options_file(project_root)
        else:
            options = self.helper.plugin.options
        plugin = ChunkSplitPlugin(options)
        plan = plugin.config_resolved(project_root, self.helper.plugin_names, command="build")

        self.helper.update_project_root(project_root)
        self.helper.update_plugin(plugin)
        logger.info(f"Chunk plan ready for {project_root}")

        return (f"Project initialized: {project_root} "
                f"({len(plan)} chunk groups, strategy: {plan.strategy.value})")

    def configure_chunking(
        self,
        strategy: Optional[str] = None,
        groups: Optional[Dict[str, List[str]]] = None,
        override: Optional[bool] = None,
        min_size: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Change chunk split options and rebuild the plan.

        Unspecified options keep their current values.

        Returns:
            Success response with the new plan summary

        Raises:
            InvalidOptionsError: If an option is invalid
            InvalidPatternError: If a custom group pattern is malformed
        """
        raw = self.helper.plugin.options.to_dict()
        updates = {'strategy': strategy, 'groups': groups, 'override': override, 'minSize': min_size}
        raw.update({key: value for key, value in updates.items() if value is not None})

        plugin = ChunkSplitPlugin(resolve_options(raw))
        if self.helper.project_root:
            plugin.config_resolved(self.helper.project_root, self.helper.plugin_names, command="build")
        self.helper.update_plugin(plugin)

        return ResponseFormatter.success_response(
            "Chunk split options updated",
            {'options': plugin.options.to_dict(), 'plan': plugin.plan.summary()},
        )

    def set_active_plugins(self, plugin_names: Iterable[str]) -> Dict[str, Any]:
        """
        Record the host's active plugin names and rebuild the plan.

        Returns:
            Success response with the new plan summary
        """
        self._require_project_setup()
        names = tuple(plugin_names)
        self.helper.update_plugin_names(names)

        plugin = ChunkSplitPlugin(self.helper.plugin.options)
        plan = plugin.config_resolved(self.helper.project_root, names, command="build")
        self.helper.update_plugin(plugin)

        return ResponseFormatter.success_response(
            f"Active plugins updated ({len(names)} plugins)", {'plan': plan.summary()}
        )

    def classify_module(self, module_id: str) -> Dict[str, Any]:
        """
        Classify one module path against the current plan.

        Returns:
            Dictionary with the normalized path, package name and chunk
        """
        self._require_project_setup()
        normalized = normalize_module_id(module_id)
        return {
            'module_id': module_id,
            'normalized_path': normalized,
            'package': extract_package_name(normalized) or None,
            'chunk': self.helper.plugin.manual_chunks(module_id),
        }

    def classify_modules(self, module_ids: List[str]) -> Dict[str, Any]:
        """
        Classify a batch of module paths.

        Returns:
            Dictionary with per-module chunks and per-chunk counts
        """
        self._require_project_setup()
        error = ValidationHelper.validate_module_ids(module_ids)
        if error:
            raise ValueError(error)

        resolver = self.helper.plugin.manual_chunks
        results = {module_id: resolver(module_id) for module_id in module_ids}
        counts = Counter(chunk for chunk in results.values() if chunk is not None)

        return {
            'results': results,
            'chunk_counts': dict(counts),
            'unclassified': sum(1 for chunk in results.values() if chunk is None),
        }

    def get_chunk_plan(self) -> Dict[str, Any]:
        """Summary of the current plan for diagnostics."""
        self._require_project_setup()
        plugin = self.helper.plugin
        return {
            'project_root': self.helper.project_root,
            'dependencies': list(plugin.plan.dependencies),
            'active_plugins': list(self.helper.plugin_names),
            **plugin.plan.summary(),
        }

    def get_output_options(self, asset_names: Optional[List[str]] = None) -> Dict[str, Any]:
        """
        Preview the output options the plugin injects into the host config.

        Args:
            asset_names: Optional asset file names to resolve templates for

        Returns:
            Output options with hooks rendered as descriptions
        """
        output = self.helper.plugin.config()['build']['rollupOptions']['output']
        return {
            'output': {
                key: ResponseFormatter.describe_output_value(value) for key, value in output.items()
            },
            'assets': {name: asset_file_name(name) for name in asset_names or []},
        }

    def get_config(self) -> str:
        """Current configuration as JSON."""
        return ResponseFormatter.config_response({
            'project_root': self.helper.project_root or None,
            'options': self.helper.plugin.options.to_dict(),
            'active_plugins': list(self.helper.plugin_names),
        })
