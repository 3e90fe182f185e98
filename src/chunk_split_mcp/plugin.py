"""
Host build-tool plugin adapter.

ChunkSplitPlugin wires the classification engine into the host's lifecycle:
the config hook injects output naming and the manualChunks hook, the
config-resolved hook builds a fresh matcher plan for the build, and the
manualChunks hook classifies modules against it.
"""

import logging
import os
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from .classification import ChunkResolver, MatcherBuilder, MatcherPlan, create_resolver
from .constants import STRATEGY_DESCRIPTIONS
from .hints import detect_framework_hints
from .manifest import read_project_dependencies
from .options import ChunkSplitOptions, resolve_options
from .output_options import build_output_options

logger = logging.getLogger(__name__)


class ChunkSplitPlugin:
    """
    Chunk splitting plugin for one host configuration.

    The plugin holds a single resolver reference. Each config_resolved call
    builds a complete new plan and swaps the reference in one assignment, so
    manual_chunks never sees a partially built plan or a previous build's.
    """

    name = "chunk-split"
    enforce = "post"

    def __init__(self, options: Union[ChunkSplitOptions, Mapping[str, Any], None] = None):
        if isinstance(options, ChunkSplitOptions):
            self.options = options
        else:
            self.options = resolve_options(options)
        self._builder = MatcherBuilder()
        self._resolver: ChunkResolver = create_resolver(
            MatcherPlan(matchers=(), strategy=self.options.strategy, min_size=self.options.min_size)
        )

    @property
    def plan(self) -> MatcherPlan:
        return self._resolver.plan

    def config(self, user_config: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Host config hook: output naming plus the manualChunks hook."""
        return build_output_options(user_config, self.manual_chunks, override=self.options.override)

    def config_resolved(
        self,
        root: Optional[str] = None,
        plugin_names: Iterable[str] = (),
        command: str = "serve",
    ) -> MatcherPlan:
        """
        Host config-resolved hook: build the matcher plan for this build.

        Args:
            root: Project root; defaults to the current working directory
            plugin_names: Names of all plugins active in the resolved config
            command: Host command, ``build`` or ``serve``

        Returns:
            The newly installed MatcherPlan

        Raises:
            InvalidPatternError: If a custom group pattern is malformed
        """
        project_root = root or os.getcwd()
        dependencies = read_project_dependencies(project_root)
        hints = detect_framework_hints(plugin_names)

        plan = self._builder.build(self.options, dependencies, hints)
        self._resolver = create_resolver(plan)

        if command == "build":
            logger.info(f"Chunking strategy: {STRATEGY_DESCRIPTIONS[self.options.strategy.value]}")
            logger.info(f"Detected {len(plan)} chunk groups")
        return plan

    def manual_chunks(self, module_id: str) -> Optional[str]:
        """Host manualChunks hook."""
        return self._resolver(module_id)
