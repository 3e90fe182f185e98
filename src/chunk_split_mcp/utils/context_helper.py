"""
Context access utilities and helpers.

Services read and replace the chunk splitting state held in the MCP
lifespan context through this helper.
"""

from typing import Optional, Tuple

from mcp.server.fastmcp import Context

from ..plugin import ChunkSplitPlugin


class ContextHelper:
    """
    Helper class for convenient access to MCP Context data.

    Wraps the MCP Context object and exposes the project root, the active
    plugin instance and the host plugin names of the lifespan context.
    """

    def __init__(self, ctx: Context):
        """
        Initialize the context helper.

        Args:
            ctx: The MCP Context object
        """
        self.ctx = ctx

    @property
    def _state(self):
        return self.ctx.request_context.lifespan_context

    @property
    def project_root(self) -> str:
        """The configured project root, or empty string if not set."""
        try:
            return self._state.project_root
        except AttributeError:
            return ""

    @property
    def plugin(self) -> ChunkSplitPlugin:
        """The plugin instance holding options and the current plan."""
        return self._state.plugin

    @property
    def plugin_names(self) -> Tuple[str, ...]:
        """Host plugin names used for framework hint detection."""
        try:
            return self._state.plugin_names
        except AttributeError:
            return ()

    def get_project_root_error(self) -> Optional[str]:
        """
        Get an error message if the project root is not usable.

        Returns:
            Error message string if invalid, None if valid
        """
        if not self.project_root:
            return ("Project path not set. Please use set_project_path to set a "
                    "project directory first.")
        return None

    def update_project_root(self, path: str) -> None:
        """Replace the project root in the context."""
        self._state.project_root = path

    def update_plugin(self, plugin: ChunkSplitPlugin) -> None:
        """Replace the plugin instance in the context."""
        self._state.plugin = plugin

    def update_plugin_names(self, plugin_names: Tuple[str, ...]) -> None:
        """Replace the host plugin names in the context."""
        self._state.plugin_names = plugin_names
