"""
Base service class providing common functionality for all services.
"""

from abc import ABC

from mcp.server.fastmcp import Context

from ..utils import ContextHelper


class BaseService(ABC):
    """
    Base class for all MCP services.

    Provides context access through ContextHelper and the shared project
    setup check.
    """

    def __init__(self, ctx: Context):
        """
        Initialize the base service.

        Args:
            ctx: The MCP Context object containing request and lifespan context
        """
        self.ctx = ctx
        self.helper = ContextHelper(ctx)

    def _require_project_setup(self) -> None:
        """
        Ensure a project root has been set.

        Raises:
            ValueError: If the project is not set up
        """
        error = self.helper.get_project_root_error()
        if error:
            raise ValueError(error)
