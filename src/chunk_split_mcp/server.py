"""
Chunk Split MCP Server

This MCP server exposes the dependency chunk classifier: it builds a chunk
plan for a JavaScript project from its package.json, the configured
splitting strategy, custom groups and the host's active plugins, and
classifies module paths into output chunks.

MCP decorators delegate to ChunkPlanService for the business logic.
"""

import logging
import os
import sys
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Dict, List, Optional, Tuple

# Third-party imports
from mcp.server.fastmcp import Context, FastMCP

# Local imports
from .plugin import ChunkSplitPlugin
from .services import ChunkPlanService
from .utils import handle_mcp_resource_errors, handle_mcp_tool_errors


def setup_logging(transport_mode: str = "stdio"):
    """
    Setup logging.

    HTTP mode logs INFO+ to stdout and ERROR+ to stderr. In stdio mode stdout
    carries the MCP protocol stream, so all log output goes to stderr.
    """

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)

    if transport_mode == "http":
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(formatter)
        stdout_handler.setLevel(logging.INFO)
        root_logger.addHandler(stdout_handler)
        stderr_handler.setLevel(logging.ERROR)
    else:
        stderr_handler.setLevel(logging.INFO)

    root_logger.addHandler(stderr_handler)
    root_logger.setLevel(logging.INFO)


logger = logging.getLogger(__name__)


@dataclass
class ChunkSplitContext:
    """Context for the Chunk Split MCP server."""

    project_root: str = ""
    plugin: ChunkSplitPlugin = field(default_factory=ChunkSplitPlugin)
    plugin_names: Tuple[str, ...] = ()


@asynccontextmanager
async def chunk_split_lifespan(_server: FastMCP) -> AsyncIterator[ChunkSplitContext]:
    """Manage the lifecycle of the Chunk Split MCP server."""
    # No default project, the client must call set_project_path
    context = ChunkSplitContext()
    logger.info("Chunk split server started")
    try:
        yield context
    finally:
        logger.info("Chunk split server stopped")


mcp = FastMCP("ChunkSplitter", lifespan=chunk_split_lifespan)

# ----- RESOURCES -----


@mcp.resource("config://chunk-split")
@handle_mcp_resource_errors
def get_config() -> str:
    """Get the current chunk split configuration."""
    ctx = mcp.get_context()
    return ChunkPlanService(ctx).get_config()


# ----- TOOLS -----


@mcp.tool()
@handle_mcp_tool_errors(return_type="str")
def set_project_path(path: str, ctx: Context) -> str:
    """Set the JavaScript project root whose package.json drives the chunk plan."""
    clean_path = path.strip().replace("\n", "").replace("\r", "")
    return ChunkPlanService(ctx).initialize_project(clean_path)


@mcp.tool()
@handle_mcp_tool_errors(return_type="dict")
def configure_chunking(
    ctx: Context,
    strategy: Optional[str] = None,
    groups: Optional[Dict[str, List[str]]] = None,
    override: Optional[bool] = None,
    min_size: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Change chunk split options and rebuild the chunk plan.

    Args:
        strategy: 'aggressive', 'balanced' (default) or 'conservative'
        groups: Custom chunk groups, chunk name -> package patterns. A pattern is
                a package name ("echarts", "@vue/") or a regular expression
                written as "/body/flags" (e.g. "/node_modules\\/lodash(?!-)/i").
        override: Replace existing output file naming instead of filling gaps
        min_size: Minimum chunk size in KB (stored, not used for classification)

    Returns:
        The resolved options and the new plan summary.
    """
    return ChunkPlanService(ctx).configure_chunking(
        strategy=strategy, groups=groups, override=override, min_size=min_size
    )


@mcp.tool()
@handle_mcp_tool_errors(return_type="dict")
def set_active_plugins(plugin_names: List[str], ctx: Context) -> Dict[str, Any]:
    """
    Tell the server which host plugins are active (e.g. "vite:vue").

    Framework plugins enable extra chunk groups even when the framework
    package itself is not a declared dependency.
    """
    return ChunkPlanService(ctx).set_active_plugins(plugin_names)


@mcp.tool()
@handle_mcp_tool_errors(return_type="dict")
def classify_module(module_id: str, ctx: Context) -> Dict[str, Any]:
    """
    Classify one module path into its output chunk.

    Returns the chunk name, "vendor" for unmatched third-party modules, or
    null for modules outside node_modules.
    """
    return ChunkPlanService(ctx).classify_module(module_id)


@mcp.tool()
@handle_mcp_tool_errors(return_type="dict")
def classify_modules(module_ids: List[str], ctx: Context) -> Dict[str, Any]:
    """Classify a batch of module paths and count modules per chunk."""
    return ChunkPlanService(ctx).classify_modules(module_ids)


@mcp.tool()
@handle_mcp_tool_errors(return_type="dict")
def get_chunk_plan(ctx: Context) -> Dict[str, Any]:
    """Get the ordered chunk groups of the current plan with their priorities."""
    return ChunkPlanService(ctx).get_chunk_plan()


@mcp.tool()
@handle_mcp_tool_errors(return_type="dict")
def get_output_options(ctx: Context, asset_names: Optional[List[str]] = None) -> Dict[str, Any]:
    """Preview injected output file naming, optionally for specific asset names."""
    return ChunkPlanService(ctx).get_output_options(asset_names)


def main():
    """Main function to run the MCP server."""
    # Support both stdio (local) and HTTP/SSE modes via environment variable
    transport_mode = os.getenv("MCP_TRANSPORT", "stdio")
    setup_logging(transport_mode)

    if transport_mode == "http":
        # nosec B104: binding to all interfaces is needed inside containers
        mcp.settings.host = os.getenv("HOST", "0.0.0.0")  # nosec B104
        mcp.settings.port = int(os.getenv("PORT", 8080))

        logger.info(
            f"Starting MCP server in HTTP/SSE mode on {mcp.settings.host}:{mcp.settings.port}"
        )
        mcp.run(transport="sse")
    else:
        logger.info("Starting MCP server in stdio mode")
        mcp.run()


if __name__ == "__main__":
    main()
