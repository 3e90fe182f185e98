"""
Decorator-based error handling for MCP entry points.

Tools and resources report failures as formatted responses instead of
raising through the MCP transport. Supports both synchronous and
asynchronous functions.
"""

import asyncio
import functools
import json
import logging
from typing import Any, Callable, Dict, List, Union

logger = logging.getLogger(__name__)

ErrorResponse = Union[str, Dict[str, Any], List[Dict[str, Any]]]


def _format_error(error: Exception, return_type: str) -> ErrorResponse:
    """Shape an exception according to the entry point's return type."""
    message = str(error)

    if return_type == "dict":
        return {"error": f"Operation failed: {message}", "error_type": type(error).__name__}
    elif return_type == "json":
        return json.dumps({"error": f"Operation failed: {message}"})
    elif return_type == "list":
        return [{"error": f"Operation failed: {message}"}]
    else:  # return_type == 'str' (default)
        return f"Error: {message}"


def handle_mcp_errors(return_type: str = "str") -> Callable:
    """
    Decorator to handle exceptions in MCP entry points consistently.

    Args:
        return_type: The expected return type format
            - 'str': Returns error as string format "Error: {message}"
            - 'dict': Returns error as dict {"error": "Operation failed: {message}", ...}
            - 'json': Returns error as JSON string with dict format
            - 'list': Returns error as list format [{"error": "Operation failed: {message}"}]

    Returns:
        Decorator function that wraps MCP entry points with error handling

    Example:
        @mcp.tool()
        @handle_mcp_errors(return_type='dict')
        def classify_module(module_id: str, ctx: Context) -> Dict[str, Any]:
            return ChunkPlanService(ctx).classify_module(module_id)
    """

    def decorator(func: Callable) -> Callable:
        if asyncio.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    logger.warning(f"{func.__name__} failed: {e}")
                    return _format_error(e, return_type)

            return async_wrapper

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.warning(f"{func.__name__} failed: {e}")
                return _format_error(e, return_type)

        return sync_wrapper

    return decorator


def handle_mcp_resource_errors(func: Callable) -> Callable:
    """Error handler for MCP resources, which always return strings."""
    return handle_mcp_errors(return_type="str")(func)


def handle_mcp_tool_errors(return_type: str = "str") -> Callable:
    """Error handler for MCP tools with flexible return types."""
    return handle_mcp_errors(return_type=return_type)
