"""
Response formatting utilities for the MCP server.
"""

import json
from typing import Any, Dict, Optional


class ResponseFormatter:
    """Consistent response shapes for service results."""

    @staticmethod
    def success_response(message: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Format a successful operation response.

        Args:
            message: Success message
            data: Optional additional data to include

        Returns:
            Formatted success response dictionary
        """
        response = {"status": "success", "message": message}
        if data:
            response.update(data)
        return response

    @staticmethod
    def config_response(config_data: Dict[str, Any]) -> str:
        """Format configuration data as a JSON string."""
        return json.dumps(config_data, indent=2)

    @staticmethod
    def describe_output_value(value: Any) -> Any:
        """Render output option values; hooks are not JSON serializable."""
        if callable(value):
            return f"<hook {getattr(value, '__name__', type(value).__name__)}>"
        return value
