"""
Common validation logic for the MCP server.
"""

import os
from typing import Any, List, Optional


class ValidationHelper:
    """Static validation helpers shared by services."""

    @staticmethod
    def validate_directory_path(dir_path: str) -> Optional[str]:
        """
        Validate a directory path for project initialization.

        Args:
            dir_path: The directory path to validate

        Returns:
            Error message if validation fails, None if valid
        """
        if not dir_path:
            return "Directory path cannot be empty"

        try:
            abs_path = os.path.abspath(os.path.normpath(dir_path))
        except (OSError, ValueError) as e:
            return f"Invalid path format: {str(e)}"

        if not os.path.exists(abs_path):
            return f"Path does not exist: {abs_path}"

        if not os.path.isdir(abs_path):
            return f"Path is not a directory: {abs_path}"

        return None

    @staticmethod
    def validate_module_ids(module_ids: Any) -> Optional[str]:
        """
        Validate a batch of module identifiers.

        Args:
            module_ids: Value supplied for a list of module ids

        Returns:
            Error message if validation fails, None if valid
        """
        if not isinstance(module_ids, list):
            return "module_ids must be a list of strings"

        invalid: List[Any] = [value for value in module_ids if not isinstance(value, str)]
        if invalid:
            return f"module_ids must contain only strings, got {invalid[0]!r}"

        return None
