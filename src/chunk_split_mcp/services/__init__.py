"""
Service layer for the Chunk Split MCP server.

MCP tool functions delegate to these services, which hold the business
logic for configuring the chunk splitter and classifying modules.
"""

from .base_service import BaseService
from .chunk_plan_service import ChunkPlanService

__all__ = [
    'BaseService',
    'ChunkPlanService'
]
