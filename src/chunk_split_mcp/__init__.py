"""
Chunk Split MCP

Classifies third-party dependency modules into named output chunks so that
large or related libraries are kept out of the generic vendor bundle.
"""

__version__ = "0.1.0"
