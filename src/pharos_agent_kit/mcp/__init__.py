"""
Pharos Agent Kit MCP server

Serves every registered action as an MCP tool over stdio.
"""

from .server import ActionMcpServer, create_mcp_server, start_mcp_server

__all__ = [
    "ActionMcpServer",
    "create_mcp_server",
    "start_mcp_server",
]
