"""MCP server for DocShelf."""

from docshelf.server.mcp_server import ShelfTools, create_mcp_server

__all__ = ["ShelfTools", "create_mcp_server"]
