"""
Shared FastMCP instance.

Tool modules import ``mcp`` from here so they can register with the server
without importing ``server`` (which imports them).
"""

from mcp.server.fastmcp import FastMCP  # pylint: disable=import-error

mcp = FastMCP("performance-science")
