"""Performance Science MCP Server: training-log scoring engine exposed over MCP."""

__version__ = "0.1.0"
