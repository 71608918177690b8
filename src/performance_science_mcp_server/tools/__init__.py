"""
MCP tools registry for Performance Science MCP Server.

This module registers all available MCP tools with the FastMCP server instance.
"""

from mcp.server.fastmcp import FastMCP  # pylint: disable=import-error

# Note: Tools register themselves via @mcp.tool() decorators when imported
from performance_science_mcp_server.tools.athletes import (  # noqa: F401
    register_athlete,
)
from performance_science_mcp_server.tools.logs import (  # noqa: F401
    add_training_log,
    get_training_logs,
)
from performance_science_mcp_server.tools.insights import (  # noqa: F401
    get_calibration_status,
    get_insights_snapshot,
    get_recovery_readiness,
    get_workload_ratio,
)


def register_tools(mcp_instance: FastMCP) -> None:
    """
    Register all MCP tools with the FastMCP server instance.

    Importing this package runs the @mcp.tool() decorators; the instance is
    accepted so callers can make the dependency explicit.

    Args:
        mcp_instance (FastMCP): The FastMCP server instance to register tools with.
    """
    _ = mcp_instance


__all__ = [
    "register_tools",
    "register_athlete",
    "add_training_log",
    "get_training_logs",
    "get_workload_ratio",
    "get_recovery_readiness",
    "get_calibration_status",
    "get_insights_snapshot",
]
