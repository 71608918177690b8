"""
Transport selection and startup for the Performance Science MCP Server.
"""

import logging

from mcp.server.fastmcp import FastMCP  # pylint: disable=import-error

from performance_science_mcp_server.config import get_config

logger = logging.getLogger(__name__)


def setup_transport() -> str:
    """Return the configured MCP transport name."""
    transport = get_config().transport
    logger.info("Using %s transport", transport)
    return transport


def start_server(mcp: FastMCP, transport: str) -> None:
    """Run the server until the client disconnects."""
    logger.info("Starting Performance Science MCP server")
    mcp.run(transport=transport)
