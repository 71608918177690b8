"""
Performance Science MCP Server

This module implements a Model Context Protocol (MCP) server that turns an
athlete's training log into performance-science indicators. Users and logs
are kept in local JSON files; every metric is recomputed from the stored logs
on each call.

Main Features:
    - Training log entry with range validation
    - Acute:Chronic Workload Ratio (ACWR)
    - Recovery Readiness score (sleep, resting HR, recent load)
    - 14-day calibration phase for new accounts
    - Training streak and week-over-week volume change

Usage:
    The server loads configuration from environment variables (optionally via
    a .env file): ATHLETE_ID, DATA_DIR, MCP_TRANSPORT, LOG_LEVEL.

    To run the server:
        $ performance-science-mcp-server

    MCP tools provided:
        Athletes:
            - register_athlete

        Training Logs:
            - add_training_log
            - get_training_logs

        Insights:
            - get_workload_ratio
            - get_recovery_readiness
            - get_calibration_status
            - get_insights_snapshot
"""

import logging

from performance_science_mcp_server.config import get_config
from performance_science_mcp_server.mcp_instance import mcp
from performance_science_mcp_server.server_setup import setup_transport, start_server

# Get configuration instance
config = get_config()

# Configure logging
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger("performance_science_mcp_server")

# Import tool modules to register them (tools register themselves via @mcp.tool() decorators)
from performance_science_mcp_server.tools import (  # pylint: disable=wrong-import-position  # noqa: E402
    add_training_log,
    get_calibration_status,
    get_insights_snapshot,
    get_recovery_readiness,
    get_training_logs,
    get_workload_ratio,
    register_athlete,
    register_tools,
)

register_tools(mcp)

__all__ = [
    "mcp",
    "register_athlete",
    "add_training_log",
    "get_training_logs",
    "get_workload_ratio",
    "get_recovery_readiness",
    "get_calibration_status",
    "get_insights_snapshot",
]


def main() -> None:
    """Console entry point."""
    logger.info("Data directory: %s", config.data_dir)
    selected_transport = setup_transport()
    start_server(mcp, selected_transport)


# Run the server
if __name__ == "__main__":
    main()
