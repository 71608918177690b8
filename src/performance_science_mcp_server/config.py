"""
Configuration for the Performance Science MCP Server.

Settings come from environment variables, optionally loaded from a .env file.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DATA_DIR = "~/.performance_science"
VALID_TRANSPORTS = ("stdio", "sse", "streamable-http")


@dataclass(frozen=True)
class Config:
    """Server configuration."""

    athlete_id: str | None
    data_dir: Path
    transport: str
    log_level: str


def load_config() -> Config:
    """Read configuration from the environment (and .env, if present)."""
    load_dotenv()

    transport = os.getenv("MCP_TRANSPORT", "stdio").lower()
    if transport not in VALID_TRANSPORTS:
        raise ValueError(
            f"Unsupported MCP_TRANSPORT '{transport}'. Use one of: {', '.join(VALID_TRANSPORTS)}"
        )

    return Config(
        athlete_id=os.getenv("ATHLETE_ID") or None,
        data_dir=Path(os.getenv("DATA_DIR", DEFAULT_DATA_DIR)).expanduser(),
        transport=transport,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get the shared configuration instance."""
    return load_config()
