"""Training log entry and history tools."""

import logging
import uuid
from typing import Any

from performance_science_mcp_server.analytics.baselines import sort_newest_first
from performance_science_mcp_server.config import get_config
from performance_science_mcp_server.mcp_instance import mcp
from performance_science_mcp_server.storage import StorageError, get_store
from performance_science_mcp_server.utils.dates import parse_timestamp, utc_now
from performance_science_mcp_server.utils.formatting import format_training_log
from performance_science_mcp_server.utils.types import MetricValue, TrainingLog
from performance_science_mcp_server.utils.validation import (
    resolve_athlete_id,
    validate_training_input,
)

logger = logging.getLogger(__name__)

config = get_config()


@mcp.tool()
async def add_training_log(
    duration: float,
    intensity: float,
    athlete_id: str | None = None,
    date: str | None = None,
    sport_type: str | None = None,
    training_type: str | None = None,
    sleep_hours: float | None = None,
    resting_heart_rate: float | None = None,
    metrics: dict[str, MetricValue] | None = None,
    notes: str = "",
) -> str:
    """Log a training session for an athlete.

    Values are range-checked before anything is stored:
    - duration: 1-480 minutes
    - intensity: 1-10 (RPE)
    - sleep_hours: 0-24
    - resting_heart_rate: 30-200 bpm

    Args:
        duration: Session duration in minutes
        intensity: Perceived exertion, 1-10
        athlete_id: Athlete ID (optional, will use ATHLETE_ID from .env if not provided)
        date: Session time (ISO-8601, default: now)
        sport_type: Sport, e.g. Running, Gym, Cycling (optional)
        training_type: Strength, Cardio, Skill, Match or Recovery (optional)
        sleep_hours: Hours slept before the session (optional)
        resting_heart_rate: Morning resting heart rate in bpm (optional)
        metrics: Sport-specific values, e.g. {"distance_km": 10.2} (optional)
        notes: Free-text notes
    """
    athlete_id_to_use, error_msg = resolve_athlete_id(athlete_id, config.athlete_id)
    if error_msg:
        return error_msg

    candidate: dict[str, Any] = {
        "duration": duration,
        "intensity": intensity,
        "sleep_hours": sleep_hours,
        "resting_heart_rate": resting_heart_rate,
        "metrics": metrics,
    }
    rejection = validate_training_input(candidate)
    if rejection:
        logger.warning("Rejected training log for %s: %s", athlete_id_to_use, rejection)
        return f"Error: {rejection}"

    if date:
        try:
            parse_timestamp(date)
        except ValueError:
            return f"Error: Invalid date '{date}'. Use ISO-8601, e.g. 2026-02-21T07:30:00Z"
    else:
        date = utc_now().isoformat()

    log = TrainingLog(
        id=uuid.uuid4().hex[:12],
        athlete_id=athlete_id_to_use,
        date=date,
        duration=duration,
        intensity=intensity,
        sleep_hours=sleep_hours,
        resting_heart_rate=resting_heart_rate,
        sport_type=sport_type,
        training_type=training_type,
        metrics=dict(metrics or {}),
        notes=notes,
    )

    try:
        get_store().add_log(log)
    except StorageError as e:
        return f"Error saving training log: {e}"

    return f"Training log saved.\n\n{format_training_log(log)}"


@mcp.tool()
async def get_training_logs(
    athlete_id: str | None = None,
    limit: int = 10,
) -> str:
    """Get an athlete's most recent training logs.

    Args:
        athlete_id: Athlete ID (optional, will use ATHLETE_ID from .env if not provided)
        limit: Maximum number of logs to return (default: 10)
    """
    athlete_id_to_use, error_msg = resolve_athlete_id(athlete_id, config.athlete_id)
    if error_msg:
        return error_msg

    if limit < 1:
        return f"Error: limit must be at least 1, got {limit}."

    try:
        logs = get_store().load_logs(athlete_id_to_use)
    except StorageError as e:
        return f"Error loading training logs: {e}"

    if not logs:
        return f"No training logs found for athlete {athlete_id_to_use}."

    try:
        logs = sort_newest_first(logs)[:limit]
    except ValueError as e:
        return f"Error reading training log dates: {e}"

    output = [f"Training logs for {athlete_id_to_use} ({len(logs)} most recent):\n"]
    output.extend(f"{format_training_log(log)}\n" for log in logs)
    return "\n".join(output)
