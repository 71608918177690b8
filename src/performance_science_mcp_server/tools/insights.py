"""Performance science insight tools (ACWR, recovery readiness, calibration)."""

import json

from performance_science_mcp_server.analytics.calibration import (
    get_calibration_status as check_calibration,
)
from performance_science_mcp_server.analytics.consistency import (
    calculate_athlete_level,
    calculate_streak_milestones,
    calculate_training_streak,
    calculate_weekly_volume_change,
    describe_volume_change,
)
from performance_science_mcp_server.analytics.load import calculate_acwr
from performance_science_mcp_server.analytics.recovery import calculate_recovery_score
from performance_science_mcp_server.config import get_config
from performance_science_mcp_server.mcp_instance import mcp
from performance_science_mcp_server.storage import StorageError, get_store
from performance_science_mcp_server.utils.dates import utc_now
from performance_science_mcp_server.utils.formatting import (
    format_calibration_status,
    format_insight,
)
from performance_science_mcp_server.utils.validation import resolve_athlete_id

config = get_config()


@mcp.tool()
async def get_workload_ratio(athlete_id: str | None = None) -> str:
    """Get the Acute:Chronic Workload Ratio for an athlete.

    ACWR = 7-day average load / 28-day average load, Load = Duration × RPE.
    - < 0.8: Under-training
    - 0.8-1.3: Optimal "sweet spot"
    - 1.3-1.5: High workload, monitor fatigue
    - > 1.5: Load spike, elevated injury risk

    Requires at least 14 logged sessions.

    Args:
        athlete_id: Athlete ID (optional, will use ATHLETE_ID from .env if not provided)
    """
    athlete_id_to_use, error_msg = resolve_athlete_id(athlete_id, config.athlete_id)
    if error_msg:
        return error_msg

    try:
        logs = get_store().load_logs(athlete_id_to_use)
        insight = calculate_acwr(logs, utc_now())
    except (StorageError, ValueError) as e:
        return f"Error calculating workload ratio: {e}"

    return format_insight(insight)


@mcp.tool()
async def get_recovery_readiness(athlete_id: str | None = None) -> str:
    """Get today's Recovery Readiness score (0-100) for an athlete.

    Weighted from the latest session's sleep (40%), resting HR deviation from
    the recent baseline (30%) and the load of the last 3 sessions (30%).
    - ≥ 75: Ready for high intensity
    - 50-74: Consider reduced intensity
    - < 50: Recovery session recommended

    Requires at least 7 logged sessions.

    Args:
        athlete_id: Athlete ID (optional, will use ATHLETE_ID from .env if not provided)
    """
    athlete_id_to_use, error_msg = resolve_athlete_id(athlete_id, config.athlete_id)
    if error_msg:
        return error_msg

    try:
        logs = get_store().load_logs(athlete_id_to_use)
        insight = calculate_recovery_score(logs)
    except (StorageError, ValueError) as e:
        return f"Error calculating recovery readiness: {e}"

    return format_insight(insight)


@mcp.tool()
async def get_calibration_status(athlete_id: str | None = None) -> str:
    """Check whether an athlete is still in the 14-day calibration phase.

    Args:
        athlete_id: Athlete ID (optional, will use ATHLETE_ID from .env if not provided)
    """
    athlete_id_to_use, error_msg = resolve_athlete_id(athlete_id, config.athlete_id)
    if error_msg:
        return error_msg

    try:
        user = get_store().load_user(athlete_id_to_use)
        if user is None:
            return f"Error: Athlete {athlete_id_to_use} is not registered."
        status = check_calibration(user.joined_at, utc_now())
    except (StorageError, ValueError) as e:
        return f"Error checking calibration status: {e}"

    return format_calibration_status(status)


@mcp.tool()
async def get_insights_snapshot(athlete_id: str | None = None) -> str:
    """Get every derived metric for an athlete in one JSON document.

    Includes ACWR, Recovery Readiness, calibration phase (when the athlete is
    registered), current training streak with milestone progress, week-over-week
    volume change and the athlete level.

    Args:
        athlete_id: Athlete ID (optional, will use ATHLETE_ID from .env if not provided)

    Returns:
        JSON string with snapshot data
    """
    athlete_id_to_use, error_msg = resolve_athlete_id(athlete_id, config.athlete_id)
    if error_msg:
        return error_msg

    now = utc_now()
    try:
        store = get_store()
        logs = store.load_logs(athlete_id_to_use)
        user = store.load_user(athlete_id_to_use)

        calibration = check_calibration(user.joined_at, now) if user else None
        volume_change = calculate_weekly_volume_change(logs, now)
        streak = calculate_training_streak(logs, now)
        level, xp_percent = calculate_athlete_level(len(logs))

        snapshot = {
            "metadata": {
                "athlete_id": athlete_id_to_use,
                "snapshot_date": now.isoformat(),
                "log_count": len(logs),
            },
            "calibration": calibration.to_dict() if calibration else None,
            "insights": {
                "acwr": calculate_acwr(logs, now).to_dict(),
                "recovery": calculate_recovery_score(logs).to_dict(),
            },
            "consistency": {
                "streak_days": streak,
                "streak_milestones": calculate_streak_milestones(streak),
                "weekly_volume_change_pct": volume_change,
                "summary": describe_volume_change(volume_change),
            },
            "level": {
                "name": level,
                "xp_percent": xp_percent,
            },
        }
    except (StorageError, ValueError) as e:
        return f"Error building insights snapshot: {e}"

    return json.dumps(snapshot, indent=2, default=str)
