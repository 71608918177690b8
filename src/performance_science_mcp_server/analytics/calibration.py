"""Account-age calibration phase."""

from datetime import datetime

from performance_science_mcp_server.utils.dates import parse_timestamp, whole_days_between
from performance_science_mcp_server.utils.types import CalibrationStatus

CALIBRATION_PERIOD_DAYS = 14


def get_calibration_status(joined_at: str, now: datetime) -> CalibrationStatus:
    """Check whether a user is still inside the initial data-gathering window.

    Independent of log volume: the workload and recovery calculators apply
    their own minimum-log checks.

    Args:
        joined_at: ISO-8601 account creation time
        now: Reference time

    Returns:
        CalibrationStatus with days remaining (never negative)
    """
    days_since_joined = max(0, whole_days_between(parse_timestamp(joined_at), now))

    return CalibrationStatus(
        is_calibrating=days_since_joined < CALIBRATION_PERIOD_DAYS,
        days_remaining=max(0, CALIBRATION_PERIOD_DAYS - days_since_joined),
    )
