"""Baseline and rolling window calculations over training logs."""

from datetime import datetime, timedelta
from typing import Iterable

from performance_science_mcp_server.utils.dates import ensure_aware
from performance_science_mcp_server.utils.types import TrainingLog

DEFAULT_RESTING_HR = 60.0


def session_load(log: TrainingLog) -> float:
    """Training load of one session.

    Load = Duration (min) × Intensity (RPE 1-10)
    """
    return log.duration * log.intensity


def sort_newest_first(logs: Iterable[TrainingLog]) -> list[TrainingLog]:
    """Return a new list of logs ordered by timestamp, most recent first.

    The sort is stable, so logs sharing a timestamp keep the caller's order.
    """
    return sorted(logs, key=lambda log: log.timestamp, reverse=True)


def logs_since(logs: Iterable[TrainingLog], cutoff: datetime) -> list[TrainingLog]:
    """Logs whose timestamp is strictly after cutoff."""
    cutoff = ensure_aware(cutoff)
    return [log for log in logs if log.timestamp > cutoff]


def rolling_average_load(
    logs: Iterable[TrainingLog],
    window_days: int,
    now: datetime,
) -> float:
    """Calculate average daily load over the trailing window_days.

    The total is divided by the window length, not by the number of
    sessions, so rest days count as zero-load days.

    Args:
        logs: Training logs in any order
        window_days: Window length in days
        now: Reference time; the window is (now - window_days, ...]

    Returns:
        Average load per day (0.0 when no log falls in the window)
    """
    window_logs = logs_since(logs, ensure_aware(now) - timedelta(days=window_days))
    if not window_logs:
        return 0.0

    return sum(session_load(log) for log in window_logs) / window_days


def resting_hr_baseline(
    logs: list[TrainingLog],
    sample_size: int = 7,
    default: float = DEFAULT_RESTING_HR,
) -> float:
    """Average resting heart rate over the most recent logs that recorded one.

    Args:
        logs: Training logs ordered newest first
        sample_size: Maximum number of recorded values to average
        default: Baseline used when no log recorded a resting HR

    Returns:
        Baseline resting HR in bpm
    """
    values = [
        float(log.resting_heart_rate)
        for log in logs
        if log.resting_heart_rate is not None
    ][:sample_size]

    if not values:
        return default

    return sum(values) / len(values)
